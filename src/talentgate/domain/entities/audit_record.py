"""Audit record entity - one access decision."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from talentgate.domain.value_objects import PermissionRequest


@dataclass(frozen=True)
class AuditRecord:
    """Append-only record of a single access decision."""

    id: UUID
    user_id: str
    user_role: str
    permission_requested: PermissionRequest
    granted: bool
    timestamp: datetime
    ip_address: str | None = None
    user_agent: str | None = None
    reason: str | None = None
