"""Domain entities."""

from talentgate.domain.entities.audit_record import AuditRecord
from talentgate.domain.entities.grant import (
    GrantConditions,
    RoleGrant,
    TimeWindow,
    UserGrant,
)

__all__ = [
    "AuditRecord",
    "GrantConditions",
    "RoleGrant",
    "TimeWindow",
    "UserGrant",
]
