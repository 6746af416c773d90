"""Audit record repository port."""

from typing import Protocol

from talentgate.domain.entities import AuditRecord


class AuditRepository(Protocol):
    """Port for append-only audit persistence."""

    async def create(self, record: AuditRecord) -> AuditRecord: ...

    async def list(
        self,
        *,
        user_id: str | None = None,
        granted: bool | None = None,
        limit: int = 100,
    ) -> list[AuditRecord]: ...
