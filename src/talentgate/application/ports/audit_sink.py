"""Audit sink port."""

from typing import Protocol

from talentgate.domain.entities import AuditRecord


class AuditSink(Protocol):
    """Port for recording access decisions. Must not raise."""

    async def record(self, audit_record: AuditRecord) -> None: ...
