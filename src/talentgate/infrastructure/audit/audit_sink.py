"""Audit sinks - persist access decisions without affecting them."""

from talentgate.domain.entities import AuditRecord
from talentgate.logging import get_logger

logger = get_logger(__name__)


class UnitOfWorkAuditSink:
    """Writes audit records through the Unit of Work. Failures are logged, never raised."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def record(self, audit_record: AuditRecord) -> None:
        try:
            async with self._uow_factory() as uow:
                await uow.audit_records.create(audit_record)
        except Exception:
            logger.exception(
                "audit_record_failed",
                user_id=audit_record.user_id,
                permission=str(audit_record.permission_requested),
                granted=audit_record.granted,
            )


class LogAuditSink:
    """Emits decisions to the log only; used when persistent auditing is disabled."""

    async def record(self, audit_record: AuditRecord) -> None:
        logger.info(
            "access_decision",
            user_id=audit_record.user_id,
            role=audit_record.user_role,
            permission=str(audit_record.permission_requested),
            granted=audit_record.granted,
            ip_address=audit_record.ip_address,
        )
