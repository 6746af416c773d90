"""List audit records use case."""

from talentgate.application.ports import UnitOfWorkFactory
from talentgate.application.use_cases.permission.check_permission import (
    CheckPermissionUseCase,
)
from talentgate.domain.entities import AuditRecord
from talentgate.domain.policy import PermissionChecks
from talentgate.domain.value_objects import AccessContext


class ListAuditRecordsUseCase:
    """Read the decision audit trail. Actor must be able to view settings."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        check_permission: CheckPermissionUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._check_permission = check_permission

    async def execute(
        self,
        actor: AccessContext,
        user_id: str | None = None,
        granted: bool | None = None,
        limit: int = 100,
    ) -> list[AuditRecord]:
        await self._check_permission.require(actor, PermissionChecks.VIEW_SETTINGS)
        limit = min(max(limit, 1), 1000)
        async with self._uow_factory() as uow:
            return await uow.audit_records.list(user_id=user_id, granted=granted, limit=limit)
