"""Seed role permissions use case - provision the default role grants."""

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from uuid import uuid4

from talentgate.application.ports import UnitOfWorkFactory
from talentgate.application.use_cases.permission.check_permission import (
    CheckPermissionUseCase,
)
from talentgate.domain.entities import RoleGrant
from talentgate.domain.policy import DEFAULT_ROLE_PERMISSIONS, PermissionChecks
from talentgate.domain.value_objects import AccessContext, PermissionRequest
from talentgate.logging import get_logger

logger = get_logger(__name__)


class SeedRolePermissionsUseCase:
    """Create any missing default role grants. Existing rows are left alone."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        check_permission: CheckPermissionUseCase | None = None,
        defaults: Mapping[str, Sequence[PermissionRequest]] = DEFAULT_ROLE_PERMISSIONS,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._check_permission = check_permission
        self._defaults = defaults

    async def execute(self, actor: AccessContext | None = None) -> int:
        """Seed defaults and return how many grants were created.

        actor is None only for provisioning scripts run outside the API.
        """
        if actor is not None and self._check_permission is not None:
            await self._check_permission.require(actor, PermissionChecks.MANAGE_SETTINGS)

        created = 0
        async with self._uow_factory() as uow:
            for role, permissions in self._defaults.items():
                for perm in permissions:
                    existing = await uow.role_grants.get_for_scope(
                        role, perm.category, perm.action, perm.resource
                    )
                    if existing:
                        logger.debug("role_grant_exists", role=role, permission=str(perm))
                        continue
                    await uow.role_grants.create(
                        RoleGrant(
                            id=uuid4(),
                            role=role,
                            category=perm.category,
                            action=perm.action,
                            resource=perm.resource,
                            granted=True,
                            created_at=datetime.now(UTC),
                        )
                    )
                    created += 1
        logger.info("role_grants_seeded", created=created)
        return created
