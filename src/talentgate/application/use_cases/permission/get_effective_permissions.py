"""Effective permissions use case - role defaults overlaid with user overrides."""

from datetime import UTC, datetime

from talentgate.application.dto.effective_permission import (
    EffectivePermission,
    EffectivePermissions,
)
from talentgate.application.ports import PermissionStore
from talentgate.application.use_cases.permission.check_permission import (
    CheckPermissionUseCase,
)
from talentgate.domain.policy import PermissionChecks
from talentgate.domain.value_objects import AccessContext


class GetEffectivePermissionsUseCase:
    """List what a user can do and where each answer comes from."""

    def __init__(
        self,
        permission_store: PermissionStore,
        check_permission: CheckPermissionUseCase,
    ) -> None:
        self._store = permission_store
        self._check_permission = check_permission

    async def execute(
        self, actor: AccessContext, user_id: str, user_role: str
    ) -> EffectivePermissions:
        """Users may read their own permissions; others need user_management.read (all)."""
        if actor.user_id != user_id:
            await self._check_permission.require(actor, PermissionChecks.VIEW_ALL_USERS)

        role_grants = await self._store.get_role_grants(user_role)
        user_grants = await self._store.get_user_grants(user_id)

        effective: dict[tuple[str, str, str | None], EffectivePermission] = {}
        for rg in role_grants:
            effective[(rg.category, rg.action, rg.resource)] = EffectivePermission(
                category=rg.category,
                action=rg.action,
                resource=rg.resource,
                granted=rg.granted,
                source="role",
            )

        now = datetime.now(UTC)
        active = [ug for ug in user_grants if not ug.is_expired(now)]
        # Oldest first so the most recent override for a scope wins.
        for ug in sorted(active, key=lambda g: g.updated_at):
            effective[(ug.category, ug.action, ug.resource)] = EffectivePermission(
                category=ug.category,
                action=ug.action,
                resource=ug.resource,
                granted=ug.granted,
                source="user",
            )

        return EffectivePermissions(
            role_grants=role_grants,
            user_grants=user_grants,
            effective=list(effective.values()),
        )
