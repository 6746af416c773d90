"""Revoke user permission use case."""

from collections.abc import Mapping
from typing import Any

from talentgate.application.dto.permission_input import parse_permission, parse_user_id
from talentgate.application.ports import PermissionStore
from talentgate.application.use_cases.permission.check_permission import (
    CheckPermissionUseCase,
)
from talentgate.domain.exceptions import NotFound
from talentgate.domain.policy import PermissionChecks
from talentgate.domain.value_objects import AccessContext, PermissionRequest


class RevokeUserPermissionUseCase:
    """Revoke a user override. The row is kept with granted=False."""

    def __init__(
        self,
        permission_store: PermissionStore,
        check_permission: CheckPermissionUseCase,
    ) -> None:
        self._store = permission_store
        self._check_permission = check_permission

    async def execute(
        self,
        actor: AccessContext,
        user_id: str,
        permission: PermissionRequest | Mapping[str, Any],
    ) -> None:
        """Revoke permission for user. Actor must be able to manage settings.

        user_id and permission are validated after the permission check.
        """
        await self._check_permission.require(actor, PermissionChecks.MANAGE_SETTINGS)

        user_id = parse_user_id(user_id)
        permission = parse_permission(permission)

        revoked = await self._store.set_user_grant_revoked(
            user_id, permission.category, permission.action, permission.resource
        )
        if not revoked:
            raise NotFound("UserPermission", f"{user_id}/{permission}")
