"""Grant user permission use case."""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from talentgate.application.dto.permission_input import (
    parse_permission,
    parse_timestamp,
    parse_user_id,
)
from talentgate.application.ports import PermissionStore
from talentgate.application.use_cases.permission.check_permission import (
    CheckPermissionUseCase,
)
from talentgate.domain.entities import GrantConditions, UserGrant
from talentgate.domain.exceptions import ValidationError
from talentgate.domain.policy import PermissionChecks
from talentgate.domain.value_objects import AccessContext, PermissionRequest


class GrantUserPermissionUseCase:
    """Grant an override to a user. Actor must be able to manage settings."""

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
        expires_at: datetime | str | None = None,
        conditions: GrantConditions | Mapping[str, Any] | None = None,
    ) -> UserGrant:
        """Create or refresh the user's override for the permission's exact scope.

        Raw request values are accepted and validated after the permission check.
        """
        await self._check_permission.require(actor, PermissionChecks.MANAGE_SETTINGS)

        user_id = parse_user_id(user_id)
        permission = parse_permission(permission)
        expires_at = parse_timestamp(expires_at, "expires_at")
        if not isinstance(conditions, GrantConditions):
            conditions = GrantConditions.from_mapping(conditions)

        now = datetime.now(UTC)
        if expires_at is not None and expires_at <= now:
            raise ValidationError("expires_at must be in the future")

        grant = UserGrant(
            id=uuid4(),
            user_id=user_id,
            category=permission.category,
            action=permission.action,
            resource=permission.resource,
            granted=True,
            granted_by=actor.user_id,
            expires_at=expires_at,
            conditions=conditions,
            created_at=now,
            updated_at=now,
        )
        return await self._store.create_user_grant(grant)
