"""Grant every admin default to a single user as overrides."""

from datetime import UTC, datetime
from uuid import uuid4

from talentgate.application.ports import PermissionStore
from talentgate.domain.entities import UserGrant
from talentgate.domain.policy import DEFAULT_ROLE_PERMISSIONS
from talentgate.domain.value_objects import UserRole
from talentgate.logging import get_logger

logger = get_logger(__name__)


class GrantAdminPermissionsUseCase:
    """Bootstrap an administrator regardless of the role they hold."""

    def __init__(self, permission_store: PermissionStore) -> None:
        self._store = permission_store

    async def execute(self, user_id: str, granted_by: str | None = None) -> int:
        """Grant all admin defaults to user_id. Returns the number of grants written."""
        count = 0
        for perm in DEFAULT_ROLE_PERMISSIONS[UserRole.ADMIN.value]:
            now = datetime.now(UTC)
            await self._store.create_user_grant(
                UserGrant(
                    id=uuid4(),
                    user_id=user_id,
                    category=perm.category,
                    action=perm.action,
                    resource=perm.resource,
                    granted=True,
                    granted_by=granted_by or user_id,
                    created_at=now,
                    updated_at=now,
                )
            )
            count += 1
        logger.info("admin_permissions_granted", user_id=user_id, count=count)
        return count
