"""Permission store backed by the Unit of Work repositories."""

from datetime import UTC, datetime

from talentgate.domain.entities import RoleGrant, UserGrant


class UnitOfWorkPermissionStore:
    """Reads and writes grants, one Unit of Work per call."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def get_role_grants(self, role: str) -> list[RoleGrant]:
        async with self._uow_factory() as uow:
            return await uow.role_grants.list_by_role(role)

    async def get_user_grants(self, user_id: str) -> list[UserGrant]:
        async with self._uow_factory() as uow:
            return await uow.user_grants.list_by_user(user_id)

    async def create_user_grant(self, grant: UserGrant) -> UserGrant:
        """Insert grant, or overwrite the existing row for the same exact scope.

        Keeps at most one row per (user, category, action, resource), also
        when two grants for one scope arrive at the same time.
        """
        async with self._uow_factory() as uow:
            return await uow.user_grants.upsert(grant)

    async def set_user_grant_revoked(
        self,
        user_id: str,
        category: str,
        action: str,
        resource: str | None = None,
    ) -> bool:
        """Set granted=False on every active row for the scope; None resource matches any scope."""
        async with self._uow_factory() as uow:
            grants = await uow.user_grants.list_by_user(user_id)
            matching = [
                g
                for g in grants
                if g.category == category
                and g.action == action
                and (resource is None or g.resource == resource)
            ]
            now = datetime.now(UTC)
            for grant in matching:
                if grant.granted:
                    grant.granted = False
                    grant.updated_at = now
                    await uow.user_grants.update(grant)
            return bool(matching)
