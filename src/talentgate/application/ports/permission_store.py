"""Permission store port - role defaults and user overrides."""

from typing import Protocol

from talentgate.domain.entities import RoleGrant, UserGrant


class PermissionStore(Protocol):
    """Port the access evaluator reads grants through.

    Only the two read operations are used during evaluation; the write
    operations serve the administrative workflows.
    """

    async def get_role_grants(self, role: str) -> list[RoleGrant]: ...

    async def get_user_grants(self, user_id: str) -> list[UserGrant]: ...

    async def create_user_grant(self, grant: UserGrant) -> UserGrant: ...

    async def set_user_grant_revoked(
        self,
        user_id: str,
        category: str,
        action: str,
        resource: str | None = None,
    ) -> bool: ...
