"""Role grant repository port."""

from typing import Protocol

from talentgate.domain.entities import RoleGrant


class RoleGrantRepository(Protocol):
    """Port for role default persistence."""

    async def list_by_role(self, role: str) -> list[RoleGrant]: ...

    async def get_for_scope(
        self, role: str, category: str, action: str, resource: str | None
    ) -> RoleGrant | None: ...

    async def create(self, grant: RoleGrant) -> RoleGrant: ...
