"""User grant repository port."""

from typing import Protocol

from talentgate.domain.entities import UserGrant


class UserGrantRepository(Protocol):
    """Port for per-user override persistence."""

    async def list_by_user(self, user_id: str) -> list[UserGrant]: ...

    async def upsert(self, grant: UserGrant) -> UserGrant: ...

    async def update(self, grant: UserGrant) -> None: ...
