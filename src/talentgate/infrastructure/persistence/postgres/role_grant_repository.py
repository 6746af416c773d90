"""PostgreSQL role grant repository implementation."""

from psycopg import AsyncConnection

from talentgate.domain.entities import RoleGrant

_COLUMNS = "id, role, category, action, resource, granted, created_at"


def _row_to_grant(r: tuple) -> RoleGrant:
    return RoleGrant(
        id=r[0],
        role=r[1],
        category=r[2],
        action=r[3],
        resource=r[4],
        granted=r[5],
        created_at=r[6],
    )


class PostgresRoleGrantRepository:
    """Role grant repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_by_role(self, role: str) -> list[RoleGrant]:
        """List default grants for role."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role_permission WHERE role = %s ORDER BY created_at",
            (role,),
        )
        rows = await cur.fetchall()
        return [_row_to_grant(r) for r in rows]

    async def get_for_scope(
        self, role: str, category: str, action: str, resource: str | None
    ) -> RoleGrant | None:
        """Get the grant for an exact (role, category, action, resource)."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role_permission "
            "WHERE role = %s AND category = %s AND action = %s "
            "AND resource IS NOT DISTINCT FROM %s",
            (role, category, action, resource),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_grant(r)

    async def create(self, grant: RoleGrant) -> RoleGrant:
        """Create role grant."""
        await self._conn.execute(
            f"INSERT INTO role_permission ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                grant.id,
                grant.role,
                grant.category,
                grant.action,
                grant.resource,
                grant.granted,
                grant.created_at,
            ),
        )
        return grant
