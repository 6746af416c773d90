"""PostgreSQL user grant repository implementation."""

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from talentgate.domain.entities import GrantConditions, UserGrant

_COLUMNS = (
    "id, user_id, category, action, resource, granted, granted_by, "
    "expires_at, conditions, created_at, updated_at"
)


def _row_to_grant(r: tuple) -> UserGrant:
    return UserGrant(
        id=r[0],
        user_id=r[1],
        category=r[2],
        action=r[3],
        resource=r[4],
        granted=r[5],
        granted_by=r[6],
        expires_at=r[7],
        conditions=GrantConditions.from_mapping(r[8]),
        created_at=r[9],
        updated_at=r[10],
    )


def _conditions_param(grant: UserGrant) -> Jsonb | None:
    if grant.conditions is None:
        return None
    return Jsonb(grant.conditions.to_mapping())


class PostgresUserGrantRepository:
    """User grant repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_by_user(self, user_id: str) -> list[UserGrant]:
        """List overrides for user, oldest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM user_permission WHERE user_id = %s ORDER BY created_at",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_grant(r) for r in rows]

    async def upsert(self, grant: UserGrant) -> UserGrant:
        """Insert grant or overwrite the row holding its scope, in one statement.

        Returns the stored row; its id is the existing one when the scope was present.
        """
        cur = await self._conn.execute(
            f"INSERT INTO user_permission ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (user_id, category, action, resource) DO UPDATE SET "
            "granted = EXCLUDED.granted, granted_by = EXCLUDED.granted_by, "
            "expires_at = EXCLUDED.expires_at, conditions = EXCLUDED.conditions, "
            "updated_at = EXCLUDED.updated_at "
            f"RETURNING {_COLUMNS}",
            (
                grant.id,
                grant.user_id,
                grant.category,
                grant.action,
                grant.resource,
                grant.granted,
                grant.granted_by,
                grant.expires_at,
                _conditions_param(grant),
                grant.created_at,
                grant.updated_at,
            ),
        )
        return _row_to_grant(await cur.fetchone())

    async def update(self, grant: UserGrant) -> None:
        """Update mutable fields of a user grant."""
        await self._conn.execute(
            "UPDATE user_permission SET granted=%s, granted_by=%s, expires_at=%s, "
            "conditions=%s, updated_at=%s WHERE id=%s",
            (
                grant.granted,
                grant.granted_by,
                grant.expires_at,
                _conditions_param(grant),
                grant.updated_at,
                grant.id,
            ),
        )
