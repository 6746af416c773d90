"""PostgreSQL audit repository implementation."""

from psycopg import AsyncConnection

from talentgate.domain.entities import AuditRecord
from talentgate.domain.value_objects import PermissionRequest

_COLUMNS = (
    "id, user_id, user_role, category, action, resource, granted, "
    "created_at, ip_address, user_agent, reason"
)


def _build_audit_filter_conditions(
    user_id: str | None, granted: bool | None
) -> tuple[list[str], list[object]]:
    """Build WHERE clauses and params for the audit list filters."""
    conditions: list[str] = []
    params: list[object] = []
    if user_id is not None:
        conditions.append("user_id = %s")
        params.append(user_id)
    if granted is not None:
        conditions.append("granted = %s")
        params.append(granted)
    return conditions, params


class PostgresAuditRepository:
    """Append-only audit repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, record: AuditRecord) -> AuditRecord:
        """Append audit record."""
        perm = record.permission_requested
        await self._conn.execute(
            f"INSERT INTO permission_audit ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                record.id,
                record.user_id,
                record.user_role,
                perm.category,
                perm.action,
                perm.resource,
                record.granted,
                record.timestamp,
                record.ip_address,
                record.user_agent,
                record.reason,
            ),
        )
        return record

    async def list(
        self,
        *,
        user_id: str | None = None,
        granted: bool | None = None,
        limit: int = 100,
    ) -> list[AuditRecord]:
        """List audit records, newest first, optionally filtered."""
        conditions, params = _build_audit_filter_conditions(user_id, granted)
        where = f"WHERE {' AND '.join(conditions)} " if conditions else ""
        params.append(limit)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission_audit {where}ORDER BY created_at DESC LIMIT %s",
            tuple(params),
        )
        rows = await cur.fetchall()
        return [
            AuditRecord(
                id=r[0],
                user_id=r[1],
                user_role=r[2],
                permission_requested=PermissionRequest(
                    category=r[3], action=r[4], resource=r[5]
                ),
                granted=r[6],
                timestamp=r[7],
                ip_address=r[8],
                user_agent=r[9],
                reason=r[10],
            )
            for r in rows
        ]
