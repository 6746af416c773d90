"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import AsyncExitStack, asynccontextmanager

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from talentgate.infrastructure.persistence.postgres.audit_repository import (
    PostgresAuditRepository,
)
from talentgate.infrastructure.persistence.postgres.role_grant_repository import (
    PostgresRoleGrantRepository,
)
from talentgate.infrastructure.persistence.postgres.user_grant_repository import (
    PostgresUserGrantRepository,
)


class PostgresUnitOfWork:
    """Grant and audit repositories sharing one pooled connection and transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._stack = AsyncExitStack()
        self._conn: AsyncConnection | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        # The pool commits on clean exit and rolls back when an exception escapes.
        self._conn = await self._stack.enter_async_context(self._pool.connection())
        self.role_grants = PostgresRoleGrantRepository(self._conn)
        self.user_grants = PostgresUserGrantRepository(self._conn)
        self.audit_records = PostgresAuditRepository(self._conn)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool | None:
        try:
            return await self._stack.__aexit__(exc_type, exc_val, exc_tb)
        finally:
            self._conn = None

    async def commit(self) -> None:
        if self._conn is not None:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn is not None:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool):
    """Return a zero-argument factory; each call opens one Unit of Work."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        async with PostgresUnitOfWork(pool) as uow:
            yield uow

    return factory
