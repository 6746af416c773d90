"""Pool lifespan middleware - opens pool on startup, closes on shutdown."""

from typing import Any

from psycopg_pool import AsyncConnectionPool

from talentgate.logging import get_logger

logger = get_logger(__name__)


class PoolLifespanMiddleware:
    """Open the grant store pool before serving; close it on shutdown."""

    def __init__(self, pool: AsyncConnectionPool, open_timeout: float = 30.0) -> None:
        self._pool = pool
        self._open_timeout = open_timeout

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        # Wait for min_size connections so a bad DATABASE_URL fails startup.
        await self._pool.open(wait=True, timeout=self._open_timeout)
        logger.info(
            "database_pool_opened",
            pool=self._pool.name,
            min_size=self._pool.min_size,
            max_size=self._pool.max_size,
        )

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._pool.close()
        logger.info("database_pool_closed", pool=self._pool.name)
