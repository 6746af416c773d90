"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

from talentgate.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Create the grant store pool from settings.

    Pool is created with open=False. Caller must open it before use
    (PoolLifespanMiddleware for the API, the seed command otherwise).
    Connections are checked on checkout so a dropped server connection
    surfaces as a store error, and the evaluator denies.
    """
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
        name="talentgate",
        check=AsyncConnectionPool.check_connection,
        open=False,
    )
