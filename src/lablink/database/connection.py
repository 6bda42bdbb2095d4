"""
Database connection management using asyncpg for lablink.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

import asyncpg
from asyncpg import Pool

from ..core.exceptions import ConnectionPoolError, QueryError
from .schema import SCHEMA_STATEMENTS

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages the asyncpg connection pool."""

    def __init__(self, database_url: str, app_name: str = "lablink", **pool_config):
        """Initialize DatabaseManager.

        Args:
            database_url: PostgreSQL DSN
            app_name: Reported as ``application_name`` to the server
            **pool_config: Additional pool configuration options
        """
        self.pool: Optional[Pool] = None
        self.dsn = database_url.replace("+asyncpg", "")
        self.app_name = app_name
        self._lock = asyncio.Lock()

        self.pool_config = {
            "min_size": 1,
            "max_size": 10,
            "max_inactive_connection_lifetime": 300,
            "command_timeout": 60,
            **pool_config
        }

    async def create_pool(self) -> Pool:
        """Create the pool on first use and return it."""
        async with self._lock:
            if self.pool is None:
                logger.info(f"Creating database pool with size {self.pool_config['max_size']}")
                try:
                    self.pool = await asyncpg.create_pool(
                        self.dsn,
                        server_settings={"application_name": self.app_name},
                        **self.pool_config
                    )
                except (OSError, asyncpg.PostgresError) as e:
                    raise ConnectionPoolError(f"Failed to create database pool: {e}") from e
                logger.info("Database pool created successfully")
        return self.pool

    async def close(self) -> None:
        """Close the connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Database pool closed")

    @asynccontextmanager
    async def acquire(self):
        """Acquire a connection from the pool."""
        pool = self.pool or await self.create_pool()
        async with pool.acquire() as connection:
            yield connection

    @asynccontextmanager
    async def transaction(self):
        """Create a transaction context."""
        async with self.acquire() as connection:
            async with connection.transaction():
                yield connection

    async def ensure_schema(self) -> None:
        """Create the relations used by the gateway if they are missing."""
        try:
            async with self.transaction() as connection:
                for statement in SCHEMA_STATEMENTS:
                    await connection.execute(statement)
        except asyncpg.PostgresError as e:
            raise QueryError(f"Failed to apply schema: {e}") from e
        logger.info(f"Database schema ensured ({len(SCHEMA_STATEMENTS)} statements)")

    async def health_check(self) -> bool:
        """Check database health."""
        try:
            async with self.acquire() as connection:
                result = await connection.fetchval("SELECT 1")
                return result == 1
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False


def create_database_manager(settings) -> DatabaseManager:
    """Create a DatabaseManager from application settings."""
    return DatabaseManager(
        settings.database_url,
        app_name=settings.app_name,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        timeout=settings.db_pool_timeout,
    )
