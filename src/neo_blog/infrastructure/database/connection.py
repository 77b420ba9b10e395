"""
Database connection management using asyncpg.
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, List, Optional

import asyncpg
from asyncpg import Pool, Record

from .schema import SCHEMA_STATEMENTS

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the asyncpg pool shared by every repository."""

    def __init__(self, database_url: str, application_name: str = "neo-blog", **pool_config):
        """Initialize DatabaseManager.

        Args:
            database_url: PostgreSQL DSN
            application_name: Reported to the server as ``application_name``
            **pool_config: Additional pool configuration options
        """
        self.pool: Optional[Pool] = None
        self.dsn = database_url.replace("+asyncpg", "")
        self.application_name = application_name
        self.pool_config = {
            "min_size": 1,
            "max_size": 10,
            "command_timeout": 60,
            **pool_config
        }

    async def create_pool(self) -> Pool:
        """Create and return a connection pool."""
        if self.pool is None:
            logger.info(f"Creating database pool with size {self.pool_config['max_size']}")
            self.pool = await asyncpg.create_pool(
                self.dsn,
                server_settings={"application_name": self.application_name},
                **self.pool_config
            )
            logger.info("Database pool created successfully")
        return self.pool

    async def close_pool(self) -> None:
        """Close the connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Database pool closed")

    @asynccontextmanager
    async def acquire(self):
        """Acquire a connection from the pool."""
        if not self.pool:
            await self.create_pool()

        async with self.pool.acquire() as connection:
            yield connection

    @asynccontextmanager
    async def transaction(self):
        """Acquire a connection and open a transaction on it."""
        async with self.acquire() as connection:
            async with connection.transaction():
                yield connection

    async def execute(self, query: str, *args) -> str:
        async with self.acquire() as connection:
            return await connection.execute(query, *args)

    async def fetch(self, query: str, *args) -> List[Record]:
        async with self.acquire() as connection:
            return await connection.fetch(query, *args)

    async def fetchrow(self, query: str, *args) -> Optional[Record]:
        async with self.acquire() as connection:
            return await connection.fetchrow(query, *args)

    async def fetchval(self, query: str, *args) -> Any:
        async with self.acquire() as connection:
            return await connection.fetchval(query, *args)

    async def ensure_schema(self) -> None:
        """Create tables and indexes that do not exist yet."""
        async with self.transaction() as connection:
            for statement in SCHEMA_STATEMENTS:
                await connection.execute(statement)
        logger.info("Database schema ensured")


def rows_affected(status: str) -> int:
    """Parse the row count from an asyncpg command status such as ``DELETE 1``."""
    try:
        return int(status.split()[-1])
    except (AttributeError, IndexError, ValueError):
        return 0
