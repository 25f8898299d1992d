# facet_counts/database/database.py
import asyncpg
import logging
from typing import Optional
from ..config import Config


class Database:
    """Owns the asyncpg connection pool shared by the read services"""

    def __init__(self, dsn: Optional[str] = None):
        self.dsn = dsn or Config.DATABASE_URL
        self._pool: Optional[asyncpg.Pool] = None
        self.logger = logging.getLogger(__name__)

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("database pool is not initialised")
        return self._pool

    async def connect(self):
        """Open the connection pool"""
        try:
            self._pool = await asyncpg.create_pool(
                self.dsn,
                min_size=Config.DB_POOL_MIN_SIZE,
                max_size=Config.DB_POOL_MAX_SIZE,
                command_timeout=Config.DB_COMMAND_TIMEOUT,
            )
            self.logger.info("Database pool opened")
        except Exception as e:
            self.logger.error(f"Could not connect to database: {e}")
            raise

    async def close(self):
        """Close the connection pool"""
        if self._pool:
            await self._pool.close()
            self._pool = None
            self.logger.info("Database pool closed")
