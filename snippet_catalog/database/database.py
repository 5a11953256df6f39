# snippet_catalog/database/database.py
import asyncpg
import logging
from pathlib import Path
from typing import Optional
from ..config import Config

SCHEMA_FILE = Path(__file__).parent / "schema.sql"

class Database:
    """Connection pool for the catalog database"""

    def __init__(self, database_url: Optional[str] = None,
                 min_size: Optional[int] = None, max_size: Optional[int] = None):
        self.database_url = database_url or Config.DATABASE_URL
        self.min_size = Config.DB_POOL_MIN_SIZE if min_size is None else min_size
        self.max_size = Config.DB_POOL_MAX_SIZE if max_size is None else max_size
        self.pool: Optional[asyncpg.Pool] = None
        self.logger = logging.getLogger(__name__)

    async def connect(self):
        """Open the pool and create the tables if they are missing"""
        try:
            self.pool = await asyncpg.create_pool(
                self.database_url,
                min_size=self.min_size,
                max_size=self.max_size
            )

            await self._ensure_schema()

            self.logger.info("Connected to the catalog database")
        except Exception as e:
            self.logger.error(f"Failed to connect to the catalog database: {e}")
            if self.pool:
                await self.pool.close()
                self.pool = None
            raise

    async def close(self):
        """Close the pool"""
        if self.pool:
            await self.pool.close()
            self.pool = None
            self.logger.info("Catalog database connection closed")

    def acquire(self):
        """Acquire a pooled connection; use as ``async with db.acquire() as conn``"""
        if self.pool is None:
            raise RuntimeError("Database is not connected")
        return self.pool.acquire()

    async def _ensure_schema(self):
        """Create the catalog tables; existing tables are left untouched"""
        async with self.pool.acquire() as conn:
            await conn.execute(SCHEMA_FILE.read_text(encoding="utf-8"))
        self.logger.info("Catalog schema is in place")
