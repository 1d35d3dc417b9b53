"""
PostgreSQL knowledge store - persists knowledge records with asyncpg
"""

import re
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

import asyncpg
from loguru import logger

from ..exceptions import ConfigError, KnowledgeStoreError
from ..models.knowledge_base import StoreResult
from .base import KnowledgeStore

_TABLE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class PostgreSQLKnowledgeStore(KnowledgeStore):
    """PostgreSQL knowledge store"""

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.pool: Optional[asyncpg.Pool] = None
        self.table = config.get("table", "knowledge_base")
        if not _TABLE_NAME.match(self.table):
            raise ConfigError(f"Invalid knowledge table name: {self.table}")

    async def initialize(self) -> None:
        """Create the connection pool and the knowledge table"""
        dsn = self.config.get("dsn")
        if not dsn:
            raise ConfigError("database.dsn (or DATABASE_URL) is not set")
        try:
            self.pool = await asyncpg.create_pool(
                dsn=dsn,
                min_size=self.config.get("min_pool_size", 1),
                max_size=self.config.get("max_pool_size", 10),
                command_timeout=self.config.get("command_timeout", 30),
            )
            await self._create_tables()
            logger.info("PostgreSQL knowledge store initialized")
        except Exception as e:
            logger.error(f"PostgreSQL knowledge store initialization failed: {e}")
            raise KnowledgeStoreError("Cannot connect to PostgreSQL", details=str(e)) from e

    async def close(self) -> None:
        """Close the connection pool"""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("PostgreSQL knowledge store closed")

    @asynccontextmanager
    async def get_connection(self):
        """Acquire a pooled connection"""
        if not self.pool:
            raise KnowledgeStoreError("Knowledge store is not initialized")

        async with self.pool.acquire() as connection:
            yield connection

    async def _create_tables(self) -> None:
        async with self.get_connection() as conn:
            await conn.execute(f"""
                CREATE TABLE IF NOT EXISTS {self.table} (
                    id BIGSERIAL PRIMARY KEY,
                    content TEXT NOT NULL,
                    source TEXT NOT NULL,
                    created_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP
                )
            """)

    async def insert(self, content: str, source: str) -> StoreResult:
        try:
            async with self.get_connection() as conn:
                await conn.execute(
                    f"INSERT INTO {self.table} (content, source) VALUES ($1, $2)",
                    content, source
                )
            return StoreResult.ok()
        except Exception as e:
            logger.error(f"Failed to store knowledge from {source}: {e}")
            return StoreResult.failure(str(e))

    async def select_all(self) -> List[str]:
        try:
            async with self.get_connection() as conn:
                rows = await conn.fetch(f"SELECT content FROM {self.table} ORDER BY id")
        except KnowledgeStoreError:
            raise
        except Exception as e:
            logger.error(f"Failed to read knowledge: {e}")
            raise KnowledgeStoreError("Failed to read knowledge", details=str(e)) from e
        return [row["content"] for row in rows]
