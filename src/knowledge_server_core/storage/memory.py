"""
In-process knowledge store for local runs and tests
"""

import asyncio
from typing import List

from loguru import logger

from ..models.knowledge_base import KnowledgeRecord, StoreResult
from .base import KnowledgeStore


class InMemoryKnowledgeStore(KnowledgeStore):
    """Keeps records in a list; lost on restart"""

    def __init__(self):
        self.records: List[KnowledgeRecord] = []
        self._lock = asyncio.Lock()

    async def insert(self, content: str, source: str) -> StoreResult:
        async with self._lock:
            self.records.append(KnowledgeRecord(content=content, source=source))
        logger.debug(f"Stored knowledge from {source} ({len(content)} characters)")
        return StoreResult.ok()

    async def select_all(self) -> List[str]:
        async with self._lock:
            return [record.content for record in self.records]
