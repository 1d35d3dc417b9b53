"""
Knowledge store interface - append-only collection of knowledge records
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.knowledge_base import StoreResult


class KnowledgeStore(ABC):
    """Append-only knowledge store collaborator"""

    async def initialize(self) -> None:
        """Open connections / create tables"""

    async def close(self) -> None:
        """Release connections"""

    @abstractmethod
    async def insert(self, content: str, source: str) -> StoreResult:
        """
        Append one record

        Args:
            content: Knowledge text
            source: Filename or caller-supplied label

        Returns:
            StoreResult: success, or failure with a message. Never raises.
        """

    @abstractmethod
    async def select_all(self) -> List[str]:
        """Return the content of every stored record, oldest first"""

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
