import asyncio
from abc import ABC, abstractmethod

from ...models.document import DocumentKind


class BaseTextExtractor(ABC):
    """Base text extractor that defines the interface for every document kind"""

    kind: DocumentKind

    @abstractmethod
    def extract(self, buffer: bytes) -> str:
        """Extract the text layer of a buffer and return it trimmed.

        Raises:
            MalformedDocumentError: If the buffer cannot be parsed.
        """
        pass

    # --------------------
    # Async counterparts
    # --------------------
    async def aextract(self, buffer: bytes) -> str:
        """Async wrapper for extract using a thread to avoid blocking the event loop."""
        return await asyncio.to_thread(self.extract, buffer)
