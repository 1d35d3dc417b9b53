import asyncio
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List

if TYPE_CHECKING:
    from .config.base import BaseConfig

DEFAULT_LANGUAGE = "eng"


class BaseOCRProvider(ABC):
    """Base OCR provider class that defines the interface for all OCR providers"""

    name: str = "base"

    def __init__(self, config: "BaseConfig"):
        self.config = config

    @abstractmethod
    def recognize(self, buffer: bytes, language: str = DEFAULT_LANGUAGE) -> str:
        """Recognize the text of a rendered PDF buffer.

        Returns the trimmed text, or an empty string when nothing was recognized.

        Raises:
            RecognitionError: If the OCR engine itself fails.
        """
        pass

    def _join_pages(self, pages: List[str]) -> str:
        """Join per-page text in page order, dropping blank pages"""
        return "\n\n".join(p.strip() for p in pages if p and p.strip()).strip()

    def _extract_data_from_response(self, response: Any) -> List[str]:
        """Extract per-page text from an OCR API response - to be implemented by subclasses"""
        raise NotImplementedError(
            "Subclasses must implement _extract_data_from_response"
        )

    # --------------------
    # Async counterparts
    # --------------------
    async def arecognize(self, buffer: bytes, language: str = DEFAULT_LANGUAGE) -> str:
        """Async wrapper for recognize using a thread to avoid blocking the event loop."""
        return await asyncio.to_thread(self.recognize, buffer, language)
