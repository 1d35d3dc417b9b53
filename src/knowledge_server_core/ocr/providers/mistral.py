import base64
from typing import Any, List

from loguru import logger
from mistralai import Mistral

from ...exceptions import RecognitionError
from ..base import DEFAULT_LANGUAGE, BaseOCRProvider
from ..config.mistral import MistralConfig


class MistralOCRProvider(BaseOCRProvider):
    """Mistral OCR provider implementation"""

    name = "mistral"

    def __init__(self, config: MistralConfig = None):
        if config is None:
            config = MistralConfig()
        super().__init__(config)
        self.client = None

    def _get_client(self) -> Mistral:
        """Get or create Mistral client"""
        if self.client is None:
            self.client = Mistral(api_key=self.config.get_api_key())
        return self.client

    def _document(self, buffer: bytes) -> dict:
        base64_data = base64.b64encode(buffer).decode("utf-8")
        return {
            "type": "document_url",
            "document_url": f"data:application/pdf;base64,{base64_data}",
        }

    def recognize(self, buffer: bytes, language: str = DEFAULT_LANGUAGE) -> str:
        """Send the buffer to Mistral OCR. The language hint is not used by the API."""
        if not buffer:
            return ""

        if not self.config.validate():
            raise RecognitionError("Mistral OCR is not configured")

        logger.info(f"Processing {len(buffer)} bytes with Mistral OCR")

        try:
            response = self._get_client().ocr.process(
                model=self.config.get_model(),
                document=self._document(buffer),
                include_image_base64=False,
            )
        except Exception as e:
            raise RecognitionError("Mistral OCR request failed", details=str(e)) from e

        text = self._join_pages(self._extract_data_from_response(response))
        logger.success("OCR processing completed")
        return text

    # --------------------
    # Async counterparts
    # --------------------
    async def arecognize(self, buffer: bytes, language: str = DEFAULT_LANGUAGE) -> str:
        """Async: uses the SDK native async API instead of a worker thread."""
        if not buffer:
            return ""

        if not self.config.validate():
            raise RecognitionError("Mistral OCR is not configured")

        logger.info(f"[async] Processing {len(buffer)} bytes with Mistral OCR")

        try:
            response = await self._get_client().ocr.process_async(
                model=self.config.get_model(),
                document=self._document(buffer),
                include_image_base64=False,
            )
        except Exception as e:
            raise RecognitionError("Mistral OCR request failed", details=str(e)) from e

        text = self._join_pages(self._extract_data_from_response(response))
        logger.success("[async] OCR processing completed")
        return text

    def _extract_data_from_response(self, response: Any) -> List[str]:
        """Extract per-page markdown from Mistral OCR API response"""
        if not hasattr(response, "pages") or not response.pages:
            logger.warning("No pages found in OCR response")
            return []

        return [
            page.markdown
            for page in response.pages
            if getattr(page, "markdown", None)
        ]
