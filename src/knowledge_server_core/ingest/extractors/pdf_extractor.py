"""PDF text layer extraction using pdfplumber."""

import io
from typing import List

import pdfplumber
from loguru import logger

from ...exceptions import MalformedDocumentError
from ...models.document import DocumentKind
from .base import BaseTextExtractor


class PdfTextExtractor(BaseTextExtractor):
    """Concatenates the extractable text of every page in document order.

    A PDF made only of scanned images has no text layer and yields ``""``;
    that is an expected outcome, not an error.
    """

    kind = DocumentKind.PDF

    def __init__(self, page_separator: str = "\n\n"):
        self.page_separator = page_separator

    def extract(self, buffer: bytes) -> str:
        # An empty upload has no text layer to read
        if not buffer:
            return ""

        try:
            with pdfplumber.open(io.BytesIO(buffer)) as pdf:
                page_texts: List[str] = []
                for page in pdf.pages:
                    page_text = page.extract_text() or ""
                    if page_text.strip():
                        page_texts.append(page_text.strip())
                page_count = len(pdf.pages)
        except Exception as e:
            raise MalformedDocumentError(
                "Cannot parse PDF document",
                details=str(e),
            ) from e

        text = self.page_separator.join(page_texts).strip()
        logger.debug(f"PDF text layer: {len(text)} characters from {page_count} pages")
        return text
