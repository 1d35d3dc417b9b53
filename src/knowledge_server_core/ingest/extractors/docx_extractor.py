"""DOCX text extraction using python-docx."""

import io
from typing import Dict, List

import docx
from docx.oxml.ns import qn
from loguru import logger

from ...exceptions import MalformedDocumentError
from ...models.document import DocumentKind
from .base import BaseTextExtractor

W_P = qn("w:p")
W_T = qn("w:t")
# VML copy of a text box that Word writes next to the DrawingML one
MC_FALLBACK = "{http://schemas.openxmlformats.org/markup-compatibility/2006}Fallback"


def paragraph_texts(body) -> List[str]:
    """Text of every ``w:p`` under ``body`` in document order.

    Walks the raw XML, so paragraphs nested in content controls or text boxes
    are included. Each text run counts towards its nearest enclosing paragraph.
    """
    texts: Dict[object, List[str]] = {}
    for node in body.iter(W_T):
        if any(ancestor.tag == MC_FALLBACK for ancestor in node.iterancestors()):
            continue
        paragraph = next(node.iterancestors(W_P), None)
        if paragraph is None:
            continue
        texts.setdefault(paragraph, []).append(node.text or "")
    return ["".join(parts) for parts in texts.values()]


class DocxTextExtractor(BaseTextExtractor):
    """Returns the text of every paragraph of a Word document, trimmed"""

    kind = DocumentKind.DOCX

    def __init__(self, paragraph_separator: str = "\n\n"):
        self.paragraph_separator = paragraph_separator

    def extract(self, buffer: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(buffer))
            parts = paragraph_texts(document.element.body)
        except Exception as e:
            raise MalformedDocumentError(
                "Cannot parse DOCX document",
                details=str(e),
            ) from e

        text = self.paragraph_separator.join(p.strip() for p in parts if p.strip())
        logger.debug(f"DOCX text: {len(text)} characters from {len(parts)} paragraphs")
        return text.strip()
