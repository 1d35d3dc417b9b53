from .base import BaseTextExtractor
from .docx_extractor import DocxTextExtractor
from .pdf_extractor import PdfTextExtractor

__all__ = ["BaseTextExtractor", "DocxTextExtractor", "PdfTextExtractor"]
