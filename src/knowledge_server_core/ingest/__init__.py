"""
Ingestion module - format detection, text extraction and OCR fallback
"""

from .detector import detect, supported_extensions
from .extractors import BaseTextExtractor, DocxTextExtractor, PdfTextExtractor
from .pipeline import ExtractionPipeline, default_extractors

__all__ = [
    "detect",
    "supported_extensions",
    "BaseTextExtractor",
    "DocxTextExtractor",
    "PdfTextExtractor",
    "ExtractionPipeline",
    "default_extractors",
]
