"""
Knowledge Server Core - document ingestion and knowledge base library

Extracts text from PDF/DOCX uploads (with OCR fallback for scanned PDFs),
stores it in a knowledge store and answers questions over it.
"""

__version__ = "0.1.0"

from .ingest import ExtractionPipeline, detect
from .models import *
from .ocr import OCRProcessor
from .server import KnowledgeManager, KnowledgeServer
from .storage import InMemoryKnowledgeStore, KnowledgeStore, PostgreSQLKnowledgeStore

__all__ = [
    "ExtractionPipeline",
    "detect",
    "OCRProcessor",
    "KnowledgeManager",
    "KnowledgeServer",
    "KnowledgeStore",
    "InMemoryKnowledgeStore",
    "PostgreSQLKnowledgeStore",
    "DocumentKind",
    "UploadedDocument",
    "KnowledgeRecord",
    "StoreResult",
    "ExtractionFailure",
    "ExtractionMethod",
    "ExtractionResult",
    "FailureKind",
]
