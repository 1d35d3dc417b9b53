"""
Data models - core data structures

Models used while ingesting documents and storing knowledge
"""

from .document import DocumentKind, UploadedDocument
from .knowledge_base import KnowledgeRecord, StoreResult
from .processing import (
    ExtractionFailure,
    ExtractionMethod,
    ExtractionOutcome,
    ExtractionResult,
    FailureKind,
    PipelineState,
)

__all__ = [
    "DocumentKind",
    "UploadedDocument",
    "KnowledgeRecord",
    "StoreResult",
    "ExtractionFailure",
    "ExtractionMethod",
    "ExtractionOutcome",
    "ExtractionResult",
    "FailureKind",
    "PipelineState",
]
