"""
Exceptions raised across the knowledge server.

Ingestion errors each carry a ``FailureKind`` so the orchestrator can turn
them into stable, caller-visible failure values.
"""

from typing import Optional

from .models.processing import FailureKind


class KnowledgeServerError(Exception):
    """Base exception for all knowledge server errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigError(KnowledgeServerError):
    """Invalid or missing configuration."""


class KnowledgeStoreError(KnowledgeServerError):
    """The knowledge store could not be reached or queried."""


class AnswerError(KnowledgeServerError):
    """The language model request failed."""


# Ingestion errors
class IngestionError(KnowledgeServerError):
    """Error during document ingestion."""

    kind: FailureKind


class UnsupportedFormatError(IngestionError):
    """Declared extension is not a supported document kind."""

    kind = FailureKind.UNSUPPORTED_FORMAT


class MalformedDocumentError(IngestionError):
    """Extractor could not parse the buffer structurally."""

    kind = FailureKind.MALFORMED_DOCUMENT


class EmptyDocumentError(IngestionError):
    """DOCX parsed but contains no text."""

    kind = FailureKind.EMPTY_DOCUMENT


class NoRecoverableTextError(IngestionError):
    """PDF has no text layer and OCR recognized nothing either."""

    kind = FailureKind.NO_RECOVERABLE_TEXT


class RecognitionError(IngestionError):
    """The OCR engine itself failed."""

    kind = FailureKind.RECOGNITION_FAILURE
