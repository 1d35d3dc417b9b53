"""
Extraction results and failures produced by the ingestion pipeline
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ExtractionMethod(Enum):
    """How the text of a document was obtained"""
    DIRECT_TEXT = "DirectText"
    OCR = "OCR"


class FailureKind(Enum):
    """Terminal failure kinds of one ingestion call"""
    UNSUPPORTED_FORMAT = "UnsupportedFormat"
    MALFORMED_DOCUMENT = "MalformedDocument"
    EMPTY_DOCUMENT = "EmptyDocument"
    NO_RECOVERABLE_TEXT = "NoRecoverableText"
    RECOGNITION_FAILURE = "RecognitionFailure"


class PipelineState(Enum):
    """States one ingestion call moves through"""
    RECEIVED = "received"
    DETECTED = "detected"
    PRIMARY_EXTRACTED = "primary_extracted"
    OCR_EXTRACTED = "ocr_extracted"
    VALIDATED = "validated"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class ExtractionResult:
    """Normalized text artifact for one document. ``text`` is never blank."""
    text: str
    method: ExtractionMethod

    def __post_init__(self):
        if not self.text or not self.text.strip():
            raise ValueError("ExtractionResult text must not be empty")

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ExtractionFailure:
    """Typed failure for one document"""
    kind: FailureKind
    message: str
    details: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False


ExtractionOutcome = Union[ExtractionResult, ExtractionFailure]
