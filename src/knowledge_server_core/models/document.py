"""
Uploaded document model
"""

from dataclasses import dataclass, field
from enum import Enum


class DocumentKind(Enum):
    """Document kinds the ingestion pipeline knows about"""
    PDF = "pdf"
    DOCX = "docx"
    UNSUPPORTED = "unsupported"


@dataclass
class UploadedDocument:
    """Raw upload held by the pipeline for the duration of one ingestion call"""
    buffer: bytes = field(repr=False)
    declared_name: str
    declared_size: int = -1

    def __post_init__(self):
        if self.declared_size < 0:
            self.declared_size = len(self.buffer)
