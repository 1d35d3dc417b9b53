"""
Knowledge store data models
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class KnowledgeRecord:
    """Unit persisted to the knowledge store"""
    content: str
    source: str


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a knowledge store insert"""
    success: bool
    message: Optional[str] = None

    @classmethod
    def ok(cls) -> "StoreResult":
        return cls(success=True)

    @classmethod
    def failure(cls, message: str) -> "StoreResult":
        return cls(success=False, message=message)
