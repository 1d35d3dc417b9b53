"""
Storage module - knowledge store implementations
"""

from typing import Any, Dict

from .base import KnowledgeStore
from .memory import InMemoryKnowledgeStore
from .postgres import PostgreSQLKnowledgeStore


def create_knowledge_store(config: Dict[str, Any]) -> KnowledgeStore:
    """Build the store selected by ``database.backend``"""
    backend = config.get("backend", "memory")
    if backend == "postgres":
        return PostgreSQLKnowledgeStore(config)
    if backend == "memory":
        return InMemoryKnowledgeStore()
    raise ValueError(f"Unsupported knowledge store backend: {backend}")


__all__ = [
    "KnowledgeStore",
    "InMemoryKnowledgeStore",
    "PostgreSQLKnowledgeStore",
    "create_knowledge_store",
]
