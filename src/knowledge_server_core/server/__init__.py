"""
Server Module - knowledge server components
"""

from .knowledge_manager import KnowledgeManager
from .server import KnowledgeServer

__all__ = [
    "KnowledgeManager",
    "KnowledgeServer",
]
