"""
Knowledge Server Client - HTTP client for the knowledge server API
"""

from .client import KnowledgeClient, KnowledgeClientError

__all__ = ["KnowledgeClient", "KnowledgeClientError"]
