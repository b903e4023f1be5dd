"""Vector store module: append-only chunk index with similarity search."""

from .base import BaseVectorStore
from .providers.in_memory import InMemoryVectorStore

__all__ = ["BaseVectorStore", "InMemoryVectorStore"]
