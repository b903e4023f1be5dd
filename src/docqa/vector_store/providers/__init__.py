"""Provider implementations for vector stores."""

from .in_memory import InMemoryVectorStore

__all__ = ["InMemoryVectorStore"]
