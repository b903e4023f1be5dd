"""Provider implementations for chunkers."""

from .sentence_window import SentenceWindowChunker

__all__ = ["SentenceWindowChunker"]
