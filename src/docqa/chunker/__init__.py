"""Chunker module for text splitting.

This module provides text chunking functionality and a factory
for creating chunkers.
"""

from .base import (
    NO_READABLE_TEXT_CONFIDENCE,
    NO_READABLE_TEXT_MARKER,
    NO_READABLE_TEXT_MESSAGE,
    BaseChunker,
)
from .factory import ChunkerFactory
from .providers.sentence_window import SentenceWindowChunker

__all__ = [
    "BaseChunker",
    "SentenceWindowChunker",
    "ChunkerFactory",
    "NO_READABLE_TEXT_MARKER",
    "NO_READABLE_TEXT_MESSAGE",
    "NO_READABLE_TEXT_CONFIDENCE",
]
