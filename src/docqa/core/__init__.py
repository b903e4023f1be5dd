"""Core entities shared across the pipeline."""

from .chunk import Chunk, ChunkType
from .document import DetectedTable, ProcessedDocument, ProcessingStatus
from .metrics import Metrics
from .query import QueryResult
from .search_result import SearchResult

__all__ = [
    "Chunk",
    "ChunkType",
    "DetectedTable",
    "ProcessedDocument",
    "ProcessingStatus",
    "Metrics",
    "QueryResult",
    "SearchResult",
]
