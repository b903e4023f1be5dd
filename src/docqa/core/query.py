"""Query result entity returned to the presentation layer."""

from pydantic import BaseModel, Field

from .chunk import Chunk


class QueryResult(BaseModel):
    """Answer to a single question. Transient, never stored.

    Attributes:
        answer: Human-readable answer text
        relevant_chunks: Retrieved chunks, most relevant first
        confidence: Blended retrieval/extraction confidence in [0, 1]
        latency_ms: Wall-clock time spent answering
    """

    answer: str
    relevant_chunks: list[Chunk] = Field(default_factory=list)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    latency_ms: float = Field(default=0.0, ge=0.0)
