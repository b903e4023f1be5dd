"""Chunk entity representing a retrievable segment of a document."""

from datetime import datetime, timezone
from enum import StrEnum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field


class ChunkType(StrEnum):
    TEXT = "text"
    TABLE = "table"    # Supplied by extraction collaborators only
    IMAGE = "image"
    CHART = "chart"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class Chunk(BaseModel):
    """Represents a chunk of text from a document.

    Attributes:
        id: Unique identifier (auto-generated UUID if not provided)
        content: The text content of this chunk
        type: Kind of content; the chunker only produces ``text``
        source_file: Name of the originating document
        confidence: Extraction confidence in [0, 1], ``None`` when unknown
        embedding: Vector embedding, attached once after creation
        metadata: Flexible dictionary for chunk-level metadata
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    content: str = Field(..., min_length=1)
    type: ChunkType = Field(default=ChunkType.TEXT)
    source_file: str
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    embedding: list[float] | None = None
    metadata: dict[str, Any] = Field(default_factory=lambda: {"extracted_at": _now_iso()})

    model_config = {
        "frozen": False,
    }

    def attach_embedding(self, vector: list[float]) -> None:
        """Set the embedding. A chunk's embedding never changes once set.

        Raises:
            ValueError: If the chunk already has an embedding or the vector is empty
        """
        if self.embedding is not None:
            raise ValueError(f"Chunk {self.id} already has an embedding")
        if not vector:
            raise ValueError("Embedding vector cannot be empty")
        self.embedding = list(vector)

    @property
    def has_embedding(self) -> bool:
        return bool(self.embedding)
