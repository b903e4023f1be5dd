"""SearchResult entity representing a retrieval result."""

from pydantic import BaseModel, Field

from .chunk import Chunk


class SearchResult(BaseModel):
    """Represents a search result with its cosine similarity.

    Attributes:
        chunk: The retrieved chunk
        score: Cosine similarity in range [-1, 1]
        position: Insertion position of the chunk in the index
    """

    chunk: Chunk
    score: float = Field(..., ge=-1.0, le=1.0)
    position: int = Field(default=0, ge=0)

    model_config = {
        "frozen": True,  # Results are immutable
    }
