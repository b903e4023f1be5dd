"""Configuration models for DocQA components.

This module defines Pydantic models for component configuration.
All components are configured via a type string and optional parameters.
"""

from typing import Any

from pydantic import BaseModel, Field

from .settings import Settings


class ComponentConfig(BaseModel):
    """Configuration for a single component.

    Attributes:
        type: Component type identifier (e.g., "sentence_window", "hash")
        params: Component-specific parameters as a dictionary
    """

    type: str
    params: dict[str, Any] = Field(default_factory=dict)


class EmbedderConfig(ComponentConfig):
    """Embedder configuration.

    Attributes:
        fallback_on_error: Substitute a random unit vector when embedding fails
    """

    type: str = "hash"
    fallback_on_error: bool = False


class RetrievalConfig(BaseModel):
    """Retrieval configuration.

    Attributes:
        top_k: Number of chunks retrieved per query
    """

    top_k: int = Field(default=5, ge=1)


class DocQAConfig(BaseModel):
    """Main configuration for a retrieval service."""

    chunker: ComponentConfig = Field(
        default_factory=lambda: ComponentConfig(type="sentence_window")
    )
    embedder: EmbedderConfig = Field(default_factory=EmbedderConfig)
    synthesizer: ComponentConfig = Field(
        default_factory=lambda: ComponentConfig(type="template")
    )
    retrieval: RetrievalConfig = Field(default_factory=RetrievalConfig)

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocQAConfig":
        """Build a default configuration sized by environment settings."""
        return cls(
            embedder=EmbedderConfig(
                params={
                    "dimension": settings.EMBEDDING_DIMENSION,
                    "cache_size": settings.EMBEDDING_CACHE_SIZE,
                }
            ),
            retrieval=RetrievalConfig(top_k=settings.DEFAULT_TOP_K),
        )
