"""Provider implementations for embedders."""

from .fallback import FallbackEmbedder
from .hash_embedder import HashEmbedder, rolling_hash

__all__ = ["HashEmbedder", "FallbackEmbedder", "rolling_hash"]
