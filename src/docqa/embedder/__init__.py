"""Embedder module for vector generation.

This module provides embedding functionality and a factory
for creating embedders.
"""

from .base import BaseEmbedder
from .factory import EmbedderFactory
from .providers.fallback import FallbackEmbedder
from .providers.hash_embedder import HashEmbedder, rolling_hash

__all__ = ["BaseEmbedder", "HashEmbedder", "FallbackEmbedder", "EmbedderFactory", "rolling_hash"]
