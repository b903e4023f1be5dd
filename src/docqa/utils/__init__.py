"""Utility functions for DocQA."""

from .logging import configure_logging
from .performance import timer
from .similarity import cosine_similarity, normalize

__all__ = ["cosine_similarity", "normalize", "timer", "configure_logging"]
