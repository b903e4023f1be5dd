"""Retrieval: ranking of indexed chunks against a query."""

from .ranker import DEFAULT_TOP_K, CosineRanker

__all__ = ["CosineRanker", "DEFAULT_TOP_K"]
