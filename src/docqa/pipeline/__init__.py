"""Pipelines that move documents through the chunk/embed/index stages."""

from .ingestion import IngestionPipeline

__all__ = ["IngestionPipeline"]
