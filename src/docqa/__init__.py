"""
DocQA - In-process document question answering over extracted text.

Text is split into overlapping sentence windows, embedded with a
deterministic hashed bag-of-words vector, ranked by cosine similarity and
stitched into a templated answer with a confidence score.
"""

__version__ = "0.1.0"

# Core entities
from .core import (
    Chunk,
    ChunkType,
    DetectedTable,
    Metrics,
    ProcessedDocument,
    ProcessingStatus,
    QueryResult,
    SearchResult,
)

# Components
from .cache import BaseCache, LRUCache
from .chunker import BaseChunker, ChunkerFactory, SentenceWindowChunker
from .embedder import BaseEmbedder, EmbedderFactory, FallbackEmbedder, HashEmbedder
from .extractor import (
    BaseExtractor,
    ExtractionResult,
    ExtractorFactory,
    PdfStreamExtractor,
    PlainTextExtractor,
)
from .retrieval import CosineRanker
from .synthesizer import BaseSynthesizer, SynthesizerFactory, TemplateSynthesizer
from .vector_store import BaseVectorStore, InMemoryVectorStore

# Configuration
from .config import ComponentConfig, ComponentFactory, DocQAConfig, EmbedderConfig, RetrievalConfig

# Pipelines and service
from .pipeline import IngestionPipeline
from .service import RetrievalService

# Errors
from .errors import DocQAError, InvalidQueryError

# Utilities
from .utils import configure_logging, cosine_similarity

__all__ = [
    # Version
    "__version__",
    # Core
    "Chunk",
    "ChunkType",
    "DetectedTable",
    "Metrics",
    "ProcessedDocument",
    "ProcessingStatus",
    "QueryResult",
    "SearchResult",
    # Cache
    "BaseCache",
    "LRUCache",
    # Chunker
    "BaseChunker",
    "SentenceWindowChunker",
    "ChunkerFactory",
    # Embedder
    "BaseEmbedder",
    "HashEmbedder",
    "FallbackEmbedder",
    "EmbedderFactory",
    # Extractor
    "BaseExtractor",
    "ExtractionResult",
    "ExtractorFactory",
    "PlainTextExtractor",
    "PdfStreamExtractor",
    # Retrieval
    "CosineRanker",
    "BaseVectorStore",
    "InMemoryVectorStore",
    # Synthesizer
    "BaseSynthesizer",
    "TemplateSynthesizer",
    "SynthesizerFactory",
    # Config
    "ComponentConfig",
    "EmbedderConfig",
    "RetrievalConfig",
    "DocQAConfig",
    "ComponentFactory",
    # Service
    "IngestionPipeline",
    "RetrievalService",
    # Errors
    "DocQAError",
    "InvalidQueryError",
    # Utilities
    "configure_logging",
    "cosine_similarity",
]
