"""Retrieval service - the in-process entry point for document Q&A."""

import time

from loguru import logger

from .chunker import BaseChunker, SentenceWindowChunker
from .config.factory import ComponentFactory
from .config.models import DocQAConfig
from .core.document import ProcessedDocument, ProcessingStatus
from .core.metrics import Metrics
from .core.query import QueryResult
from .embedder import BaseEmbedder, HashEmbedder
from .errors import IndexingError, InvalidQueryError, wrap_exception
from .pipeline import IngestionPipeline
from .retrieval.ranker import DEFAULT_TOP_K
from .synthesizer import BaseSynthesizer, TemplateSynthesizer
from .vector_store import BaseVectorStore, InMemoryVectorStore

QUERY_FAILED_MESSAGE = (
    "Sorry, I encountered an error while processing your question. Please try again."
)


class RetrievalService:
    """Orchestrates ingestion and question answering over one in-memory index.

    Ingestion runs chunker -> embedder -> index; queries run
    embedder -> ranker -> synthesizer. The service owns its index and its
    ``Metrics``; independent instances share nothing.

    The service does no locking. Callers sharing one instance across threads
    must serialize ``ingest``, ``query`` and ``clear`` themselves.

    Attributes:
        chunker: Text chunker
        embedder: Embedding generator, used for chunks and questions alike
        vector_store: The chunk index
        synthesizer: Answer composer
        metrics: Running counters for this instance
        top_k: Chunks retrieved per query when not given explicitly
    """

    def __init__(
        self,
        chunker: BaseChunker | None = None,
        embedder: BaseEmbedder | None = None,
        vector_store: BaseVectorStore | None = None,
        synthesizer: BaseSynthesizer | None = None,
        metrics: Metrics | None = None,
        top_k: int = DEFAULT_TOP_K,
    ):
        if top_k < 1:
            raise ValueError("top_k must be a positive integer")

        self.chunker = chunker or SentenceWindowChunker()
        self.embedder = embedder or HashEmbedder()
        self.vector_store = vector_store or InMemoryVectorStore()
        self.synthesizer = synthesizer or TemplateSynthesizer()
        self.metrics = metrics or Metrics()
        self.top_k = top_k

        self.pipeline = IngestionPipeline(self.chunker, self.embedder, self.vector_store)
        logger.info("RetrievalService initialized")

    @classmethod
    def from_config(cls, config: DocQAConfig | None = None) -> "RetrievalService":
        """Build a service from configuration.

        Raises:
            ConfigurationError: If a component type or parameter is invalid
        """
        config = config or DocQAConfig()
        return cls(
            chunker=ComponentFactory.create_chunker(config.chunker),
            embedder=ComponentFactory.create_embedder(config.embedder),
            synthesizer=ComponentFactory.create_synthesizer(config.synthesizer),
            top_k=config.retrieval.top_k,
        )

    # ==================== Ingestion ====================

    def ingest(
        self,
        text: str,
        source_file: str,
        confidence: float | None = None,
    ) -> ProcessedDocument:
        """Index already-extracted text as one document.

        Each call appends new chunks, even for text seen before. A document
        whose embedding fails ends in ``error`` with nothing indexed.

        Args:
            text: Extracted plain text
            source_file: Name of the originating document
            confidence: Extraction confidence in [0, 1], if known

        Returns:
            The processed document record

        Raises:
            IndexingError: If text is not a string or confidence is out of range
        """
        if not isinstance(text, str):
            raise IndexingError("text must be a string", details={"type": type(text).__name__})
        if confidence is not None and not 0.0 <= confidence <= 1.0:
            raise IndexingError("confidence must be between 0.0 and 1.0", details={"confidence": confidence})

        document = self.pipeline.ingest_text(text, source_file, confidence=confidence)
        self._record(document)
        return document

    def process_file(self, payload: bytes | str, name: str, media_type: str) -> ProcessedDocument:
        """Extract text from a raw payload and index it.

        Extraction never fails outright; unreadable payloads are indexed as a
        low-confidence placeholder.
        """
        document = self.pipeline.process(payload, name, media_type)
        self._record(document)
        return document

    def _record(self, document: ProcessedDocument) -> None:
        if document.status is ProcessingStatus.COMPLETED:
            self.metrics.record_document(
                document.processing_time_ms, document.extraction_confidence
            )

    # ==================== Query ====================

    def query(self, question: str, top_k: int | None = None) -> QueryResult:
        """Answer a question from the indexed chunks.

        Args:
            question: Natural-language question
            top_k: Chunks to retrieve, defaults to the service's ``top_k``

        Returns:
            QueryResult with answer, chunks, confidence and latency. Internal
            failures produce an apologetic answer with confidence 0.

        Raises:
            InvalidQueryError: If the question is blank or not a string, or
                top_k is smaller than 1
        """
        if not isinstance(question, str) or not question.strip():
            raise InvalidQueryError("question must be a non-empty string")

        k = self.top_k if top_k is None else top_k
        if k < 1:
            raise InvalidQueryError(f"top_k must be a positive integer, got {k}", details={"top_k": k})

        start = time.perf_counter()
        try:
            query_vector = self.embedder.embed_text(question)
            results = self.vector_store.search(query_vector, top_k=k)
            chunks = [result.chunk for result in results]
            answer, confidence = self.synthesizer.synthesize(question, chunks)
        except Exception as e:
            error = wrap_exception(e, context="retrieval")
            logger.error(f"Query processing failed: {error}")
            return QueryResult(
                answer=QUERY_FAILED_MESSAGE,
                confidence=0.0,
                latency_ms=(time.perf_counter() - start) * 1000,
            )

        latency_ms = (time.perf_counter() - start) * 1000
        self.metrics.record_query(latency_ms, confidence)

        logger.debug(
            f"Answered query with {len(chunks)} chunks "
            f"(confidence={confidence:.2f}, latency={latency_ms:.2f}ms)"
        )
        return QueryResult(
            answer=answer,
            relevant_chunks=chunks,
            confidence=confidence,
            latency_ms=latency_ms,
        )

    # ==================== Lifecycle ====================

    def clear(self) -> None:
        """Empty the index and zero the document and query counters.

        Latency, confidence and extraction values are left as last observed.
        """
        self.vector_store.clear()
        self.metrics.reset_counters()
        logger.info("Cleared all documents")

    def clear_all(self) -> None:
        self.clear()

    def get_metrics(self) -> Metrics:
        """Return a snapshot of the current metrics."""
        return self.metrics.model_copy()
