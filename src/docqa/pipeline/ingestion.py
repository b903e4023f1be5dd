"""Ingestion pipeline: payload to indexed chunks, one document at a time."""

import time

from loguru import logger

from ..chunker import BaseChunker
from ..core.chunk import Chunk
from ..core.document import ProcessedDocument
from ..embedder import BaseEmbedder
from ..errors import EmbeddingError, wrap_exception
from ..extractor import ExtractorFactory, detect_tables
from ..utils.performance import timer
from ..vector_store import BaseVectorStore


class IngestionPipeline:
    """Pipeline for ingesting documents into a vector store.

    This pipeline orchestrates the ingestion workflow:
    1. Extract text from the payload (``process`` only)
    2. Detect table-like regions
    3. Chunk the text
    4. Generate embeddings for every chunk
    5. Store the chunks in the vector store

    Ingestion is all-or-nothing per document: if any step fails the document
    ends in the ``error`` state and none of its chunks are stored. Failures are
    recorded on the document, not raised.

    Attributes:
        chunker: Text chunker
        embedder: Embedding generator
        vector_store: Destination index
    """

    def __init__(
        self,
        chunker: BaseChunker,
        embedder: BaseEmbedder,
        vector_store: BaseVectorStore,
    ):
        self.chunker = chunker
        self.embedder = embedder
        self.vector_store = vector_store

        logger.debug(
            f"IngestionPipeline initialized: {type(chunker).__name__} -> "
            f"{type(embedder).__name__} -> {type(vector_store).__name__}"
        )

    def process(self, payload: bytes | str, name: str, media_type: str) -> ProcessedDocument:
        """Extract, chunk, embed and store a raw payload.

        Args:
            payload: Raw document bytes or text
            name: Document name, copied onto every chunk as ``source_file``
            media_type: Declared media type of the payload

        Returns:
            The document in ``completed`` or ``error`` state
        """
        logger.info(f"Processing document '{name}' ({media_type}, {len(payload)} bytes)")

        extractor = ExtractorFactory.for_media_type(media_type)
        with timer(f"Extracting text from {name}", threshold_ms=100):
            extraction = extractor.extract(payload, media_type)

        return self.ingest_text(
            extraction.text,
            name,
            confidence=extraction.confidence,
            media_type=media_type,
            size=len(payload),
        )

    def ingest_text(
        self,
        text: str,
        name: str,
        confidence: float | None = None,
        media_type: str = "text/plain",
        size: int | None = None,
    ) -> ProcessedDocument:
        """Chunk, embed and store already-extracted text.

        Args:
            text: Extracted plain text
            name: Document name
            confidence: Extraction confidence reported by the collaborator
            media_type: Media type label kept on the document record
            size: Payload size in bytes; defaults to the UTF-8 size of ``text``

        Returns:
            The document in ``completed`` or ``error`` state
        """
        document = ProcessedDocument(
            name=name,
            media_type=media_type,
            size=size if size is not None else len(text.encode("utf-8")),
            extracted_text=text,
            extraction_confidence=confidence,
        )
        document.mark_processing()
        start = time.perf_counter()

        stage = "chunking"
        try:
            document.tables = detect_tables(text)

            chunks = self.chunker.chunk(text, name, confidence)
            logger.debug(f"Created {len(chunks)} chunks from '{name}'")

            stage = "embedding"
            with timer(f"Embedding {len(chunks)} chunks", threshold_ms=500):
                self._embed(chunks)

            stage = "indexing"
            processing_time_ms = (time.perf_counter() - start) * 1000
            for chunk in chunks:
                chunk.metadata["processing_time_ms"] = processing_time_ms
            self.vector_store.add(chunks)

        except Exception as e:
            error = wrap_exception(e, context=stage)
            logger.error(f"Failed to ingest '{name}' during {stage}: {error}")
            document.mark_error(error.to_dict())
            return document

        document.chunks = chunks
        document.processing_time_ms = processing_time_ms
        document.mark_completed()

        logger.info(
            f"Ingested '{name}': {len(chunks)} chunks, "
            f"{len(document.tables)} tables in {processing_time_ms:.2f}ms"
        )
        return document

    def _embed(self, chunks: list[Chunk]) -> None:
        embeddings = self.embedder.embed([chunk.content for chunk in chunks])

        if len(embeddings) != len(chunks):
            raise EmbeddingError(
                f"Embedding count mismatch: {len(embeddings)} embeddings "
                f"for {len(chunks)} chunks"
            )

        for chunk, embedding in zip(chunks, embeddings):
            chunk.attach_embedding(embedding)
