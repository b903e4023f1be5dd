"""Tests for IngestionPipeline."""

import pytest

from docqa.chunker.base import NO_READABLE_TEXT_MESSAGE
from docqa.core import ProcessingStatus
from docqa.extractor import EXTRACTION_FAILED_TEXT
from docqa.pipeline import IngestionPipeline


@pytest.fixture
def pipeline(chunker, embedder, vector_store):
    return IngestionPipeline(chunker, embedder, vector_store)


class TestIngestText:

    def test_completed_document(self, pipeline, vector_store, cancer_report_text):
        document = pipeline.ingest_text(cancer_report_text, "report.pdf", confidence=0.9)

        assert document.status == ProcessingStatus.COMPLETED
        assert len(document.chunks) == 2
        assert document.extraction_confidence == 0.9
        assert document.size == len(cancer_report_text.encode("utf-8"))
        assert document.processing_time_ms >= 0
        assert vector_store.count() == 2

    def test_chunks_are_embedded_and_tagged(self, pipeline, long_report_text):
        document = pipeline.ingest_text(long_report_text, "findings.txt")

        for chunk in document.chunks:
            assert chunk.has_embedding
            assert len(chunk.embedding) == 384
            assert chunk.source_file == "findings.txt"
            assert chunk.metadata["processing_time_ms"] == document.processing_time_ms

    def test_short_text_indexes_placeholder(self, pipeline, vector_store):
        document = pipeline.ingest_text("tiny", "blank.png")

        assert document.status == ProcessingStatus.COMPLETED
        assert document.chunks[0].content == NO_READABLE_TEXT_MESSAGE
        assert document.chunks[0].confidence == pytest.approx(0.1)
        assert vector_store.count() == 1

    def test_embedding_failure_stores_nothing(self, pipeline, embedder, vector_store, mocker, long_report_text):
        calls = {"n": 0}
        original = embedder.embed_text

        def flaky(text):
            calls["n"] += 1
            if calls["n"] == 3:
                raise RuntimeError("embedding backend down")
            return original(text)

        mocker.patch.object(embedder, "embed_text", side_effect=flaky)

        document = pipeline.ingest_text(long_report_text, "findings.txt")

        assert document.status == ProcessingStatus.ERROR
        assert document.chunks == []
        assert document.error["error_type"] == "EmbeddingError"
        assert vector_store.count() == 0

    def test_embedding_count_mismatch(self, pipeline, embedder, vector_store, mocker, long_report_text):
        mocker.patch.object(embedder, "embed", return_value=[[1.0]])

        document = pipeline.ingest_text(long_report_text, "findings.txt")

        assert document.status == ProcessingStatus.ERROR
        assert "mismatch" in document.error["message"]
        assert vector_store.count() == 0

    def test_chunker_failure(self, pipeline, chunker, mocker):
        mocker.patch.object(chunker, "chunk", side_effect=RuntimeError("split failed"))

        document = pipeline.ingest_text("Some text that is long enough.", "x.txt")

        assert document.status == ProcessingStatus.ERROR
        assert "chunking" in document.error["message"]

    def test_detects_tables(self, pipeline):
        text = "Region    Q1    Q2\nNorth     120   135\nSouth     98    110\nEnd of the table section."
        document = pipeline.ingest_text(text, "table.txt")

        assert len(document.tables) == 1
        assert len(document.tables[0].rows) == 3


class TestProcess:

    def test_plain_text_payload(self, pipeline, vector_store, cancer_report_text):
        payload = cancer_report_text.encode("utf-8")
        document = pipeline.process(payload, "notes.txt", "text/plain")

        assert document.status == ProcessingStatus.COMPLETED
        assert document.media_type == "text/plain"
        assert document.size == len(payload)
        assert document.extracted_text == cancer_report_text
        assert vector_store.count() == 2

    def test_pdf_payload(self, pipeline, sample_pdf_bytes):
        document = pipeline.process(sample_pdf_bytes, "q3.pdf", "application/pdf")

        assert document.status == ProcessingStatus.COMPLETED
        assert "quarterly report shows strong growth" in document.chunks[0].content

    def test_unreadable_payload_indexes_placeholder(self, pipeline, vector_store):
        document = pipeline.process(b"\x00\x01\x02" * 50, "scan.pdf", "application/pdf")

        assert document.status == ProcessingStatus.COMPLETED
        assert document.extracted_text == EXTRACTION_FAILED_TEXT
        assert document.extraction_confidence == pytest.approx(0.1)
        assert all(chunk.confidence == pytest.approx(0.1) for chunk in document.chunks)
        assert vector_store.count() == len(document.chunks)
