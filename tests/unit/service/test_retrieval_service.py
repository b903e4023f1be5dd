"""Tests for RetrievalService."""

import pytest

from docqa.config import DocQAConfig, RetrievalConfig
from docqa.core import ProcessingStatus
from docqa.errors import IndexingError, InvalidQueryError
from docqa.service import QUERY_FAILED_MESSAGE, RetrievalService
from docqa.synthesizer.providers.template import NO_RELEVANT_INFORMATION_MESSAGE


class TestIngest:

    def test_ingest_updates_metrics(self, service, cancer_report_text):
        document = service.ingest(cancer_report_text, "report.pdf", confidence=0.92)

        metrics = service.get_metrics()
        assert document.status == ProcessingStatus.COMPLETED
        assert metrics.total_documents == 1
        assert metrics.ocr_accuracy == pytest.approx(0.92)
        assert metrics.document_processing_time == document.processing_time_ms

    def test_same_text_twice_appends(self, service, vector_store, cancer_report_text):
        service.ingest(cancer_report_text, "report.pdf")
        service.ingest(cancer_report_text, "report.pdf")

        assert vector_store.count() == 4
        assert service.get_metrics().total_documents == 2

    def test_rejects_non_string_text(self, service):
        with pytest.raises(IndexingError):
            service.ingest(b"bytes", "report.pdf")

    def test_rejects_out_of_range_confidence(self, service):
        with pytest.raises(IndexingError):
            service.ingest("Valid text for indexing.", "report.pdf", confidence=1.5)

    def test_failed_ingest_not_counted(self, service, embedder, mocker, cancer_report_text):
        mocker.patch.object(embedder, "embed_text", side_effect=RuntimeError("down"))

        document = service.ingest(cancer_report_text, "report.pdf")

        assert document.status == ProcessingStatus.ERROR
        assert service.get_metrics().total_documents == 0

    def test_process_file(self, service, sample_pdf_bytes):
        document = service.process_file(sample_pdf_bytes, "q3.pdf", "application/pdf")

        assert document.status == ProcessingStatus.COMPLETED
        assert service.get_metrics().total_documents == 1


class TestQuery:

    @pytest.mark.parametrize("question", ["", "   ", None, 42])
    def test_invalid_question(self, service, question):
        with pytest.raises(InvalidQueryError):
            service.query(question)

    def test_invalid_top_k(self, service):
        with pytest.raises(InvalidQueryError):
            service.query("anything?", top_k=0)

    def test_empty_index(self, service):
        result = service.query("What happened?")

        assert result.answer == NO_RELEVANT_INFORMATION_MESSAGE
        assert result.confidence == 0.0
        assert result.relevant_chunks == []
        assert result.latency_ms >= 0

    def test_query_updates_metrics(self, service, cancer_report_text):
        service.ingest(cancer_report_text, "report.pdf")

        result = service.query("What happened to cancer rates?")

        metrics = service.get_metrics()
        assert metrics.total_queries == 1
        assert metrics.retrieval_accuracy == result.confidence
        assert metrics.response_latency == pytest.approx(result.latency_ms / 2)

    def test_top_k_limits_chunks(self, service, long_report_text):
        service.ingest(long_report_text, "findings.txt")

        assert len(service.query("topic 3", top_k=2).relevant_chunks) == 2
        assert len(service.query("topic 3").relevant_chunks) == 5

    def test_most_similar_chunk_first(self, service):
        service.ingest("Bananas are yellow fruit that grow in bunches on plants.", "fruit.txt")
        service.ingest("Volcanoes erupt molten rock from deep below the crust.", "geo.txt")

        result = service.query("volcanoes erupt molten rock")

        assert result.relevant_chunks[0].source_file == "geo.txt"

    def test_internal_failure_degrades(self, service, synthesizer, mocker, cancer_report_text):
        service.ingest(cancer_report_text, "report.pdf")
        mocker.patch.object(synthesizer, "synthesize", side_effect=RuntimeError("template broke"))

        result = service.query("What happened?")

        assert result.answer == QUERY_FAILED_MESSAGE
        assert result.confidence == 0.0
        assert service.get_metrics().total_queries == 0


class TestLifecycle:

    def test_clear(self, service, vector_store, cancer_report_text):
        service.ingest(cancer_report_text, "report.pdf")
        service.query("cancer?")

        service.clear()

        metrics = service.get_metrics()
        assert vector_store.count() == 0
        assert metrics.total_documents == 0
        assert metrics.total_queries == 0
        assert metrics.response_latency > 0

    def test_metrics_snapshot_is_a_copy(self, service):
        snapshot = service.get_metrics()
        snapshot.total_queries = 99
        assert service.get_metrics().total_queries == 0

    def test_instances_are_independent(self, cancer_report_text):
        first = RetrievalService()
        second = RetrievalService()

        first.ingest(cancer_report_text, "report.pdf")

        assert second.query("cancer?").answer == NO_RELEVANT_INFORMATION_MESSAGE
        assert second.get_metrics().total_documents == 0

    def test_from_config(self):
        service = RetrievalService.from_config(DocQAConfig(retrieval=RetrievalConfig(top_k=2)))
        assert service.top_k == 2

    def test_invalid_default_top_k(self):
        with pytest.raises(ValueError):
            RetrievalService(top_k=0)
