"""Running evaluation metrics owned by a retrieval service."""

from pydantic import BaseModel, Field


class Metrics(BaseModel):
    """
    Counters and running values for one service instance.

    Attributes:
        total_documents: Number of ingest calls that indexed chunks
        total_queries: Number of queries answered
        response_latency: Decaying average of query latency in ms
        retrieval_accuracy: Confidence of the most recent query
        ocr_accuracy: Last extraction confidence reported by a collaborator
        document_processing_time: Duration of the most recent ingest in ms
    """

    total_documents: int = Field(default=0, ge=0)
    total_queries: int = Field(default=0, ge=0)
    response_latency: float = 0.0
    retrieval_accuracy: float = 0.0
    ocr_accuracy: float = 0.0
    document_processing_time: float = 0.0

    def record_document(self, processing_time_ms: float, extraction_confidence: float | None = None) -> None:
        self.total_documents += 1
        self.document_processing_time = processing_time_ms
        if extraction_confidence is not None:
            self.ocr_accuracy = extraction_confidence

    def record_query(self, latency_ms: float, confidence: float) -> None:
        """Count a query.

        Latency is averaged pairwise with the previous value, so older samples
        decay geometrically. Confidence is overwritten, not averaged.
        """
        self.total_queries += 1
        self.response_latency = (self.response_latency + latency_ms) / 2
        self.retrieval_accuracy = confidence

    def reset_counters(self) -> None:
        """Zero the document and query counters; running values are kept."""
        self.total_documents = 0
        self.total_queries = 0

    def reset(self) -> None:
        """Zero everything."""
        for name, field in type(self).model_fields.items():
            setattr(self, name, field.default)
