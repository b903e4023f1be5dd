"""Document entity tracking a single upload through ingestion."""

from datetime import datetime, timezone
from enum import StrEnum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field

from ..errors import DocumentStateError
from .chunk import Chunk


class ProcessingStatus(StrEnum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"  # Terminal
    ERROR = "error"          # Terminal


_TRANSITIONS: dict[ProcessingStatus, set[ProcessingStatus]] = {
    ProcessingStatus.PENDING: {ProcessingStatus.PROCESSING},
    ProcessingStatus.PROCESSING: {ProcessingStatus.COMPLETED, ProcessingStatus.ERROR},
    ProcessingStatus.COMPLETED: set(),
    ProcessingStatus.ERROR: set(),
}


class DetectedTable(BaseModel):
    """A run of table-like lines found in extracted text."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    rows: list[str]
    type: str = "detected_table"


class ProcessedDocument(BaseModel):
    """
    Represents an uploaded document and the chunks derived from it.

    The record is descriptive only: chunks carry a copy of ``name`` as their
    ``source_file`` and do not point back here.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    media_type: str = "text/plain"
    size: int = Field(default=0, ge=0)

    chunks: list[Chunk] = Field(default_factory=list)
    extracted_text: str = ""
    extraction_confidence: float | None = None
    tables: list[DetectedTable] = Field(default_factory=list)

    status: ProcessingStatus = Field(default=ProcessingStatus.PENDING)
    uploaded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    processed_at: datetime | None = None
    processing_time_ms: float = 0.0
    error: dict[str, Any] | None = None

    model_config = {
        "frozen": False,
    }

    def _transition(self, target: ProcessingStatus) -> None:
        if target not in _TRANSITIONS[self.status]:
            raise DocumentStateError(self.status.value, target.value)
        self.status = target

    def mark_processing(self) -> None:
        self._transition(ProcessingStatus.PROCESSING)

    def mark_completed(self) -> None:
        self._transition(ProcessingStatus.COMPLETED)
        self.processed_at = datetime.now(timezone.utc)

    def mark_error(self, error: dict[str, Any] | None = None) -> None:
        """Move to ``error``; chunks produced so far are discarded."""
        self._transition(ProcessingStatus.ERROR)
        self.chunks = []
        self.error = error

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self.status]
