"""Shared test fixtures for all test types."""

import pytest

from docqa.core.chunk import Chunk
from tests.utils.builders import ChunkBuilder


@pytest.fixture
def cancer_report_text() -> str:
    return "Cancer rates rose sharply. Survival improved significantly. Screening increased access."


@pytest.fixture
def long_report_text() -> str:
    """Ten sentences, each long enough to survive the sentence filter."""
    return " ".join(
        f"Finding number {i} describes a separate observation about topic {i}."
        for i in range(10)
    )


@pytest.fixture
def sample_chunks() -> list[Chunk]:
    return [
        ChunkBuilder().with_content("Cancer rates rose sharply in every region we surveyed.").with_source("report.pdf").build(),
        ChunkBuilder().with_content("Survival improved significantly over the last decade.").with_source("report.pdf").with_confidence(0.9).build(),
        ChunkBuilder().with_content("Screening increased access for rural communities.").with_source("summary.pdf").with_confidence(0.5).build(),
    ]


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return (
        b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n"
        b"The quarterly report shows strong growth in every region. "
        b"Revenue increased by a large margin this year.\n"
    )
