"""Pytest configuration and global fixtures for DocQA tests."""

from pathlib import Path

import pytest

from docqa.chunker import SentenceWindowChunker
from docqa.core.metrics import Metrics
from docqa.embedder import HashEmbedder
from docqa.service import RetrievalService
from docqa.synthesizer import TemplateSynthesizer
from docqa.vector_store import InMemoryVectorStore

# Import shared fixtures
from tests.fixtures.common import (  # noqa: F401
    cancer_report_text,
    long_report_text,
    sample_chunks,
    sample_pdf_bytes,
)


@pytest.fixture
def chunker():
    return SentenceWindowChunker()


@pytest.fixture
def embedder():
    return HashEmbedder(dimension=384, cache_size=100)


@pytest.fixture
def vector_store():
    return InMemoryVectorStore()


@pytest.fixture
def synthesizer():
    return TemplateSynthesizer()


@pytest.fixture
def service(chunker, embedder, vector_store, synthesizer):
    return RetrievalService(
        chunker=chunker,
        embedder=embedder,
        vector_store=vector_store,
        synthesizer=synthesizer,
        metrics=Metrics(),
    )


# ==================== Pytest Configuration ====================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


def pytest_collection_modifyitems(config, items):
    for item in items:
        rel_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
        elif "e2e" in rel_path.parts:
            item.add_marker(pytest.mark.e2e)
