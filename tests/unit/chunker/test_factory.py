"""Tests for ChunkerFactory."""

import pytest

from docqa.chunker import BaseChunker, ChunkerFactory, SentenceWindowChunker
from docqa.errors import ConfigurationError


class TestChunkerFactory:

    def test_create_default(self):
        chunker = ChunkerFactory.create("sentence_window")
        assert isinstance(chunker, SentenceWindowChunker)

    def test_create_with_params(self):
        chunker = ChunkerFactory.create("sentence_window", window_size=4, stride=3)
        assert chunker.window_size == 4
        assert chunker.stride == 3

    def test_unknown_type(self):
        with pytest.raises(ConfigurationError, match="Unknown chunker type"):
            ChunkerFactory.create("semantic")

    def test_register_rejects_non_chunker(self):
        with pytest.raises(TypeError):
            ChunkerFactory.register("bad", object)

    def test_register_custom_chunker(self):
        class SingleChunker(BaseChunker):
            def chunk(self, text, source_file, confidence=None):
                return []

        ChunkerFactory.register("single", SingleChunker)
        try:
            assert "single" in ChunkerFactory.list_types()
            assert isinstance(ChunkerFactory.create("single"), SingleChunker)
        finally:
            ChunkerFactory._registry.pop("single", None)
