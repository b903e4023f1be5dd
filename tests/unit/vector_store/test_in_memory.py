"""Tests for InMemoryVectorStore."""

import pytest

from docqa.errors import VectorStoreError
from docqa.vector_store import InMemoryVectorStore
from tests.utils.builders import ChunkBuilder


class TestInMemoryVectorStore:

    def test_add_and_count(self, vector_store, sample_chunks, embedder):
        for chunk in sample_chunks:
            chunk.attach_embedding(embedder.embed_text(chunk.content))

        vector_store.add(sample_chunks)
        assert vector_store.count() == 3

    def test_add_is_append_only(self, vector_store):
        first = ChunkBuilder().with_content("first chunk").with_embedding([1.0, 0.0]).build()
        second = ChunkBuilder().with_content("second chunk").with_embedding([0.0, 1.0]).build()

        vector_store.add([first])
        vector_store.add([second])

        assert [c.id for c in vector_store.chunks] == [first.id, second.id]

    def test_rejects_batch_with_missing_embedding(self, vector_store):
        good = ChunkBuilder().with_content("embedded").with_embedding([1.0, 0.0]).build()
        bad = ChunkBuilder().with_content("not embedded").build()

        with pytest.raises(VectorStoreError, match="missing embedding"):
            vector_store.add([good, bad])

        # Nothing from the rejected batch is kept
        assert vector_store.count() == 0

    def test_search_empty_store(self, vector_store):
        assert vector_store.search([1.0, 0.0], top_k=5) == []

    def test_search_invalid_top_k(self, vector_store):
        with pytest.raises(ValueError):
            vector_store.search([1.0, 0.0], top_k=0)

    def test_search_orders_by_similarity(self, vector_store):
        near = ChunkBuilder().with_content("near").with_embedding([1.0, 0.1]).build()
        far = ChunkBuilder().with_content("far").with_embedding([0.0, 1.0]).build()
        vector_store.add([far, near])

        results = vector_store.search([1.0, 0.0], top_k=2)

        assert [r.chunk.content for r in results] == ["near", "far"]
        assert results[0].score > results[1].score

    def test_search_truncates_to_top_k(self, vector_store):
        chunks = [
            ChunkBuilder().with_content(f"chunk {i}").with_embedding([1.0, float(i)]).build()
            for i in range(6)
        ]
        vector_store.add(chunks)

        assert len(vector_store.search([1.0, 0.0], top_k=4)) == 4
        assert len(vector_store.search([1.0, 0.0], top_k=50)) == 6

    def test_clear(self, vector_store):
        vector_store.add([ChunkBuilder().with_content("x").with_embedding([1.0]).build()])
        vector_store.clear()

        assert vector_store.count() == 0
        assert vector_store.search([1.0], top_k=1) == []

    def test_uses_given_ranker(self, mocker):
        ranker = mocker.Mock()
        ranker.rank.return_value = []
        store = InMemoryVectorStore(ranker=ranker)
        store.add([ChunkBuilder().with_content("x").with_embedding([1.0]).build()])

        store.search([1.0], top_k=3)

        ranker.rank.assert_called_once()
        assert ranker.rank.call_args.args[2] == 3
