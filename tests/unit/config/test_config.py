"""Tests for configuration models, settings and the component factory."""

import pytest
from pydantic import ValidationError

from docqa.chunker import SentenceWindowChunker
from docqa.config import (
    ComponentConfig,
    ComponentFactory,
    DocQAConfig,
    EmbedderConfig,
    RetrievalConfig,
    Settings,
    load_settings,
)
from docqa.embedder import FallbackEmbedder, HashEmbedder
from docqa.errors import ConfigurationError
from docqa.synthesizer import TemplateSynthesizer


class TestConfigModels:

    def test_defaults(self):
        config = DocQAConfig()

        assert config.chunker.type == "sentence_window"
        assert config.embedder.type == "hash"
        assert config.embedder.fallback_on_error is False
        assert config.synthesizer.type == "template"
        assert config.retrieval.top_k == 5

    def test_top_k_must_be_positive(self):
        with pytest.raises(ValidationError):
            RetrievalConfig(top_k=0)

    def test_from_settings(self):
        settings = Settings(EMBEDDING_DIMENSION=128, EMBEDDING_CACHE_SIZE=50, DEFAULT_TOP_K=3)
        config = DocQAConfig.from_settings(settings)

        assert config.embedder.params == {"dimension": 128, "cache_size": 50}
        assert config.retrieval.top_k == 3

    def test_from_dict(self):
        config = DocQAConfig.model_validate(
            {"chunker": {"type": "sentence_window", "params": {"window_size": 4}}}
        )
        assert config.chunker.params["window_size"] == 4


class TestSettings:

    def test_load_from_environment(self, monkeypatch):
        monkeypatch.setenv("EMBEDDING_DIMENSION", "64")
        monkeypatch.setenv("DEFAULT_TOP_K", "7")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = load_settings()

        assert settings.EMBEDDING_DIMENSION == 64
        assert settings.DEFAULT_TOP_K == 7
        assert settings.LOG_LEVEL == "DEBUG"

    def test_frozen(self):
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.DEFAULT_TOP_K = 10

    def test_rejects_invalid_dimension(self):
        with pytest.raises(ValidationError):
            Settings(EMBEDDING_DIMENSION=0)


class TestComponentFactory:

    def test_creates_components(self):
        assert isinstance(
            ComponentFactory.create_chunker(ComponentConfig(type="sentence_window")),
            SentenceWindowChunker,
        )
        assert isinstance(ComponentFactory.create_embedder(EmbedderConfig()), HashEmbedder)
        assert isinstance(
            ComponentFactory.create_synthesizer(ComponentConfig(type="template")),
            TemplateSynthesizer,
        )

    def test_embedder_with_fallback(self):
        embedder = ComponentFactory.create_embedder(EmbedderConfig(fallback_on_error=True))
        assert isinstance(embedder, FallbackEmbedder)

    def test_unknown_type(self):
        with pytest.raises(ConfigurationError):
            ComponentFactory.create_chunker(ComponentConfig(type="semantic"))

    def test_invalid_params(self):
        with pytest.raises(ConfigurationError, match="Invalid chunker params"):
            ComponentFactory.create_chunker(
                ComponentConfig(type="sentence_window", params={"stride": 5})
            )

    def test_unexpected_param(self):
        with pytest.raises(ConfigurationError, match="Invalid embedder params"):
            ComponentFactory.create_embedder(EmbedderConfig(params={"model": "bert"}))
