"""
Test suite for dependency injection container.

Tests ServiceCache lazy construction and the FastAPI factory functions.
Google providers are patched so no API key is needed.

System role: Verification of DI container
"""

from unittest.mock import MagicMock, patch

import pytest

from backend.api.deps import (
    ServiceCache,
    get_document_service,
    get_rag_pipeline,
    get_service_cache,
    get_session_store,
    get_settings_dependency,
)
from backend.application.services import DocumentService, RAGPipeline
from backend.configs import Settings
from backend.core.session import InMemorySessionStore


@pytest.fixture
def patched_providers():
    """Patch Gemini providers with mocks."""
    with patch("backend.boundary.llm.GeminiEmbedder") as mock_embedder, patch(
        "backend.boundary.llm.GeminiAnswerGenerator"
    ) as mock_generator:
        mock_embedder.from_settings.return_value = MagicMock(name="embedder")
        mock_generator.from_settings.return_value = MagicMock(name="generator")
        yield mock_embedder, mock_generator


class TestServiceCache:
    """Test suite for ServiceCache."""

    def test_session_store_should_be_cached(self) -> None:
        """Test the same store is returned on every access."""
        cache = ServiceCache()

        assert isinstance(cache.session_store, InMemorySessionStore)
        assert cache.session_store is cache.session_store

    def test_pipeline_should_share_session_store(self, patched_providers) -> None:
        """Test the pipeline is wired to the cached store and providers."""
        # Arrange
        mock_embedder, mock_generator = patched_providers
        cache = ServiceCache()

        # Act
        pipeline = cache.pipeline

        # Assert
        assert isinstance(pipeline, RAGPipeline)
        assert pipeline.session_store is cache.session_store
        assert pipeline.embedder is mock_embedder.from_settings.return_value
        assert pipeline.generator is mock_generator.from_settings.return_value
        assert cache.pipeline is pipeline

    def test_clear_should_drop_sessions(self) -> None:
        """Test clear() discards the in-memory store."""
        cache = ServiceCache()
        store = cache.session_store

        cache.clear()

        assert cache.session_store is not store


class TestFactories:
    """Test suite for dependency factory functions."""

    def test_get_settings_dependency_should_return_settings(self) -> None:
        assert isinstance(get_settings_dependency(), Settings)

    def test_get_session_store_should_use_global_cache(self) -> None:
        assert get_session_store() is get_service_cache().session_store

    def test_get_rag_pipeline_should_use_global_cache(self, patched_providers) -> None:
        cache = get_service_cache()
        cache.clear()
        try:
            assert get_rag_pipeline() is cache.pipeline
        finally:
            cache.clear()

    def test_get_document_service_should_wrap_pipeline(self, pipeline: RAGPipeline) -> None:
        """Test DocumentService is bound to the injected pipeline."""
        service = get_document_service(pipeline=pipeline)

        assert isinstance(service, DocumentService)
        assert service.pipeline is pipeline
