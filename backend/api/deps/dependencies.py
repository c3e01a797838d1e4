"""
Dependency injection container.

Factory functions for FastAPI dependencies. The session store, providers and
pipeline are process-wide singletons held by ServiceCache.

Dependencies: backend.configs, backend.application, backend.boundary, backend.core
System role: DI container for service injection
"""

from fastapi import Depends

from backend.application.services import DocumentService, RAGPipeline
from backend.configs import Settings, get_settings
from backend.core.session import InMemorySessionStore


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._session_store = None
        self._embedder = None
        self._generator = None
        self._pipeline = None

    @property
    def session_store(self) -> InMemorySessionStore:
        """Get cached session store."""
        if self._session_store is None:
            self._session_store = InMemorySessionStore()
        return self._session_store

    @property
    def embedder(self):
        """Get cached embedding provider."""
        if self._embedder is None:
            from backend.boundary.llm import GeminiEmbedder

            self._embedder = GeminiEmbedder.from_settings(get_settings().llm)
        return self._embedder

    @property
    def generator(self):
        """Get cached answer generator."""
        if self._generator is None:
            from backend.boundary.llm import GeminiAnswerGenerator

            self._generator = GeminiAnswerGenerator.from_settings(get_settings().llm)
        return self._generator

    @property
    def pipeline(self) -> RAGPipeline:
        """Get cached RAG pipeline."""
        if self._pipeline is None:
            self._pipeline = RAGPipeline(
                session_store=self.session_store,
                embedder=self.embedder,
                generator=self.generator,
                settings=get_settings().rag,
            )
        return self._pipeline

    def clear(self) -> None:
        """Clear all cached instances."""
        self._session_store = None
        self._embedder = None
        self._generator = None
        self._pipeline = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_session_store() -> InMemorySessionStore:
    """Get the process-wide session store."""
    return get_service_cache().session_store


def get_rag_pipeline() -> RAGPipeline:
    """Get the process-wide RAG pipeline."""
    return get_service_cache().pipeline


def get_document_service(
    pipeline: RAGPipeline = Depends(get_rag_pipeline),
) -> DocumentService:
    """
    Get document service instance.

    Args:
        pipeline: RAG pipeline (injected via Depends)

    Returns:
        DocumentService: Service bound to the shared pipeline
    """
    return DocumentService(pipeline=pipeline)
