"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_document_service,
    get_rag_pipeline,
    get_service_cache,
    get_session_store,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_document_service",
    "get_rag_pipeline",
    "get_service_cache",
    "get_session_store",
    "get_settings_dependency",
]
