"""Service orchestrators."""

from .document_service import DocumentService
from .rag_pipeline import IngestionResult, RAGPipeline, build_context

__all__ = [
    "DocumentService",
    "IngestionResult",
    "RAGPipeline",
    "build_context",
]
