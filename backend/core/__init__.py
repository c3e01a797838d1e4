"""
Core business logic module.

Contains the RAG core: segmentation, session storage, similarity ranking,
provider protocols and the exception hierarchy.
"""

from backend.core.exceptions import (
    DimensionMismatchError,
    DocumentError,
    EmbeddingUnavailableError,
    EmptyDocumentError,
    EmptySessionError,
    ExternalServiceError,
    GenerationUnavailableError,
    NotesChatException,
    ParsingError,
    SessionNotFoundError,
    UnsupportedDocumentError,
)
from backend.core.models import RankedResult, StoredChunk
from backend.core.segmenter import segment_text
from backend.core.session import InMemorySessionStore
from backend.core.similarity import cosine_similarity, rank

__all__ = [
    # Exceptions
    "NotesChatException",
    "DocumentError",
    "EmptyDocumentError",
    "UnsupportedDocumentError",
    "ParsingError",
    "EmptySessionError",
    "SessionNotFoundError",
    "DimensionMismatchError",
    "ExternalServiceError",
    "EmbeddingUnavailableError",
    "GenerationUnavailableError",
    # Business logic
    "InMemorySessionStore",
    "RankedResult",
    "StoredChunk",
    "cosine_similarity",
    "rank",
    "segment_text",
]
