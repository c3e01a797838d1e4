"""
Exception hierarchy for the Chat With Notes application.

Provides layered exception structure for domain-specific errors.
Input problems (DocumentError) and dependency failures (ExternalServiceError)
are kept apart so the boundary can tell a caller whether to fix the document,
re-ingest, or retry.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class NotesChatException(Exception):
    """Base exception for all Chat With Notes application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class DocumentError(NotesChatException):
    """Base exception for problems with the ingested document itself."""

    pass


class EmptyDocumentError(DocumentError):
    """Raised when segmentation of a document produces no chunks."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Document contains no text to ingest", details)


class UnsupportedDocumentError(DocumentError):
    """Raised when an uploaded file has a content type we cannot read."""

    def __init__(
        self,
        content_type: str | None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize unsupported document error.

        Args:
            content_type: MIME type that was rejected
            details: Additional context
        """
        details = details or {}
        details["content_type"] = content_type
        super().__init__(f"Unsupported file type: {content_type}", details)


class ParsingError(DocumentError):
    """Raised when text extraction from a document fails."""

    def __init__(
        self,
        message: str,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parsing error.

        Args:
            message: Error message
            file_type: Type of file that failed parsing
            details: Additional context
        """
        details = details or {}
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, details)


class EmptySessionError(NotesChatException):
    """Raised when the session store is asked to create a session with no entries."""

    def __init__(self) -> None:
        super().__init__("Cannot create a session without any chunks")


class SessionNotFoundError(NotesChatException):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}", details)


class DimensionMismatchError(NotesChatException):
    """Raised when vectors of differing length are stored together or compared."""

    def __init__(
        self,
        expected: int,
        actual: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize dimension mismatch error.

        Args:
            expected: Dimensionality of the reference vector
            actual: Dimensionality of the offending vector
            details: Additional context
        """
        details = details or {}
        details["expected"] = expected
        details["actual"] = actual
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Vector dimension mismatch: expected {expected}, got {actual}",
            details,
        )


class ExternalServiceError(NotesChatException):
    """Base exception for failures of an external provider."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize external service error.

        Args:
            message: Error message
            provider: Name of the provider or model that failed
            details: Additional context
        """
        details = details or {}
        if provider:
            details["provider"] = provider
        super().__init__(message, details)


class EmbeddingUnavailableError(ExternalServiceError):
    """Raised when the embedding provider fails to return a vector."""

    pass


class GenerationUnavailableError(ExternalServiceError):
    """Raised when the answer generation provider fails."""

    pass
