"""
RAG error handling utilities.

Provides a decorator that maps the core exception hierarchy onto HTTP status
codes, so callers can tell a bad document from an unknown session from a
failing dependency.

Mapping:
- DocumentError -> 400
- SessionNotFoundError -> 404
- ExternalServiceError -> 502
- any other NotesChatException or unexpected error -> 500
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from backend.core.exceptions import (
    DocumentError,
    ExternalServiceError,
    NotesChatException,
    SessionNotFoundError,
)
from backend.models.common import ErrorDetail

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def error_detail(exc: Exception) -> dict:
    """Build the JSON detail payload for an exception."""
    return ErrorDetail(
        error_type=type(exc).__name__,
        message=getattr(exc, "message", str(exc)),
        details=getattr(exc, "details", None) or None,
    ).model_dump()


def handle_rag_errors(func: F) -> F:
    """
    Decorator to handle RAG errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except DocumentError as e:
            logger.warning("Rejected document", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error_detail(e))

        except SessionNotFoundError as e:
            logger.warning("Session not found", extra={"session_id": e.session_id})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error_detail(e))

        except ExternalServiceError as e:
            logger.error("External provider failure", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=error_detail(e))

        except NotesChatException as e:
            logger.error("RAG request failed", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=error_detail(e),
            )

        except Exception as e:
            logger.exception("Unexpected failure in RAG operation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=error_detail(e),
            )

    return wrapper  # type: ignore
