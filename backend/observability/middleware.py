"""
FastAPI middleware for observability.

CorrelationMiddleware assigns every request an ID (taken from the caller's
X-Correlation-ID header when present) and stores it on request.state.
RequestLoggingMiddleware logs one line per request tagged with that ID.
CorrelationMiddleware must be added last so it runs outermost.

Dependencies: fastapi, starlette
System role: Request/response observability injection
"""

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Attach a correlation ID to the request and echo it on the response."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex
        request.state.correlation_id = correlation_id

        response: Response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request."""

    async def dispatch(self, request: Request, call_next):
        """
        Log HTTP request outcome with timing.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response object
        """
        start = time.perf_counter()
        correlation_id = getattr(request.state, "correlation_id", None)
        route = f"{request.method} {request.url.path}"

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{route} - unhandled {type(e).__name__} [{correlation_id}]",
                extra={"process_time_ms": _elapsed_ms(start), "correlation_id": correlation_id},
            )
            raise

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            f"{route} - {response.status_code} in {_elapsed_ms(start)}ms [{correlation_id}]",
            extra={"status_code": response.status_code, "correlation_id": correlation_id},
        )
        return response
