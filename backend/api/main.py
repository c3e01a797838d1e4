"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, backend.api.routers, backend.observability, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.deps.dependencies import get_service_cache
from backend.configs import get_settings
from backend.observability.logger import configure_logging
from backend.observability.middleware import (
    CORRELATION_HEADER,
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import (
    chat_router,
    documents_router,
    health_router,
    sessions_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events. Sessions live in memory only,
    so shutdown discards them.
    """
    # Startup
    configure_logging(get_settings().log_level)
    cache = get_service_cache()
    _ = cache.session_store
    logger.info("Application startup: session store initialized")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="Chat With Notes API",
        description="Upload notes, then ask questions answered from their most relevant passages",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_HEADER],
    )

    # Last added runs first: correlation ID must exist before request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")
    app.include_router(sessions_router, prefix="/api/v1")

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "backend.api.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    main()
