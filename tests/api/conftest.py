"""
API test fixtures.

Provides a FastAPI app whose pipeline and session store are wired to the
fake providers from the root conftest.

Dependencies: fastapi.testclient
System role: HTTP-level test infrastructure
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from backend.api.deps import get_rag_pipeline, get_session_store
from backend.api.main import create_app
from backend.application.services.rag_pipeline import RAGPipeline
from backend.core.session import InMemorySessionStore


@pytest.fixture
def app(pipeline: RAGPipeline, session_store: InMemorySessionStore) -> FastAPI:
    """Provide app with dependency overrides for the pipeline and store."""
    application = create_app()
    application.dependency_overrides[get_rag_pipeline] = lambda: pipeline
    application.dependency_overrides[get_session_store] = lambda: session_store
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide test client without running the lifespan."""
    return TestClient(app)


@pytest.fixture
def session_id(client: TestClient) -> str:
    """Provide a session created through the text ingestion endpoint."""
    response = client.post(
        "/api/v1/documents/text",
        json={"text": "Paris is the capital of France. Tokyo is the capital of Japan."},
    )
    return response.json()["session_id"]
