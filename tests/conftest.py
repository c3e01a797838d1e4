"""
Shared test fixtures and configuration for entire test suite.

Provides: deterministic fake providers, isolated session stores, RAG settings
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import asyncio
import re

import pytest

from backend.application.services.rag_pipeline import RAGPipeline
from backend.configs.rag import RagSettings
from backend.core.exceptions import EmbeddingUnavailableError, GenerationUnavailableError
from backend.core.session import InMemorySessionStore

VOCABULARY = [
    "paris", "france", "tokyo", "japan", "cat", "dog", "sky", "blue",
    "capital", "notes", "python", "rust",
]


def keyword_vector(text: str) -> list[float]:
    """Bag-of-keywords vector over VOCABULARY."""
    words = re.findall(r"[a-z]+", text.lower())
    return [float(words.count(term)) for term in VOCABULARY]


class FakeEmbedder:
    """
    Deterministic embedder for tests.

    Records every call, can fail on texts containing a marker, and can
    delay specific texts to force out-of-order completion.
    """

    def __init__(
        self,
        fail_on: str | None = None,
        delays: dict[str, float] | None = None,
    ) -> None:
        self.fail_on = fail_on
        self.delays = delays or {}
        self.calls: list[str] = []

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        for marker, delay in self.delays.items():
            if marker in text:
                await asyncio.sleep(delay)
        if self.fail_on is not None and self.fail_on in text:
            raise EmbeddingUnavailableError("provider down", provider="fake")
        return keyword_vector(text)


class FakeGenerator:
    """Generator that echoes its inputs so tests can inspect the context."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[tuple[str, str]] = []

    async def generate(self, context: str, question: str) -> str:
        self.calls.append((context, question))
        if self.fail:
            raise GenerationUnavailableError("provider down", provider="fake")
        return f"ANSWER[{question}]"


@pytest.fixture
def session_store() -> InMemorySessionStore:
    """Provide an isolated, empty session store."""
    return InMemorySessionStore()


@pytest.fixture
def fake_embedder() -> FakeEmbedder:
    """Provide deterministic keyword embedder."""
    return FakeEmbedder()


@pytest.fixture
def fake_generator() -> FakeGenerator:
    """Provide echoing answer generator."""
    return FakeGenerator()


@pytest.fixture
def rag_settings() -> RagSettings:
    """Provide RAG settings independent of the environment."""
    return RagSettings(
        max_chunk_size=1000,
        top_k=3,
        context_delimiter="\n---\n",
        embedding_concurrency=4,
        hard_split_oversized=False,
    )


@pytest.fixture
def pipeline(
    session_store: InMemorySessionStore,
    fake_embedder: FakeEmbedder,
    fake_generator: FakeGenerator,
    rag_settings: RagSettings,
) -> RAGPipeline:
    """Provide RAGPipeline wired to fakes."""
    return RAGPipeline(
        session_store=session_store,
        embedder=fake_embedder,
        generator=fake_generator,
        settings=rag_settings,
    )


@pytest.fixture
def make_embedder():
    """Factory for FakeEmbedder with failure or delay behaviour."""
    return FakeEmbedder


@pytest.fixture
def make_pipeline(session_store: InMemorySessionStore, rag_settings: RagSettings):
    """Factory for RAGPipeline with custom providers or settings overrides."""

    def _make(embedder=None, generator=None, **overrides) -> RAGPipeline:
        settings = rag_settings.model_copy(update=overrides) if overrides else rag_settings
        return RAGPipeline(
            session_store=session_store,
            embedder=embedder or FakeEmbedder(),
            generator=generator or FakeGenerator(),
            settings=settings,
        )

    return _make


@pytest.fixture
def make_generator():
    """Factory for FakeGenerator, optionally failing."""
    return FakeGenerator
