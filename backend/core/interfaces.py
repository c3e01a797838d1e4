"""
Abstractions for the external providers the RAG core depends on.

The core calls these protocols, never a concrete SDK, so tests can pass simple
fakes and providers can be swapped without touching the pipeline.

Common protocols:
- Embedder.embed(text) -> vector
- AnswerGenerator.generate(context, question) -> answer

Dependencies: typing
System role: Contracts between the pipeline and the boundary layer
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class Embedder(Protocol):
    async def embed(self, text: str) -> Sequence[float]:
        """Raises EmbeddingUnavailableError on provider failure."""
        ...


class AnswerGenerator(Protocol):
    async def generate(self, context: str, question: str) -> str:
        """Raises GenerationUnavailableError on provider failure."""
        ...
