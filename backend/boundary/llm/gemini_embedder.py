"""
Google Generative AI embeddings adapter.

Wraps GoogleGenerativeAIEmbeddings behind the Embedder protocol with a fixed
output dimensionality, so every vector in a session has the same length.

Dependencies: langchain_google_genai
System role: Embedding provider for ingestion and query
"""

import logging

from langchain_google_genai import GoogleGenerativeAIEmbeddings

from backend.configs.llm import LLMSettings
from backend.core.exceptions import EmbeddingUnavailableError

logger = logging.getLogger(__name__)


class GeminiEmbedder:
    """Embed single texts with a Gemini embedding model."""

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1536,
        api_key: str | None = None,
    ) -> None:
        """
        Initialize embedder.

        Args:
            model: Google embedding model ID
            output_dimensionality: Fixed dimension for all embeddings
            api_key: Google API key (falls back to GOOGLE_API_KEY if None)
        """
        kwargs = {"google_api_key": api_key} if api_key else {}
        self._model = model
        self._output_dimensionality = output_dimensionality
        self._embeddings = GoogleGenerativeAIEmbeddings(model=model, **kwargs)
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    @classmethod
    def from_settings(cls, settings: LLMSettings) -> "GeminiEmbedder":
        return cls(
            model=settings.embedding_model,
            output_dimensionality=settings.embedding_dimension,
            api_key=settings.api_key,
        )

    async def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Args:
            text: Chunk or question text

        Returns:
            list[float]: Embedding vector

        Raises:
            EmbeddingUnavailableError: When the provider call fails or returns nothing
        """
        try:
            vector = await self._embeddings.aembed_query(
                text,
                output_dimensionality=self._output_dimensionality,
            )
        except Exception as e:
            logger.error(f"{__name__}:embed - Provider call failed: {type(e).__name__}: {e}")
            raise EmbeddingUnavailableError(
                f"Failed to generate embedding: {e}",
                provider=self._model,
            ) from e

        if not vector:
            raise EmbeddingUnavailableError(
                "Embedding provider returned an empty vector",
                provider=self._model,
            )
        return list(vector)
