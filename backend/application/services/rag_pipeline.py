"""
RAG pipeline orchestrator.

Wires the ingestion path (text -> chunks -> vectors -> stored session) and the
query path (question -> vector -> ranked chunks -> context -> answer). Holds no
business logic beyond ordering calls; segmentation, storage and ranking live in
backend.core.

Dependencies: asyncio, backend.core, backend.configs
System role: Orchestration layer between the API boundary and the RAG core
"""

import asyncio
import logging
from collections.abc import Sequence

from pydantic import BaseModel, Field

from backend.configs.rag import RagSettings
from backend.core.exceptions import EmbeddingUnavailableError, EmptyDocumentError
from backend.core.interfaces import AnswerGenerator, Embedder
from backend.core.models import RankedResult, StoredChunk, Vector, as_vector
from backend.core.segmenter import segment_text
from backend.core.session.session_store import InMemorySessionStore
from backend.core.similarity import rank

logger = logging.getLogger(__name__)


class IngestionResult(BaseModel):
    """Outcome of ingesting one document."""

    session_id: str = Field(description="Session created for the document")
    chunk_count: int = Field(description="Number of chunks stored")


def build_context(results: Sequence[RankedResult], delimiter: str = "\n---\n") -> str:
    """Join ranked chunk texts into a single context string."""
    return delimiter.join(r.text for r in results)


class RAGPipeline:
    """
    Ingestion and query orchestration over an injected session store.

    Provider failures propagate unchanged. There is no retry and no
    partial ingestion: if any chunk fails to embed, no session is created.
    """

    def __init__(
        self,
        session_store: InMemorySessionStore,
        embedder: Embedder,
        generator: AnswerGenerator,
        settings: RagSettings | None = None,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            session_store: Store that owns ingested sessions
            embedder: Provider computing text vectors
            generator: Provider producing answers from context
            settings: Segmentation and retrieval parameters (defaults if None)
        """
        self.session_store = session_store
        self.embedder = embedder
        self.generator = generator
        self.settings = settings or RagSettings()

    async def ingest(self, raw_text: str) -> str:
        """
        Segment, embed and store a document.

        Returns:
            str: New session ID

        Raises:
            EmptyDocumentError: When the text yields no chunks
            EmbeddingUnavailableError: When any chunk fails to embed
        """
        result = await self.ingest_document(raw_text)
        return result.session_id

    async def ingest_document(self, raw_text: str) -> IngestionResult:
        """
        Segment, embed and store a document, reporting the chunk count.

        Flow:
        1. Segment text into chunks
        2. Embed every chunk concurrently
        3. Assemble pairs in chunk order
        4. Create the session

        Args:
            raw_text: Extracted document text

        Returns:
            IngestionResult: New session ID and number of stored chunks

        Raises:
            EmptyDocumentError: When the text yields no chunks
            EmbeddingUnavailableError: When any chunk fails to embed
        """
        chunks = segment_text(
            raw_text,
            max_chunk_size=self.settings.max_chunk_size,
            hard_split_oversized=self.settings.hard_split_oversized,
        )
        if not chunks:
            raise EmptyDocumentError(details={"text_length": len(raw_text)})

        logger.info(f"{__name__}:ingest_document - Segmented document into {len(chunks)} chunks")

        vectors = await self._embed_chunks(chunks)
        entries = [StoredChunk(text=chunk, vector=vector) for chunk, vector in zip(chunks, vectors)]

        session_id = self.session_store.create(entries)
        logger.info(f"{__name__}:ingest_document - END session_id={session_id}")
        return IngestionResult(session_id=session_id, chunk_count=len(entries))

    async def query(self, session_id: str, question: str) -> str:
        """
        Answer a question from a session's most relevant chunks.

        Args:
            session_id: Session returned by ingest()
            question: User's question

        Returns:
            str: Generator output, verbatim

        Raises:
            SessionNotFoundError: When the session does not exist
            EmbeddingUnavailableError: When the question cannot be embedded
            GenerationUnavailableError: When the answer cannot be generated
            DimensionMismatchError: When the question vector does not match the session
        """
        entries = self.session_store.get(session_id)

        query_vector = await self._embed(question)
        results = rank(query_vector, entries, self.settings.top_k)
        logger.info(
            f"{__name__}:query - session_id={session_id} ranked {len(results)}/{len(entries)} chunks, "
            f"top_score={results[0].score if results else None}"
        )

        context = build_context(results, self.settings.context_delimiter)
        return await self.generator.generate(context, question)

    async def _embed(self, text: str) -> Vector:
        values = await self.embedder.embed(text)
        if len(values) == 0:
            raise EmbeddingUnavailableError("Embedding provider returned an empty vector")
        return as_vector(values)

    async def _embed_chunks(self, chunks: list[str]) -> list[Vector]:
        """Embed chunks concurrently, placing each vector at its chunk's index."""
        semaphore = asyncio.Semaphore(self.settings.embedding_concurrency)
        vectors: list[Vector | None] = [None] * len(chunks)

        async def embed_one(index: int, chunk: str) -> None:
            async with semaphore:
                vectors[index] = await self._embed(chunk)

        tasks = [asyncio.ensure_future(embed_one(i, chunk)) for i, chunk in enumerate(chunks)]
        try:
            await asyncio.gather(*tasks)
        except Exception as e:
            for task in tasks:
                task.cancel()
            # Let cancelled tasks finish before surfacing the failure.
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.error(f"{__name__}:_embed_chunks - Embedding failed: {type(e).__name__}: {e}")
            raise

        return vectors  # type: ignore[return-value]
