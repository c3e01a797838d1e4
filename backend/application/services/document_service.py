"""
Document service orchestrator.

Coordinates text extraction from uploads and ingestion through RAGPipeline.

Dependencies: backend.boundary.parsing, backend.application.services.rag_pipeline
System role: Document ingestion orchestration
"""

import logging

from fastapi.concurrency import run_in_threadpool

from backend.application.services.rag_pipeline import IngestionResult, RAGPipeline
from backend.boundary.parsing import extract_text

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Document service orchestrator.

    Extracts text from uploaded files and hands it to the pipeline.
    """

    def __init__(self, pipeline: RAGPipeline) -> None:
        """
        Initialize document service.

        Args:
            pipeline: RAG pipeline used for ingestion
        """
        self.pipeline = pipeline

    async def ingest_text(self, text: str) -> IngestionResult:
        """
        Ingest raw text.

        Args:
            text: Document text

        Returns:
            IngestionResult: Session ID and chunk count

        Raises:
            EmptyDocumentError: When the text yields no chunks
            EmbeddingUnavailableError: When embedding fails
        """
        return await self.pipeline.ingest_document(text)

    async def ingest_upload(
        self,
        data: bytes,
        content_type: str | None,
        filename: str | None = None,
    ) -> IngestionResult:
        """
        Extract text from an uploaded file and ingest it.

        Steps:
        1. Extract text (PDF parsing runs in a worker thread)
        2. Segment, embed and store via the pipeline
        3. Return the new session ID and chunk count

        Args:
            data: File contents
            content_type: MIME type reported by the client
            filename: Original filename, for logging only

        Returns:
            IngestionResult: Session ID and chunk count

        Raises:
            UnsupportedDocumentError: When the file type is not PDF or plain text
            ParsingError: When PDF parsing fails
            EmptyDocumentError: When the file contains no text
            EmbeddingUnavailableError: When embedding fails
        """
        logger.info(
            f"{__name__}:ingest_upload - START filename={filename} content_type={content_type} "
            f"bytes={len(data)}"
        )
        text = await run_in_threadpool(extract_text, data, content_type)
        result = await self.ingest_text(text)
        logger.info(
            f"{__name__}:ingest_upload - END session_id={result.session_id} chunks={result.chunk_count}"
        )
        return result
