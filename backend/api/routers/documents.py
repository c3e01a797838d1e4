"""
Document API endpoints.

Routes:
- POST /documents/upload - Upload a PDF or plain text file and ingest it
- POST /documents/text - Ingest raw text

Dependencies: backend.application.services.document_service, backend.models
System role: Document ingestion HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from backend.api.deps import get_document_service, get_settings_dependency
from backend.api.routers.router_utils import handle_rag_errors
from backend.application.services.document_service import DocumentService
from backend.configs import Settings
from backend.models.document import IngestTextRequest, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/upload", response_model=UploadResponse)
@handle_rag_errors
async def upload_document(
    file: UploadFile = File(...),
    document_service: DocumentService = Depends(get_document_service),
    settings: Settings = Depends(get_settings_dependency),
) -> UploadResponse:
    """
    Upload a document and create a chat session for it.

    Args:
        file: PDF or plain text file
        document_service: Injected DocumentService
        settings: Injected application settings

    Returns:
        UploadResponse: New session ID and chunk count

    Raises:
        HTTPException(400): Unsupported, unreadable or empty document
        HTTPException(413): File larger than the configured limit
        HTTPException(502): Embedding provider failure
    """
    data = await file.read()
    max_bytes = settings.server.max_upload_bytes
    if len(data) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File too large. Maximum size: {max_bytes // (1024 * 1024)}MB",
        )

    result = await document_service.ingest_upload(
        data=data,
        content_type=file.content_type,
        filename=file.filename,
    )
    return UploadResponse(session_id=result.session_id, chunks=result.chunk_count)


@router.post("/text", response_model=UploadResponse)
@handle_rag_errors
async def ingest_text(
    request: IngestTextRequest,
    document_service: DocumentService = Depends(get_document_service),
) -> UploadResponse:
    """
    Ingest raw text and create a chat session for it.

    Raises:
        HTTPException(400): Text contains nothing to ingest
        HTTPException(502): Embedding provider failure
    """
    result = await document_service.ingest_text(request.text)
    return UploadResponse(session_id=result.session_id, chunks=result.chunk_count)
