"""Chat API endpoints.

Routes:
- POST /sessions/{session_id}/chat - Answer a question from the session's notes

Dependencies: backend.application.services.rag_pipeline
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.api.deps import get_rag_pipeline
from backend.api.routers.router_utils import handle_rag_errors
from backend.application.services.rag_pipeline import RAGPipeline
from backend.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["chat"])


@router.post("/{session_id}/chat", response_model=ChatResponse)
@handle_rag_errors
async def chat(
    session_id: str,
    request: ChatRequest,
    pipeline: RAGPipeline = Depends(get_rag_pipeline),
) -> ChatResponse:
    """Answer a question using the session's most relevant chunks.

    Args:
        session_id: Session ID returned by an upload
        request: ChatRequest with the user's message
        pipeline: Injected RAGPipeline

    Returns:
        ChatResponse: Generated answer

    Raises:
        HTTPException(404): Session not found
        HTTPException(502): Embedding or generation provider failure
    """
    logger.info(f"{__name__}:chat - START session_id={session_id}")
    answer = await pipeline.query(session_id, request.message)
    return ChatResponse(answer=answer)
