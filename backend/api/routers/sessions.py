"""
Session API endpoints.

Routes:
- DELETE /sessions/{id} - Delete session

Dependencies: backend.core.session
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from backend.api.deps import get_session_store
from backend.api.routers.router_utils import handle_rag_errors
from backend.core.session import InMemorySessionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_rag_errors
async def delete_session(
    session_id: str,
    session_store: InMemorySessionStore = Depends(get_session_store),
) -> Response:
    """
    Delete a session and its stored chunks.

    Raises:
        HTTPException(404): Session not found
    """
    session_store.delete(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
