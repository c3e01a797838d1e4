"""
In-memory session storage.

Maps session IDs to the ordered, immutable chunk/vector pairs produced by one
ingestion. Sessions live for the lifetime of the process.

What is inside:
InMemorySessionStore with create/get/delete.

Dependencies: threading, uuid, backend.core.models, backend.core.exceptions
System role: Only shared mutable state of the RAG core
"""

import logging
import threading
import uuid
from collections.abc import Callable, Sequence

from backend.core.exceptions import (
    DimensionMismatchError,
    EmptySessionError,
    SessionNotFoundError,
)
from backend.core.models import StoredChunk

logger = logging.getLogger(__name__)


def _new_session_id() -> str:
    return uuid.uuid4().hex


class InMemorySessionStore:
    """
    Write-once, read-many store of ingested sessions.

    ID allocation and mapping updates happen under a lock. A session's entries
    are frozen into a tuple before insertion, so readers never observe a
    partially created session.
    """

    def __init__(self, id_factory: Callable[[], str] = _new_session_id) -> None:
        """
        Initialize an empty store.

        Args:
            id_factory: Generates candidate session IDs (uuid4 hex by default)
        """
        self._id_factory = id_factory
        self._sessions: dict[str, tuple[StoredChunk, ...]] = {}
        self._lock = threading.Lock()

    def create(self, entries: Sequence[StoredChunk]) -> str:
        """
        Store a new session.

        Args:
            entries: Chunk/vector pairs in segmentation order

        Returns:
            str: Fresh session ID

        Raises:
            EmptySessionError: When entries is empty
            DimensionMismatchError: When entries disagree on vector length
        """
        frozen = tuple(entries)
        if not frozen:
            raise EmptySessionError()

        dim = frozen[0].dimension
        for entry in frozen[1:]:
            if entry.dimension != dim:
                raise DimensionMismatchError(expected=dim, actual=entry.dimension)

        with self._lock:
            session_id = self._id_factory()
            while session_id in self._sessions:
                logger.warning(f"{__name__}:create - Session ID collision, regenerating")
                session_id = self._id_factory()
            self._sessions[session_id] = frozen

        logger.info(
            f"{__name__}:create - Created session_id={session_id} chunks={len(frozen)} dim={dim}"
        )
        return session_id

    def get(self, session_id: str) -> tuple[StoredChunk, ...]:
        """
        Get a session's entries.

        Raises:
            SessionNotFoundError: When the session does not exist
        """
        entries = self._sessions.get(session_id)
        if entries is None:
            raise SessionNotFoundError(session_id)
        return entries

    def delete(self, session_id: str) -> None:
        """
        Remove a session.

        Raises:
            SessionNotFoundError: When the session does not exist
        """
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundError(session_id)
        logger.info(f"{__name__}:delete - Deleted session_id={session_id}")

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
