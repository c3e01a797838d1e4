"""
Test suite for InMemorySessionStore.

Tests session creation, retrieval, deletion, ID uniqueness and thread safety.

System role: Verification of the in-memory session store
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from backend.core.exceptions import (
    DimensionMismatchError,
    EmptySessionError,
    SessionNotFoundError,
)
from backend.core.models import StoredChunk
from backend.core.session import InMemorySessionStore


@pytest.fixture
def entries() -> list[StoredChunk]:
    """Provide two stored chunks of dimension 3."""
    return [
        StoredChunk(text="Paris is the capital of France.", vector=(1.0, 0.0, 0.0)),
        StoredChunk(text="Tokyo is the capital of Japan.", vector=(0.0, 1.0, 0.0)),
    ]


class TestCreate:
    """Test suite for InMemorySessionStore.create."""

    def test_create_returns_id_and_stores_entries_in_order(
        self, session_store: InMemorySessionStore, entries: list[StoredChunk]
    ) -> None:
        """Created sessions can be read back unchanged."""
        # Act
        session_id = session_store.create(entries)

        # Assert
        assert isinstance(session_id, str) and session_id
        assert session_store.get(session_id) == tuple(entries)
        assert session_id in session_store
        assert len(session_store) == 1

    def test_create_empty_raises(self, session_store: InMemorySessionStore) -> None:
        """A session must contain at least one chunk."""
        with pytest.raises(EmptySessionError):
            session_store.create([])

        assert len(session_store) == 0

    def test_create_with_mixed_dimensions_raises(self, session_store: InMemorySessionStore) -> None:
        """All vectors in a session share one dimensionality."""
        mixed = [
            StoredChunk(text="a", vector=(1.0, 0.0)),
            StoredChunk(text="b", vector=(1.0, 0.0, 0.0)),
        ]

        with pytest.raises(DimensionMismatchError):
            session_store.create(mixed)

        assert len(session_store) == 0

    def test_stored_session_is_isolated_from_caller_list(
        self, session_store: InMemorySessionStore, entries: list[StoredChunk]
    ) -> None:
        """Mutating the input list after create does not change the session."""
        session_id = session_store.create(entries)

        entries.append(StoredChunk(text="late", vector=(0.0, 0.0, 1.0)))

        assert len(session_store.get(session_id)) == 2

    def test_ids_are_unique(
        self, session_store: InMemorySessionStore, entries: list[StoredChunk]
    ) -> None:
        """Every create allocates a fresh ID."""
        ids = {session_store.create(entries) for _ in range(100)}

        assert len(ids) == 100

    def test_colliding_id_is_regenerated(self, entries: list[StoredChunk]) -> None:
        """An ID already in use is never handed out twice."""
        # Arrange
        candidates = iter(["same", "same", "same", "fresh"])
        store = InMemorySessionStore(id_factory=lambda: next(candidates))

        # Act
        first = store.create(entries)
        second = store.create(entries[:1])

        # Assert
        assert first == "same"
        assert second == "fresh"
        assert len(store.get("same")) == 2
        assert len(store.get("fresh")) == 1


class TestGet:
    """Test suite for InMemorySessionStore.get."""

    def test_get_unknown_session_raises(self, session_store: InMemorySessionStore) -> None:
        """Unknown IDs raise SessionNotFoundError carrying the ID."""
        with pytest.raises(SessionNotFoundError) as exc_info:
            session_store.get("missing")

        assert exc_info.value.session_id == "missing"
        assert exc_info.value.details == {"session_id": "missing"}


class TestDelete:
    """Test suite for InMemorySessionStore.delete."""

    def test_delete_removes_session(
        self, session_store: InMemorySessionStore, entries: list[StoredChunk]
    ) -> None:
        """Deleted sessions are no longer readable."""
        session_id = session_store.create(entries)

        session_store.delete(session_id)

        assert session_id not in session_store
        with pytest.raises(SessionNotFoundError):
            session_store.get(session_id)

    def test_delete_unknown_session_raises(self, session_store: InMemorySessionStore) -> None:
        """Deleting an unknown ID raises SessionNotFoundError."""
        with pytest.raises(SessionNotFoundError):
            session_store.delete("missing")


class TestConcurrency:
    """Test suite for concurrent access."""

    def test_concurrent_creates_get_distinct_ids_without_cross_contamination(
        self, session_store: InMemorySessionStore
    ) -> None:
        """Parallel creates never share an ID or mix up entries."""
        # Arrange
        barrier = threading.Barrier(16)

        def create(n: int) -> tuple[int, str]:
            barrier.wait()
            entries = [StoredChunk(text=f"doc-{n}-chunk-{i}", vector=(float(n), 1.0)) for i in range(5)]
            return n, session_store.create(entries)

        # Act
        with ThreadPoolExecutor(max_workers=16) as pool:
            created = list(pool.map(create, range(16)))

        # Assert
        ids = [session_id for _, session_id in created]
        assert len(set(ids)) == 16
        for n, session_id in created:
            stored = session_store.get(session_id)
            assert [e.text for e in stored] == [f"doc-{n}-chunk-{i}" for i in range(5)]

    def test_uuid_ids_from_default_factory(
        self, session_store: InMemorySessionStore, entries: list[StoredChunk]
    ) -> None:
        """Default IDs are 32 character hex strings."""
        session_id = session_store.create(entries)

        assert len(session_id) == 32
        int(session_id, 16)
