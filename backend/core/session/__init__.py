"""Session management business logic."""

from .session_store import InMemorySessionStore

__all__ = ["InMemorySessionStore"]
