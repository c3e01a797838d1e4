"""
Core data structures for stored and ranked chunks.

Frozen dataclasses so that a session's contents cannot change after creation.

Dependencies: None (pure domain layer)
System role: Shared types for segmenter, session store and ranker
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

Vector = tuple[float, ...]


def as_vector(values: Sequence[float]) -> Vector:
    """Copy a provider vector into an immutable tuple of floats."""
    return tuple(float(v) for v in values)


@dataclass(frozen=True)
class StoredChunk:
    """A chunk of document text paired with its embedding vector."""

    text: str
    vector: Vector = field(repr=False)

    @property
    def dimension(self) -> int:
        return len(self.vector)


@dataclass(frozen=True)
class RankedResult:
    """A chunk selected by similarity ranking."""

    text: str
    score: float
    position: int  # index of the chunk within its session
