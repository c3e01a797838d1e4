"""
Cosine similarity scoring and top-k ranking.

Exact, brute-force ranking over a session's chunks: one matrix product per
query, which is plenty for per-document candidate sets. Vectors are scaled by
their largest component and then normalized before the dot product, so scores
stay finite and within [-1, 1] for any magnitude.

Dependencies: numpy, backend.core.models, backend.core.exceptions
System role: Retrieval stage of the query path
"""

from collections.abc import Sequence

import numpy as np

from backend.core.exceptions import DimensionMismatchError
from backend.core.models import RankedResult, StoredChunk


def _unit_rows(matrix: np.ndarray) -> np.ndarray:
    """Normalize each row to unit length; all-zero rows stay zero."""
    units = np.zeros_like(matrix)
    if matrix.shape[1] == 0:
        return units

    scales = np.max(np.abs(matrix), axis=1)
    nonzero = scales > 0.0
    # Scaling by the max component first avoids overflow/underflow in the norm.
    scaled = matrix[nonzero] / scales[nonzero, None]
    units[nonzero] = scaled / np.linalg.norm(scaled, axis=1, keepdims=True)
    return units


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity between two vectors.

    Returns 0.0 when either vector has zero magnitude.

    Raises:
        DimensionMismatchError: When the vectors differ in length
    """
    if len(a) != len(b):
        raise DimensionMismatchError(expected=len(a), actual=len(b))

    units = _unit_rows(np.asarray([a, b], dtype=np.float64).reshape(2, len(a)))
    return float(np.clip(np.dot(units[0], units[1]), -1.0, 1.0))


def pairwise_similarities(query: Sequence[float], vectors: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Cosine similarity of the query against every vector.

    Args:
        query: Query vector of dimension d
        vectors: n vectors of dimension d

    Returns:
        np.ndarray: Scores of shape (n,), 0.0 where a norm is zero

    Raises:
        DimensionMismatchError: When any vector differs from the query in length
    """
    dim = len(query)
    for vector in vectors:
        if len(vector) != dim:
            raise DimensionMismatchError(expected=dim, actual=len(vector))

    if len(vectors) == 0:
        return np.zeros(0, dtype=np.float64)

    q = _unit_rows(np.asarray(query, dtype=np.float64).reshape(1, dim))[0]
    matrix = _unit_rows(np.asarray(vectors, dtype=np.float64).reshape(len(vectors), dim))
    return np.clip(matrix @ q, -1.0, 1.0)


def rank(
    query: Sequence[float],
    candidates: Sequence[StoredChunk],
    k: int,
) -> list[RankedResult]:
    """
    Rank candidates by descending cosine similarity to the query.

    Equal scores keep their original candidate order.

    Args:
        query: Query vector
        candidates: Stored chunks in session order
        k: Maximum number of results

    Returns:
        list[RankedResult]: min(k, len(candidates)) results

    Raises:
        ValueError: When k is negative
        DimensionMismatchError: When a candidate's dimension differs from the query
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    scores = pairwise_similarities(query, [c.vector for c in candidates])
    if k == 0 or scores.size == 0:
        return []

    order = np.argsort(-scores, kind="stable")[:k]
    return [
        RankedResult(
            text=candidates[int(i)].text,
            score=float(scores[int(i)]),
            position=int(i),
        )
        for i in order
    ]
