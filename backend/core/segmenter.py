"""
Sentence-boundary text segmentation.

Splits raw document text into ordered chunks of bounded length. Sentences are
found with a terminator rule (`.`, `!`, `?`) and greedily packed into chunks
no longer than `max_chunk_size` characters.

A single sentence longer than the limit is kept whole unless
`hard_split_oversized` is set, in which case it is cut at character
boundaries.

Dependencies: re (stdlib)
System role: First stage of the ingestion path
"""

import re

DEFAULT_MAX_CHUNK_SIZE = 1000

# A run of non-terminators closed by terminators, or the unterminated tail.
_RE_SENTENCE = re.compile(r"[^.!?]+(?:[.!?]+|$)")


def split_sentences(text: str) -> list[str]:
    """
    Split text into stripped sentence-like units.

    Text with no terminators yields a single unit. Whitespace-only
    fragments are dropped.

    Args:
        text: Raw text

    Returns:
        list[str]: Non-empty units in input order
    """
    units = []
    for match in _RE_SENTENCE.finditer(text):
        unit = match.group(0).strip()
        if unit:
            units.append(unit)
    return units


def _hard_split(unit: str, max_chunk_size: int) -> list[str]:
    pieces = []
    for start in range(0, len(unit), max_chunk_size):
        piece = unit[start : start + max_chunk_size].strip()
        if piece:
            pieces.append(piece)
    return pieces


def segment_text(
    text: str,
    max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
    hard_split_oversized: bool = False,
) -> list[str]:
    """
    Segment text into ordered chunks along sentence boundaries.

    Units are joined with a single space. Before a unit is added, the buffer
    is flushed as a chunk if adding the unit would push it past
    `max_chunk_size`.

    Args:
        text: Raw document text
        max_chunk_size: Maximum chunk length in characters
        hard_split_oversized: Cut single sentences longer than the limit

    Returns:
        list[str]: Trimmed, non-empty chunks; empty for blank input

    Raises:
        ValueError: When max_chunk_size is not positive
    """
    if max_chunk_size <= 0:
        raise ValueError(f"max_chunk_size must be positive, got {max_chunk_size}")

    chunks: list[str] = []
    buffer = ""

    for unit in split_sentences(text):
        if hard_split_oversized and len(unit) > max_chunk_size:
            if buffer:
                chunks.append(buffer)
                buffer = ""
            chunks.extend(_hard_split(unit, max_chunk_size))
            continue

        candidate = f"{buffer} {unit}" if buffer else unit
        if buffer and len(candidate) > max_chunk_size:
            chunks.append(buffer)
            buffer = unit
        else:
            buffer = candidate

    if buffer:
        chunks.append(buffer)

    return chunks
