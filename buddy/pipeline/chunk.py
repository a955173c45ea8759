"""Character-window chunking with overlap."""

from typing import List


def chunk_text(text: str, chunk_size: int = 1000, overlap: int = 200) -> List[str]:
    """Split text into overlapping character windows.

    Each window is ``chunk_size`` characters (shorter at the end), stripped of
    surrounding whitespace. Consecutive windows start ``chunk_size - overlap``
    characters apart. Boundaries are not word aware.

    Args:
        text: Text to split
        chunk_size: Window length in characters
        overlap: Characters shared by neighbouring windows

    Returns:
        Chunks in document order (may contain empty strings for
        whitespace-only windows)

    Raises:
        ValueError: If chunk_size is not positive or overlap is not in
            ``[0, chunk_size)``
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0 or overlap >= chunk_size:
        raise ValueError(
            f"overlap must be >= 0 and smaller than chunk_size ({overlap} vs {chunk_size})"
        )

    chunks = []
    step = chunk_size - overlap
    start = 0
    while start < len(text):
        end = min(start + chunk_size, len(text))
        chunks.append(text[start:end].strip())
        if end == len(text):
            break
        start += step

    return chunks
