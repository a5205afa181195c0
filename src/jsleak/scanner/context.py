"""Context window and line extraction around a match."""

from __future__ import annotations


def context_window(content: str, offset: int, length: int, radius: int) -> str:
    """Return *content* from ``offset - radius`` to ``offset + length + radius``, clamped."""
    start = max(0, offset - radius)
    end = min(len(content), offset + length + radius)
    return content[start:end]


def containing_line(content: str, offset: int) -> str:
    """Return the full line of *content* that contains *offset*."""
    start = content.rfind("\n", 0, offset) + 1
    end = content.find("\n", offset)
    return content[start:] if end == -1 else content[start:end]
