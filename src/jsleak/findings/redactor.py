"""Matched value redaction for display."""

from __future__ import annotations

_MAX_DISPLAY = 50


def redact_partial(value: str) -> str:
    """Partial reveal: first 4 + last 2 chars.

    Example: ``AIzaSyA1b2...`` → ``AIza...6Q``
    """
    if len(value) <= 6:
        return "[REDACTED]"
    return f"{value[:4]}...{value[-2:]}"


def truncate(value: str, limit: int = _MAX_DISPLAY) -> str:
    """Full value, cut to *limit* characters."""
    if len(value) <= limit:
        return value
    return f"{value[:limit]}..."


def redact(value: str, *, reveal: bool = False) -> str:
    """Format a matched value for output."""
    if reveal:
        return truncate(value)
    return redact_partial(value)
