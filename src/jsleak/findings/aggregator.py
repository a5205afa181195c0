"""Match deduplication and merging of per-unit result lists."""

from __future__ import annotations

from typing import Iterable, List, Set, Tuple

from jsleak.findings.models import SecretMatch


def deduplicate(matches: Iterable[SecretMatch]) -> List[SecretMatch]:
    """Keep the first occurrence of each (type, match) pair, preserving order."""
    seen: Set[Tuple[str, str]] = set()
    unique: List[SecretMatch] = []
    for m in matches:
        if m.key in seen:
            continue
        seen.add(m.key)
        unique.append(m)
    return unique


def merge(partials: Iterable[List[SecretMatch]]) -> List[SecretMatch]:
    """Concatenate per-unit lists in order, then deduplicate."""
    combined: List[SecretMatch] = []
    for part in partials:
        combined.extend(part)
    return deduplicate(combined)
