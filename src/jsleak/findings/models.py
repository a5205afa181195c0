"""Candidate, match and result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass(frozen=True)
class Candidate:
    """A single regex hit with its surrounding context (before filtering)."""

    type: str
    text: str
    offset: int
    context: str


@dataclass(frozen=True)
class SecretMatch:
    """A reported secret."""

    file: str
    type: str
    match: str
    index: int
    confidence: int
    entropy: float

    @property
    def key(self) -> tuple[str, str]:
        """Identity used for deduplication."""
        return (self.type, self.match)

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "type": self.type,
            "match": self.match,
            "index": self.index,
            "confidence": self.confidence,
            "entropy": self.entropy,
        }


@dataclass
class SkippedUnit:
    source_id: str
    reason: str  # 'minified' | 'empty' | error text


@dataclass
class ScanResult:
    """Complete result of a scan run."""

    matches: List[SecretMatch] = field(default_factory=list)
    scanned_units: int = 0
    skipped_units: List[SkippedUnit] = field(default_factory=list)
    failed_units: List[SkippedUnit] = field(default_factory=list)
    scan_duration_ms: float = 0.0

    def __iter__(self) -> Iterator[SecretMatch]:
        return iter(self.matches)

    def __len__(self) -> int:
        return len(self.matches)

    @property
    def total_matches(self) -> int:
        return len(self.matches)

    def by_confidence(self) -> List[SecretMatch]:
        return sorted(self.matches, key=lambda m: (-m.confidence, m.file, m.index))
