"""Shannon entropy and character-class helpers."""

from __future__ import annotations

import math
import re
from collections import Counter
from dataclasses import dataclass

_SPECIAL_RE = re.compile(r"[+/]")


def shannon_entropy(s: str) -> float:
    """Compute Shannon entropy (bits per character) of string *s*.

    H = -Σ p(c) · log₂(p(c))  over unique characters c.
    """
    if not s:
        return 0.0
    counts = Counter(s)
    total = len(s)
    return -sum((c / total) * math.log2(c / total) for c in counts.values())


def special_ratio(s: str) -> float:
    """Fraction of ``+`` / ``/`` characters in *s*."""
    if not s:
        return 0.0
    return len(_SPECIAL_RE.findall(s)) / len(s)


@dataclass(frozen=True)
class CharClasses:
    upper: int
    lower: int
    digit: int
    special: int

    @classmethod
    def of(cls, s: str) -> "CharClasses":
        return cls(
            upper=sum(1 for c in s if "A" <= c <= "Z"),
            lower=sum(1 for c in s if "a" <= c <= "z"),
            digit=sum(1 for c in s if "0" <= c <= "9"),
            special=sum(1 for c in s if c in "+/"),
        )

    @property
    def present(self) -> int:
        return sum(1 for n in (self.upper, self.lower, self.digit, self.special) if n)

    @property
    def largest(self) -> int:
        return max(self.upper, self.lower, self.digit, self.special)
