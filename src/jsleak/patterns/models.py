"""Pattern data model: regex stored as string, compiled on first use."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Optional


@dataclass(frozen=True)
class PatternDefinition:
    """A named signature for one known secret format.

    ``pattern`` is kept as source text so custom definitions stay
    serialisable. The compiled regex is cached on first access.
    """

    name: str
    pattern: str
    description: str = ""

    @cached_property
    def compiled(self) -> re.Pattern[str]:
        """Compiled regex with ASCII character classes. Raises ``re.error`` if malformed."""
        return re.compile(self.pattern, re.ASCII)

    def compile_error(self) -> Optional[str]:
        """Return the compile error message, or None if the pattern is valid."""
        try:
            _ = self.compiled
        except re.error as exc:
            return str(exc)
        return None


@dataclass(frozen=True)
class RawMatch:
    """One regex hit inside a unit, before any filtering."""

    type: str
    text: str
    offset: int
