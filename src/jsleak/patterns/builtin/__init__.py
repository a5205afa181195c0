"""Built-in patterns: aggregate all families."""

from jsleak.patterns.builtin.cloud import ALL_CLOUD_PATTERNS
from jsleak.patterns.builtin.keys import ALL_KEY_PATTERNS, KEY_BLOCK_TYPES
from jsleak.patterns.builtin.misc import ALL_MISC_PATTERNS
from jsleak.patterns.builtin.tokens import ALL_TOKEN_PATTERNS
from jsleak.patterns.models import PatternDefinition

ALL_BUILTIN_PATTERNS: list[PatternDefinition] = [
    *ALL_CLOUD_PATTERNS,
    *ALL_TOKEN_PATTERNS,
    *ALL_KEY_PATTERNS,
    *ALL_MISC_PATTERNS,
]

__all__ = ["ALL_BUILTIN_PATTERNS", "KEY_BLOCK_TYPES"]
