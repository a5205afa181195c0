"""False-positive filters.

Every predicate returns True when the candidate should be *rejected*. The
generic filters run on every candidate; the shape predicates further down
(binary base64, URL encoding, repetition, Base58) are building blocks for
the per-type validators.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from jsleak.config.tuning import Tuning
from jsleak.findings.models import Candidate
from jsleak.scanner.entropy import shannon_entropy, special_ratio

# --- candidate shapes ---------------------------------------------------------

_SHA1_RE = re.compile(r"^[a-f0-9]{40}$", re.IGNORECASE)
_HEX_RE = re.compile(r"^[a-f0-9]+$", re.IGNORECASE)
_CAMEL_RE = re.compile(r"^[a-z][a-zA-Z0-9]*[A-Z][a-zA-Z0-9]*$")
_PASCAL_RE = re.compile(r"^[A-Z][a-z]+[A-Z][a-zA-Z0-9]*$")
_REPEATED_RUN_RE = re.compile(r"([a-zA-Z0-9])\1{3,}")
_REPEATED_LETTER_RE = re.compile(r"([a-zA-Z])\1{3,}")
_REPEATED_DIGIT_RE = re.compile(r"(\d)\1{3,}", re.ASCII)
_NON_BASE58_RE = re.compile(r"[0OIl]")
_BASE64_ALPHABET_RE = re.compile(r"^[A-Za-z0-9+/=]+$")
_PADDING_RE = re.compile(r"={1,2}$")

# Build artefacts and framework internals that share a secret's alphabet
KNOWN_SHAPE_PATTERNS: List[re.Pattern[str]] = [
    re.compile(r"^(?:map|filter|reduce|forEach|slice|splice|concat)", re.IGNORECASE),
    re.compile(r"^(?:_react|_emotion|_styled|_next)", re.IGNORECASE),
    re.compile(r"sourceMappingURL", re.IGNORECASE),
    re.compile(r"^__webpack", re.IGNORECASE),
    re.compile(r"^module\.", re.IGNORECASE),
    re.compile(r"^exports\.", re.IGNORECASE),
]

# Context around embedded assets, source maps and module loaders
ASSET_CONTEXT_PATTERNS: List[re.Pattern[str]] = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"base64,",
        r"data:image",
        r";base64",
        r'"(?:publicKey|privateKey|data|content|image|icon|font|logo|avatar'
        r'|thumbnail|media|src|href)":',
        r"iVBOR|AAAA|/png|/jpeg|/jpg|/gif|/webp|/svg",
        r"sourceMappingURL=",
        r"webpack://",
        r"__webpack",
        r"\.chunk\.js",
        r"/\*#\s*source",
        r"import\s+.*\s+from\s+['\"]",
        r"require\s*\(['\"]",
        r"[\"']data[\"']\s*:",
        r"[\"']image[\"']\s*:",
        r"// data:image",
    )
]

SHORT_ASSET_CONTEXT_RE = re.compile(
    r'base64,|data:image|;base64|"publicKey"|"data":|iVBOR|AAAA|/png|/jpeg|/jpg',
    re.IGNORECASE,
)

_DATA_URI_RE = re.compile(r"data:[\w/-]+;base64,", re.ASCII)
_DATA_PROPERTY_RE = re.compile(
    r'"(?:data|content|image|icon|font|media|src|href|asset|resource)"\s*:\s*"[^"]*$',
    re.IGNORECASE,
)
_DATA_VARIABLE_RE = re.compile(
    r"(?:const|let|var)\s+(?:data|image|icon|font|asset|resource|content)\w*"
    r"\s*=\s*[\"`'][^\"`']*$",
    re.IGNORECASE | re.ASCII,
)

_COMMENT_LINE_RE = re.compile(r"^\s*(?://|\*|/\*)")
_URL_LINE_RE = re.compile(r"https?://|sourceMappingURL")
_BUNDLER_MARKER_RE = re.compile(r"webpackJsonp|__webpack_require__|/\*{6}/")


def is_sha1_hash(s: str) -> bool:
    return bool(_SHA1_RE.match(s))


def is_pure_hex(s: str) -> bool:
    return bool(_HEX_RE.match(s))


def is_known_identifier(s: str) -> bool:
    """camelCase or PascalCase: almost always a code identifier."""
    return bool(_CAMEL_RE.match(s) or _PASCAL_RE.match(s))


def has_url_encoding(s: str) -> bool:
    """``+``-joined words, e.g. ``scheduled+cache+content``."""
    return "+" in s and re.search(r"[a-z]{4,}", s, re.IGNORECASE) is not None


def has_repeated_run(s: str) -> bool:
    """Any letter or digit repeated four or more times in a row."""
    return _REPEATED_RUN_RE.search(s) is not None


def has_repeated_letter_or_digit(s: str) -> bool:
    return bool(_REPEATED_LETTER_RE.search(s) or _REPEATED_DIGIT_RE.search(s))


def is_valid_base58(s: str) -> bool:
    """Base58 excludes 0, O, I and l."""
    return _NON_BASE58_RE.search(s) is None


def looks_like_binary_base64(s: str, tuning: Tuning) -> bool:
    """Base64 of binary payloads (images, fonts) rather than a key."""
    ratio = special_ratio(s)
    if shannon_entropy(s) > tuning.binary_entropy and ratio > tuning.binary_special_ratio:
        return True
    if _REPEATED_DIGIT_RE.search(s):
        return True
    if (
        re.search(r"[a-z]{5,}", s, re.IGNORECASE)
        and re.search(r"\d{3,}", s, re.ASCII)
        and re.search(r"[+/]", s)
    ):
        return True
    return tuning.binary_reject_any_special and ratio > 0


def is_likely_base64_data(s: str, context: str) -> bool:
    """Long base64 literals and values assigned to data-like names."""
    if _DATA_URI_RE.search(context):
        return True
    if _PADDING_RE.search(s) and len(s) > 100:
        return True
    if len(s) >= 200 and _BASE64_ALPHABET_RE.match(s):
        return True
    before = context[:100]
    if _DATA_PROPERTY_RE.search(before) or _DATA_VARIABLE_RE.search(before):
        return True
    return False


def matches_known_shape(s: str) -> bool:
    if is_sha1_hash(s) or is_known_identifier(s):
        return True
    return any(p.search(s) for p in KNOWN_SHAPE_PATTERNS)


def context_is_asset(context: str, tuning: Tuning) -> bool:
    if not tuning.extended_context_filter:
        return SHORT_ASSET_CONTEXT_RE.search(context) is not None
    return any(p.search(context) for p in ASSET_CONTEXT_PATTERNS)


def is_comment_line(line: str) -> bool:
    return _COMMENT_LINE_RE.match(line) is not None


def references_url(line: str) -> bool:
    return _URL_LINE_RE.search(line) is not None


def is_minified(content: str, tuning: Tuning) -> bool:
    """Whole-unit guard for bundler output and single-line minified files."""
    if len(content) < tuning.minified_min_length:
        return False
    line_count = content.count("\n") + 1
    if len(content) / line_count > tuning.minified_avg_line_length:
        return True
    return _BUNDLER_MARKER_RE.search(content[: tuning.minified_head_length]) is not None


def rejection_reason(
    candidate: Candidate,
    line: str,
    tuning: Tuning,
    allowlist: Sequence[re.Pattern[str]] = (),
) -> Optional[str]:
    """Return the name of the first generic filter that fires, or None."""
    text = candidate.text
    if allowlist and any(p.search(text) for p in allowlist):
        return "allowlist"
    if tuning.known_shape_filter and matches_known_shape(text):
        return "known_shape"
    if context_is_asset(candidate.context, tuning):
        return "asset_context"
    if tuning.base64_literal_filter and is_likely_base64_data(text, candidate.context):
        return "base64_literal"
    if tuning.comment_line_filter and (is_comment_line(line) or references_url(line)):
        return "comment_or_url_line"
    return None
