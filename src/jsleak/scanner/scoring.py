"""Confidence scoring (0–100)."""

from __future__ import annotations

import re

from jsleak.config.tuning import Tuning
from jsleak.patterns.builtin import KEY_BLOCK_TYPES
from jsleak.scanner.filters import is_valid_base58

_PLACEHOLDER_CONTEXT_RE = re.compile(
    r"test|example|sample|demo|placeholder|dummy", re.IGNORECASE
)
_KEY_CONTEXT_RE = re.compile(
    r"[\"'](?:key|secret|token|password|auth)[\"']\s*:\s*[\"'][^\"']*$", re.IGNORECASE
)


def _type_bonus(secret_type: str, match: str, tuning: Tuning) -> int:
    if secret_type == "google_api":
        return tuning.google_prefix_bonus if match.startswith("AIza") else 0

    if secret_type == "amazon_secret_key":
        bonus = tuning.amazon_length_bonus if len(match) == 40 else 0
        if "+" in match or "/" in match:
            bonus += tuning.amazon_special_bonus
        return bonus

    if secret_type == "json_web_token":
        parts = match.split(".")
        bonus = tuning.jwt_prefix_bonus if match.startswith("ey") else 0
        if len(parts) == 3:
            bonus += tuning.jwt_structure_bonus
        if all(len(p) > 10 for p in parts):
            bonus += tuning.jwt_segment_bonus
        return bonus

    if secret_type == "bitcoin_address":
        bonus = tuning.bitcoin_prefix_bonus if match[:1] in ("1", "3") else 0
        if is_valid_base58(match):
            bonus += tuning.bitcoin_base58_bonus
        return bonus

    if "authorization" in secret_type:
        return tuning.authorization_bonus
    if "stripe" in secret_type or "twilio" in secret_type:
        return tuning.vendor_bonus
    if secret_type in KEY_BLOCK_TYPES:
        return tuning.key_block_bonus
    return 0


def confidence(
    secret_type: str,
    match: str,
    entropy: float,
    context: str,
    tuning: Tuning,
) -> int:
    """Score how likely *match* is a live secret of *secret_type*."""
    score = tuning.base_score

    if entropy > tuning.entropy_high:
        score += tuning.high_entropy_bonus
    elif entropy > tuning.entropy_medium:
        score += tuning.medium_entropy_bonus
    else:
        score -= tuning.low_entropy_penalty

    score += _type_bonus(secret_type, match, tuning)

    if len(match) > tuning.length_bonus_over:
        score += tuning.length_bonus
    elif len(match) < tuning.short_length_under:
        score -= tuning.short_length_penalty

    if tuning.context_penalty and _PLACEHOLDER_CONTEXT_RE.search(context):
        score -= tuning.context_penalty

    if tuning.key_context_bonus and _KEY_CONTEXT_RE.search(context[:50]):
        score += tuning.key_context_bonus

    return min(100, max(0, score))
