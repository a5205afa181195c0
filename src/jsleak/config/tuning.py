"""Heuristic tuning presets: every threshold the detection pipeline reads.

Two tunings exist in the wild for this engine: a strict one (wide context,
confidence floor, minified-bundle guard, character-balance checks) and a
lenient one (narrow context, no floor). Both are expressed as ``Tuning``
instances so a deployment can pick one, or override single fields.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Tuning:
    name: str = "strict"

    # --- context window ---
    context_radius: int = 100

    # --- acceptance ---
    min_confidence: int = 60

    # --- minified-file guard ---
    skip_minified: bool = True
    minified_min_length: int = 1000
    minified_avg_line_length: int = 500
    minified_head_length: int = 1000

    # --- generic false-positive filters ---
    known_shape_filter: bool = True
    extended_context_filter: bool = True
    base64_literal_filter: bool = True
    comment_line_filter: bool = True

    # --- binary / base64 discriminator ---
    binary_entropy: float = 4.5
    binary_special_ratio: float = 0.1
    binary_reject_any_special: bool = True

    # --- per-type validators ---
    jwt_min_segment_length: int = 10
    jwt_min_segment_entropy: float = 3.5
    bitcoin_min_entropy: float = 3.8
    bitcoin_mixed_max_entropy: float = 4.5
    token_min_entropy: float = 4.0
    amazon_min_entropy: float = 3.5
    amazon_max_entropy: float = 5.0
    amazon_min_char_classes: int = 3
    amazon_max_class_count: int = 32
    amazon_max_special_ratio: float = 0.15
    amazon_reject_pure_hex: bool = True

    # --- confidence scorer ---
    base_score: int = 50
    entropy_high: float = 4.5
    entropy_medium: float = 3.5
    high_entropy_bonus: int = 20
    medium_entropy_bonus: int = 10
    low_entropy_penalty: int = 15
    google_prefix_bonus: int = 30
    amazon_length_bonus: int = 10
    amazon_special_bonus: int = 5
    jwt_prefix_bonus: int = 20
    jwt_structure_bonus: int = 20
    jwt_segment_bonus: int = 10
    bitcoin_prefix_bonus: int = 20
    bitcoin_base58_bonus: int = 10
    authorization_bonus: int = 15
    vendor_bonus: int = 15
    key_block_bonus: int = 25
    length_bonus_over: int = 30
    length_bonus: int = 10
    short_length_under: int = 20
    short_length_penalty: int = 10
    context_penalty: int = 20
    key_context_bonus: int = 15


STRICT = Tuning()

LENIENT = Tuning(
    name="lenient",
    context_radius=50,
    min_confidence=0,
    skip_minified=False,
    known_shape_filter=False,
    extended_context_filter=False,
    base64_literal_filter=False,
    comment_line_filter=False,
    amazon_min_char_classes=0,
    amazon_max_class_count=30,
    amazon_reject_pure_hex=False,
    low_entropy_penalty=10,
    amazon_special_bonus=10,
    jwt_segment_bonus=0,
    bitcoin_base58_bonus=0,
    authorization_bonus=10,
    vendor_bonus=0,
    key_block_bonus=0,
    length_bonus_over=20,
    short_length_under=0,
    short_length_penalty=0,
    context_penalty=0,
    key_context_bonus=0,
)

PRESETS: Dict[str, Tuning] = {
    STRICT.name: STRICT,
    LENIENT.name: LENIENT,
}


def resolve_tuning(name: str, overrides: Mapping[str, Any] | None = None) -> Tuning:
    """Return the preset *name* with *overrides* applied (unknown keys ignored)."""
    try:
        base = PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown tuning preset: {name!r}") from None
    if not overrides:
        return base
    valid_fields = {f.name for f in dataclasses.fields(Tuning)} - {"name"}
    filtered = {k: v for k, v in overrides.items() if k in valid_fields}
    return dataclasses.replace(base, **filtered)
