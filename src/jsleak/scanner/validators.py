"""Per-type validators.

``VALIDATORS`` maps a pattern name to a predicate ``(match, tuning) -> bool``
that returns True to accept. Types without an entry are accepted once the
generic filters pass.
"""

from __future__ import annotations

import re
from typing import Callable, Dict

from jsleak.config.tuning import Tuning
from jsleak.scanner.entropy import CharClasses, shannon_entropy
from jsleak.scanner.filters import (
    has_repeated_letter_or_digit,
    has_repeated_run,
    has_url_encoding,
    is_known_identifier,
    is_pure_hex,
    is_sha1_hash,
    is_valid_base58,
    looks_like_binary_base64,
)

Validator = Callable[[str, Tuning], bool]

# Property access chains that the JWT regex picks up in bundled code
MEMBER_ACCESS_PATTERNS = [
    re.compile(r"^[a-z]+\.[a-z]+\.[a-z]+$", re.IGNORECASE),
    re.compile(r"prototype\.", re.IGNORECASE),
    re.compile(r"^this\.", re.IGNORECASE),
    re.compile(r"^Object\.", re.IGNORECASE),
    re.compile(r"^Array\.", re.IGNORECASE),
    re.compile(r"^window\.", re.IGNORECASE),
    re.compile(r"^document\.", re.IGNORECASE),
    re.compile(r"^navigator\.", re.IGNORECASE),
    re.compile(r"addEventListener$"),
    re.compile(r"removeEventListener$"),
    re.compile(r"hasOwnProperty$"),
    re.compile(r"preventDefault$"),
    re.compile(r"stopPropagation$"),
    re.compile(r"_context\."),
    re.compile(r"_wrapperState\."),
    re.compile(r"\.current\."),
    re.compile(r"\.stateNode\."),
    re.compile(r"\.memoizedState"),
    re.compile(r"\.memoizedProps"),
    re.compile(r"\.pendingProps"),
    re.compile(r"\.updateQueue"),
]


def validate_json_web_token(match: str, tuning: Tuning) -> bool:
    if not match.startswith("ey"):
        return False
    parts = match.split(".")
    if len(parts) != 3 or not parts[1].startswith("ey"):
        return False
    if any(p.search(match) for p in MEMBER_ACCESS_PATTERNS):
        return False
    if any(len(p) < tuning.jwt_min_segment_length for p in parts):
        return False
    return all(shannon_entropy(p) >= tuning.jwt_min_segment_entropy for p in parts)


def validate_bitcoin_address(match: str, tuning: Tuning) -> bool:
    if not is_valid_base58(match):
        return False
    entropy = shannon_entropy(match)
    if entropy < tuning.bitcoin_min_entropy:
        return False
    if has_repeated_run(match):
        return False
    # Mixed case plus digits at very high entropy reads as a base64 fragment
    mixed = (
        re.search(r"[a-z]", match) is not None
        and re.search(r"[A-Z]", match) is not None
        and re.search(r"[0-9]", match) is not None
    )
    return not (mixed and entropy > tuning.bitcoin_mixed_max_entropy)


def validate_amazon_secret_key(match: str, tuning: Tuning) -> bool:
    if is_sha1_hash(match) or has_url_encoding(match) or is_known_identifier(match):
        return False
    if looks_like_binary_base64(match, tuning):
        return False

    classes = CharClasses.of(match)
    if classes.present < tuning.amazon_min_char_classes:
        return False
    if classes.largest > tuning.amazon_max_class_count:
        return False
    if classes.special / len(match) > tuning.amazon_max_special_ratio:
        return False
    if has_repeated_letter_or_digit(match):
        return False

    entropy = shannon_entropy(match)
    if not tuning.amazon_min_entropy <= entropy <= tuning.amazon_max_entropy:
        return False
    # webpack chunk hashes and similar
    return not (tuning.amazon_reject_pure_hex and is_pure_hex(match))


def validate_github_auth_token(match: str, tuning: Tuning) -> bool:
    if is_sha1_hash(match):
        return False
    return shannon_entropy(match) >= tuning.token_min_entropy


def validate_square_access_token(match: str, tuning: Tuning) -> bool:
    if shannon_entropy(match) < tuning.token_min_entropy:
        return False
    if match.startswith("EAAA") and re.fullmatch(r"EAAA[A-Z]+", match):
        return False
    return True


def validate_high_entropy_token(match: str, tuning: Tuning) -> bool:
    return shannon_entropy(match) >= tuning.token_min_entropy


VALIDATORS: Dict[str, Validator] = {
    "json_web_token": validate_json_web_token,
    "bitcoin_address": validate_bitcoin_address,
    "amazon_secret_key": validate_amazon_secret_key,
    "github_auth_token": validate_github_auth_token,
    "square_access_token": validate_square_access_token,
    "google_api": validate_high_entropy_token,
    "google_captcha": validate_high_entropy_token,
}


def validate(secret_type: str, match: str, tuning: Tuning) -> bool:
    """Run the type's validator; unlisted types are accepted."""
    validator = VALIDATORS.get(secret_type)
    if validator is None:
        return True
    return validator(match, tuning)
