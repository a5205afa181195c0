"""Scanner: engine, entropy, filters, validators, scoring."""

from jsleak.scanner.engine import SecretScanner, build_scanner, scan, scan_async
from jsleak.scanner.entropy import shannon_entropy
from jsleak.scanner.scoring import confidence
from jsleak.scanner.validators import VALIDATORS, validate

__all__ = [
    "SecretScanner",
    "VALIDATORS",
    "build_scanner",
    "confidence",
    "scan",
    "scan_async",
    "shannon_entropy",
    "validate",
]
