"""Match models, deduplication, and redaction."""

from jsleak.findings.aggregator import deduplicate, merge
from jsleak.findings.models import Candidate, ScanResult, SecretMatch, SkippedUnit
from jsleak.findings.redactor import redact

__all__ = [
    "Candidate",
    "ScanResult",
    "SecretMatch",
    "SkippedUnit",
    "deduplicate",
    "merge",
    "redact",
]
