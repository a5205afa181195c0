"""JSON reporter."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from jsleak.findings.models import ScanResult
from jsleak.findings.redactor import redact


def to_dict(result: ScanResult, *, reveal: bool = False) -> Dict[str, Any]:
    """Convert ScanResult to a JSON-serialisable dict."""
    matches: List[Dict[str, Any]] = []
    for m in result.matches:
        entry = m.to_dict()
        if not reveal:
            entry["match"] = redact(m.match)
        matches.append(entry)

    return {
        "version": "1.0",
        "scanned_units": result.scanned_units,
        "total_matches": result.total_matches,
        "matches": matches,
        "skipped_units": [
            {"source": s.source_id, "reason": s.reason} for s in result.skipped_units
        ],
        "failed_units": [
            {"source": s.source_id, "error": s.reason} for s in result.failed_units
        ],
        "scan_duration_ms": result.scan_duration_ms,
    }


def render(result: ScanResult, *, reveal: bool = False) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result, reveal=reveal), indent=2)
