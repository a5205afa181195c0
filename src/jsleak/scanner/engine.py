"""Core scan engine: orchestrates the full pipeline.

Per unit: minified guard → pattern sweep → generic filters → per-type
validator → entropy and confidence → floor. Results from all units are
deduplicated once at the end.

Failure isolation: a unit whose content cannot be fetched, or whose sweep
raises, is logged and recorded as failed. The scan itself never raises for
per-unit problems. Matched values are never written to the log.
"""

from __future__ import annotations

import asyncio
import re
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence

import structlog

from jsleak.config.schema import JsleakConfig
from jsleak.config.tuning import STRICT, Tuning
from jsleak.feed.sources import ContentSource, ScanUnit
from jsleak.findings.aggregator import merge
from jsleak.findings.models import Candidate, ScanResult, SecretMatch, SkippedUnit
from jsleak.patterns.models import RawMatch
from jsleak.patterns.registry import PatternRegistry
from jsleak.scanner.context import containing_line, context_window
from jsleak.scanner.entropy import shannon_entropy
from jsleak.scanner.filters import is_minified, rejection_reason
from jsleak.scanner.scoring import confidence
from jsleak.scanner.validators import validate

logger = structlog.get_logger(__name__)

ProgressCallback = Callable[[int, int], None]


@dataclass
class _UnitOutcome:
    source_id: str
    matches: List[SecretMatch] = field(default_factory=list)
    skipped: Optional[str] = None
    error: Optional[str] = None


class SecretScanner:
    """Detection pipeline bound to one registry, tuning and allowlist."""

    def __init__(
        self,
        registry: PatternRegistry,
        tuning: Tuning = STRICT,
        allowlist: Sequence[str] = (),
    ) -> None:
        self.registry = registry
        self.tuning = tuning
        self.allowlist = [re.compile(p, re.IGNORECASE) for p in allowlist]

    # ---- single candidate ----

    def evaluate(self, raw: RawMatch, content: str, source_id: str) -> Optional[SecretMatch]:
        """Run one regex hit through filters, validator and scorer."""
        tuning = self.tuning
        context = context_window(content, raw.offset, len(raw.text), tuning.context_radius)
        candidate = Candidate(type=raw.type, text=raw.text, offset=raw.offset, context=context)

        reason = rejection_reason(
            candidate, containing_line(content, raw.offset), tuning, self.allowlist
        )
        if reason is not None:
            logger.debug("candidate_rejected", type=raw.type, offset=raw.offset, reason=reason)
            return None

        if not validate(candidate.type, candidate.text, tuning):
            logger.debug("candidate_rejected", type=raw.type, offset=raw.offset, reason="validator")
            return None

        entropy = shannon_entropy(candidate.text)
        score = confidence(candidate.type, candidate.text, entropy, context, tuning)
        if score < tuning.min_confidence:
            logger.debug("candidate_below_floor", type=raw.type, offset=raw.offset, confidence=score)
            return None

        return SecretMatch(
            file=source_id,
            type=candidate.type,
            match=candidate.text,
            index=candidate.offset,
            confidence=score,
            entropy=round(entropy, 2),
        )

    # ---- single unit ----

    def scan_content(self, content: str, source_id: str) -> List[SecretMatch]:
        """Scan one resource. Returns matches in pattern order (not deduplicated)."""
        return self._scan_unit(content, source_id).matches

    def _scan_unit(self, content: str, source_id: str) -> _UnitOutcome:
        outcome = _UnitOutcome(source_id=source_id)
        if not isinstance(content, str):
            outcome.error = f"content is {type(content).__name__}, not text"
            logger.error("unit_failed", source=source_id, error=outcome.error)
            return outcome
        if not content:
            outcome.skipped = "empty"
            return outcome
        if self.tuning.skip_minified and is_minified(content, self.tuning):
            outcome.skipped = "minified"
            return outcome

        for raw in self.registry.match(content):
            match = self.evaluate(raw, content, source_id)
            if match is not None:
                outcome.matches.append(match)
        return outcome

    def _guarded_unit(self, content: str, source_id: str) -> _UnitOutcome:
        try:
            return self._scan_unit(content, source_id)
        except Exception as exc:
            logger.error("unit_failed", source=source_id, error=repr(exc))
            return _UnitOutcome(source_id=source_id, error=repr(exc))

    async def _scan_source(self, source: ContentSource) -> _UnitOutcome:
        source_id = getattr(source, "source_id", "<unknown>")
        try:
            content = await source.fetch()
        except Exception as exc:
            logger.error("unit_failed", source=source_id, error=str(exc))
            return _UnitOutcome(source_id=source_id, error=str(exc))
        return self._guarded_unit(content, source_id)

    # ---- orchestration ----

    def scan(
        self,
        units: Iterable[ScanUnit],
        on_progress: Optional[ProgressCallback] = None,
    ) -> ScanResult:
        """Scan units that already carry their content."""
        start = time.perf_counter()
        units = list(units)
        total = len(units)
        outcomes: List[_UnitOutcome] = []
        for processed, unit in enumerate(units, 1):
            outcomes.append(self._guarded_unit(unit.content, unit.source_id))
            if on_progress is not None:
                on_progress(processed, total)
        return self._finish(outcomes, start)

    async def scan_sources(
        self,
        sources: Iterable[ContentSource],
        on_progress: Optional[ProgressCallback] = None,
        *,
        concurrency: int = 1,
    ) -> ScanResult:
        """Fetch and scan each source; fetches overlap up to *concurrency*."""
        start = time.perf_counter()
        sources = list(sources)
        total = len(sources)
        semaphore = asyncio.Semaphore(max(1, concurrency))
        processed = 0

        async def run(source: ContentSource) -> _UnitOutcome:
            nonlocal processed
            async with semaphore:
                outcome = await self._scan_source(source)
            processed += 1
            if on_progress is not None:
                on_progress(processed, total)
            return outcome

        outcomes = await asyncio.gather(*(run(s) for s in sources))
        return self._finish(list(outcomes), start)

    def _finish(self, outcomes: List[_UnitOutcome], start: float) -> ScanResult:
        result = ScanResult()
        for outcome in outcomes:
            if outcome.error is not None:
                result.failed_units.append(SkippedUnit(outcome.source_id, outcome.error))
            elif outcome.skipped is not None:
                logger.info("unit_skipped", source=outcome.source_id, reason=outcome.skipped)
                result.skipped_units.append(SkippedUnit(outcome.source_id, outcome.skipped))
            else:
                result.scanned_units += 1

        result.matches = merge(o.matches for o in outcomes)
        result.scan_duration_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.info(
            "scan_finished",
            units=len(outcomes),
            matches=result.total_matches,
            skipped=len(result.skipped_units),
            failed=len(result.failed_units),
        )
        return result


def build_scanner(config: JsleakConfig, registry: PatternRegistry) -> SecretScanner:
    """Create a scanner from a loaded config."""
    return SecretScanner(
        registry,
        tuning=config.resolved_tuning(),
        allowlist=config.allowlist.patterns,
    )


def scan(
    units: Iterable[ScanUnit],
    config: JsleakConfig,
    registry: PatternRegistry,
    *,
    on_progress: Optional[ProgressCallback] = None,
) -> ScanResult:
    """Execute the full scan pipeline over *units*. Returns a ScanResult."""
    return build_scanner(config, registry).scan(units, on_progress)


async def scan_async(
    sources: Iterable[ContentSource],
    config: JsleakConfig,
    registry: PatternRegistry,
    *,
    on_progress: Optional[ProgressCallback] = None,
) -> ScanResult:
    """Async variant of :func:`scan` over fetchable content sources."""
    scanner = build_scanner(config, registry)
    return await scanner.scan_sources(
        sources, on_progress, concurrency=config.scan.concurrency
    )
