"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from jsleak.config.tuning import Tuning, resolve_tuning

TuningName = Literal["strict", "lenient"]
OutputFormat = Literal["terminal", "json"]


@dataclass
class ScanConfig:
    tuning: TuningName = "strict"
    min_confidence: Optional[int] = None  # overrides the preset's floor
    context_radius: Optional[int] = None
    concurrency: int = 1


@dataclass
class PatternsConfig:
    enable: List[str] = field(default_factory=list)  # empty = all enabled
    disable: List[str] = field(default_factory=list)


@dataclass
class FeedConfig:
    extensions: List[str] = field(default_factory=lambda: [".js"])
    max_file_size_kb: int = 2048


@dataclass
class AllowlistConfig:
    patterns: List[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    reveal: bool = False
    show_summary: bool = True


@dataclass
class JsleakConfig:
    version: str = "1.0"
    scan: ScanConfig = field(default_factory=ScanConfig)
    tuning: Dict[str, Any] = field(default_factory=dict)
    patterns: PatternsConfig = field(default_factory=PatternsConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)
    allowlist: AllowlistConfig = field(default_factory=AllowlistConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def resolved_tuning(self) -> Tuning:
        """Preset selected by ``scan.tuning`` with ``[tuning]`` and scan overrides applied."""
        overrides = dict(self.tuning)
        if self.scan.min_confidence is not None:
            overrides["min_confidence"] = self.scan.min_confidence
        if self.scan.context_radius is not None:
            overrides["context_radius"] = self.scan.context_radius
        return resolve_tuning(self.scan.tuning, overrides)
