"""Load and merge configuration from .jsleak.toml and environment variables."""

from __future__ import annotations

import dataclasses
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from jsleak.config.schema import (
    AllowlistConfig,
    FeedConfig,
    JsleakConfig,
    OutputConfig,
    PatternsConfig,
    ScanConfig,
)
from jsleak.config.tuning import PRESETS, Tuning

CONFIG_FILENAME = ".jsleak.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.get(section, {}).items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: JsleakConfig) -> None:
    """Apply JSLEAK_* environment variable overrides."""
    if val := os.environ.get("JSLEAK_TUNING"):
        if val in PRESETS:
            cfg.scan.tuning = val  # type: ignore[assignment]
    if val := os.environ.get("JSLEAK_MIN_CONFIDENCE"):
        try:
            cfg.scan.min_confidence = max(0, min(100, int(val)))
        except ValueError:
            pass
    if val := os.environ.get("JSLEAK_FORMAT"):
        if val in ("terminal", "json"):
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("JSLEAK_DISABLE_PATTERNS"):
        cfg.patterns.disable.extend(p.strip() for p in val.split(",") if p.strip())


def _accepts(field_type: str, value: Any) -> bool:
    # bool is an int subclass; keep true/false out of numeric thresholds
    if field_type == "bool":
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if field_type == "int":
        return isinstance(value, int)
    if field_type == "float":
        return isinstance(value, (int, float))
    return isinstance(value, str)


def _validate_tuning(cfg: JsleakConfig) -> None:
    field_types = {f.name: f.type for f in dataclasses.fields(Tuning)}
    checks = [(f"tuning.{key}", key, value) for key, value in cfg.tuning.items()]
    checks.append(("scan.min_confidence", "min_confidence", cfg.scan.min_confidence))
    checks.append(("scan.context_radius", "context_radius", cfg.scan.context_radius))
    for label, key, value in checks:
        if value is None or key not in field_types:
            continue
        if not _accepts(field_types[key], value):
            raise ConfigError(
                f"{label} must be {field_types[key]}, got {type(value).__name__} {value!r}"
            )


def _validate_allowlist(cfg: JsleakConfig) -> None:
    if not isinstance(cfg.allowlist.patterns, list):
        raise ConfigError("allowlist.patterns must be a list of regexes")
    for pattern in cfg.allowlist.patterns:
        if not isinstance(pattern, str):
            raise ConfigError(f"allowlist pattern must be a string, got {pattern!r}")
        try:
            re.compile(pattern, re.IGNORECASE)
        except re.error as exc:
            raise ConfigError(f"Invalid allowlist pattern {pattern!r}: {exc}") from exc


def _validate(cfg: JsleakConfig) -> None:
    if cfg.scan.tuning not in PRESETS:
        raise ConfigError(
            f"Unknown tuning {cfg.scan.tuning!r}; expected one of {sorted(PRESETS)}"
        )
    if cfg.output.format not in ("terminal", "json"):
        raise ConfigError(f"Unknown output format {cfg.output.format!r}")
    if not isinstance(cfg.scan.concurrency, int) or cfg.scan.concurrency < 1:
        raise ConfigError("scan.concurrency must be at least 1")
    _validate_tuning(cfg)
    _validate_allowlist(cfg)


def load_config(root: Path, config_override: Optional[str] = None) -> JsleakConfig:
    """Load, validate, and return a JsleakConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = JsleakConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = JsleakConfig(
                version=raw.get("version", "1.0"),
                scan=_build_section(raw, ScanConfig, "scan"),
                tuning=dict(raw.get("tuning", {})),
                patterns=_build_section(raw, PatternsConfig, "patterns"),
                feed=_build_section(raw, FeedConfig, "feed"),
                allowlist=_build_section(raw, AllowlistConfig, "allowlist"),
                output=_build_section(raw, OutputConfig, "output"),
            )
        except (TypeError, AttributeError) as exc:
            raise ConfigError(f"Invalid section in {config_path}: {exc}") from exc

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg
