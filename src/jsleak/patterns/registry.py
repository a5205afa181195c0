"""Pattern registry: loads built-in and custom patterns, applies config filters."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

import structlog
import yaml

from jsleak.config.schema import JsleakConfig
from jsleak.patterns.models import PatternDefinition, RawMatch

logger = structlog.get_logger(__name__)

CUSTOM_PATTERNS_DIR = ".jsleak-patterns"


class RegistryError(Exception):
    """Raised when a custom pattern file cannot be loaded."""


class PatternRegistry:
    """Central store for all secret signatures."""

    def __init__(self, patterns: Iterable[PatternDefinition] = ()) -> None:
        self._patterns: Dict[str, PatternDefinition] = {}
        self._disabled: Set[str] = set()
        self.register_many(patterns)

    # ---- registration ----

    def register(self, pattern: PatternDefinition) -> None:
        self._patterns[pattern.name] = pattern

    def register_many(self, patterns: Iterable[PatternDefinition]) -> None:
        for p in patterns:
            self.register(p)

    # ---- queries ----

    @property
    def all_patterns(self) -> List[PatternDefinition]:
        return list(self._patterns.values())

    def get(self, name: str) -> Optional[PatternDefinition]:
        return self._patterns.get(name)

    def enabled_patterns(self) -> List[PatternDefinition]:
        return [p for p in self._patterns.values() if p.name not in self._disabled]

    def __len__(self) -> int:
        return len(self.enabled_patterns())

    # ---- config filtering ----

    def apply_config(self, config: JsleakConfig) -> None:
        """Enable / disable patterns based on config.patterns."""
        enable_list = config.patterns.enable
        disable_list = config.patterns.disable

        self._disabled = set()
        for name in self._patterns:
            if enable_list and name not in enable_list:
                self._disabled.add(name)
            if name in disable_list:
                self._disabled.add(name)

    # ---- matching ----

    def match(self, content: str) -> List[RawMatch]:
        """Apply every enabled pattern to *content*.

        Returns all non-overlapping hits per pattern, in catalog order. A
        pattern that fails to compile or execute is logged and skipped.
        """
        hits: List[RawMatch] = []
        for definition in self.enabled_patterns():
            try:
                regex = definition.compiled
                found = [
                    RawMatch(type=definition.name, text=m.group(0), offset=m.start())
                    for m in regex.finditer(content)
                    if m.group(0)
                ]
            except (re.error, RecursionError) as exc:
                logger.warning("pattern_failed", pattern=definition.name, error=str(exc))
                continue
            hits.extend(found)
        return hits

    # ---- custom pattern loading ----

    def load_custom_patterns(self, directory: Path) -> int:
        """Load YAML pattern files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_patterns(path)
        return count

    def _load_yaml_patterns(self, path: Path) -> int:
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise RegistryError(f"Failed to load {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            if not isinstance(entry, dict) or "name" not in entry or "pattern" not in entry:
                raise RegistryError(f"{path}: every entry needs 'name' and 'pattern'")
            self.register(
                PatternDefinition(
                    name=str(entry["name"]),
                    pattern=str(entry["pattern"]),
                    description=str(entry.get("description", "")),
                )
            )
            count += 1
        return count


def build_registry(config: JsleakConfig, root: Path) -> PatternRegistry:
    """Create a fully populated, config-filtered pattern registry."""
    from jsleak.patterns.builtin import ALL_BUILTIN_PATTERNS

    registry = PatternRegistry(ALL_BUILTIN_PATTERNS)
    registry.load_custom_patterns(root / CUSTOM_PATTERNS_DIR)
    registry.apply_config(config)

    # Surface broken regexes before the first unit is scanned
    for definition in registry.enabled_patterns():
        error = definition.compile_error()
        if error is not None:
            logger.warning("pattern_failed", pattern=definition.name, error=error)

    return registry
