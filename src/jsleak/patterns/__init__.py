"""Pattern registry: models, registry, built-in catalog."""

from jsleak.patterns.models import PatternDefinition, RawMatch
from jsleak.patterns.registry import PatternRegistry, RegistryError, build_registry

__all__ = [
    "PatternDefinition",
    "PatternRegistry",
    "RawMatch",
    "RegistryError",
    "build_registry",
]
