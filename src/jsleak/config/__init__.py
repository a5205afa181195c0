"""Configuration loading, schema, and tuning presets."""

from jsleak.config.loader import ConfigError, load_config
from jsleak.config.schema import JsleakConfig
from jsleak.config.tuning import LENIENT, PRESETS, STRICT, Tuning, resolve_tuning

__all__ = [
    "ConfigError",
    "JsleakConfig",
    "LENIENT",
    "PRESETS",
    "STRICT",
    "Tuning",
    "load_config",
    "resolve_tuning",
]
