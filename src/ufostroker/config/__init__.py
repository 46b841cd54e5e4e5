"""Configuration management for ufostroker.

This module provides configuration management using Pydantic models.
Transform settings are resolved from raw CLI option strings by the resolver,
which falls back to defaults for malformed values.

Key classes:
- StrokeSettings: Noodle transform settings
- PatternSettings: Pattern-along-path settings
- LoggingConfig: Logging settings
- RunConfig: Input/output paths and logging for one run
"""

from ufostroker.config.resolver import (
    resolve_pattern_settings,
    resolve_stroke_settings,
)
from ufostroker.config.settings import (
    CapType,
    JoinType,
    LogLevel,
    LoggingConfig,
    PatternCopies,
    PatternSettings,
    RunConfig,
    StrokeSettings,
    Vector,
)

__all__ = [
    "CapType",
    "JoinType",
    "LogLevel",
    "LoggingConfig",
    "PatternCopies",
    "PatternSettings",
    "RunConfig",
    "StrokeSettings",
    "Vector",
    "resolve_pattern_settings",
    "resolve_stroke_settings",
]
