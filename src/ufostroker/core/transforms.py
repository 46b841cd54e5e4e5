"""Glyph transforms selected once per run.

A run applies exactly one of two transforms to every eligible glyph. Each
transform is a small frozen record holding what it needs; transform_glyph
dispatches on its type.
"""

from dataclasses import dataclass

from ufostroker.config.settings import PatternSettings, StrokeSettings
from ufostroker.core.noodle import stroke_glyph
from ufostroker.core.pattern_engine import pattern_along_glyph
from ufostroker.domain.glyph import Glyph


@dataclass(frozen=True)
class StrokeTransform:
    """Stroke every open contour (noodle mode)."""

    settings: StrokeSettings


@dataclass(frozen=True)
class PatternTransform:
    """Lay a pattern glyph along every open contour (pattern mode)."""

    pattern: Glyph
    settings: PatternSettings


GlyphTransform = StrokeTransform | PatternTransform


def apply_pattern(glyph: Glyph, pattern: Glyph, settings: PatternSettings) -> Glyph:
    """Apply the pattern-along-path effect to a whole glyph."""
    return pattern_along_glyph(glyph, pattern, settings)


def transform_glyph(glyph: Glyph, transform: GlyphTransform) -> Glyph:
    """Apply a run's transform to one glyph.

    Args:
        glyph: Eligible glyph record
        transform: StrokeTransform or PatternTransform

    Returns:
        Transformed glyph record
    """
    match transform:
        case StrokeTransform(settings=settings):
            return stroke_glyph(glyph, settings)
        case PatternTransform(pattern=pattern, settings=settings):
            return apply_pattern(glyph, pattern, settings)
    raise TypeError(f"Unsupported transform: {type(transform).__name__}")
