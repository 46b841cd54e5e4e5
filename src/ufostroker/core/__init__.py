"""Core processing algorithms for ufostroker.

This module contains the geometry engine and the batch pipeline:

- Piecewise Bezier contours and arc-length lookup
- Variable-width stroking with caps and joins
- Pattern-along-path placement
- Glyph set traversal and run orchestration

Key functions:
- variable_width_stroke: Stroke an open path with a stroke profile
- pattern_along_glyph: Lay a pattern along every open contour of a glyph
- stroke_glyph: Noodle every open contour of a glyph
- traverse: Transform every eligible glyph of a layer

Key classes:
- PiecewiseContour: Contour as Bezier segments
- FontProcessor: Main orchestrator for one run
"""

from ufostroker.core.noodle import build_stroke_handles, build_stroke_profile, stroke_glyph
from ufostroker.core.pattern_engine import pattern_along_glyph, prepare_pattern
from ufostroker.core.piecewise import ArcLengthIndex, Piecewise, PiecewiseContour, Segment
from ufostroker.core.processor import FontProcessor
from ufostroker.core.stroke import variable_width_stroke
from ufostroker.core.transforms import (
    GlyphTransform,
    PatternTransform,
    StrokeTransform,
    apply_pattern,
    transform_glyph,
)
from ufostroker.core.traverser import traverse

__all__ = [
    "ArcLengthIndex",
    # Processor classes
    "FontProcessor",
    # Transform variants
    "GlyphTransform",
    "PatternTransform",
    # Piecewise geometry
    "Piecewise",
    "PiecewiseContour",
    "Segment",
    "StrokeTransform",
    "apply_pattern",
    # Noodle
    "build_stroke_handles",
    "build_stroke_profile",
    "pattern_along_glyph",
    "prepare_pattern",
    "stroke_glyph",
    "transform_glyph",
    "traverse",
    "variable_width_stroke",
]
