"""Domain models for ufostroker.

This module contains the domain models representing glyphs, contours, points
and stroke parameters. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Independent of fontTools implementation details

Key classes:
- Point: A 2D point with UFO point metadata
- Contour: An open or closed sequence of points
- Glyph: A single glyph record with its outline and metadata
- StrokeHandle: Stroke widths and angle at one segment boundary
- StrokeProfile: Handles plus cap/join styles for one contour
"""

from ufostroker.domain.contour import Contour, Point, PointType
from ufostroker.domain.glyph import Component, Glyph
from ufostroker.domain.handle import InterpolationType, StrokeHandle, StrokeProfile

__all__: list[str] = [
    # Enums
    "InterpolationType",
    "PointType",
    # Core types
    "Component",
    "Contour",
    "Glyph",
    "Point",
    "StrokeHandle",
    "StrokeProfile",
]
