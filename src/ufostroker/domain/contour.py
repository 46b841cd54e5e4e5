"""Core geometric types for contour representation.

This module defines the fundamental outline types read from and written to
.glif files:
- PointType: Enum for the UFO point types
- Point: A 2D point with its type and optional UFO attributes
- Contour: An ordered sequence of points, open or closed
"""

from dataclasses import dataclass, field
from enum import Enum


class PointType(Enum):
    """Point type on a contour.

    The values are the UFO ``type`` attribute strings:
    - MOVE: First point of an open contour
    - LINE: On-curve point ending a straight segment
    - CURVE: On-curve point ending a cubic segment
    - QCURVE: On-curve point ending a quadratic segment
    - OFF_CURVE: Control point (no ``type`` attribute in the file)
    """

    MOVE = "move"
    LINE = "line"
    CURVE = "curve"
    QCURVE = "qcurve"
    OFF_CURVE = "offcurve"

    @property
    def segment_type(self) -> str | None:
        """Segment type as used by the point pen protocol (None for off-curves)."""
        if self is PointType.OFF_CURVE:
            return None
        return self.value

    @property
    def is_on_curve(self) -> bool:
        return self is not PointType.OFF_CURVE

    @classmethod
    def from_segment_type(cls, segment_type: str | None) -> "PointType":
        """Build a point type from a point pen segment type.

        Args:
            segment_type: "move", "line", "curve", "qcurve" or None

        Returns:
            Matching PointType
        """
        if segment_type is None:
            return cls.OFF_CURVE
        return cls(segment_type)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space with UFO point metadata.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
        point_type: Type of point
        smooth: UFO smooth flag
        name: Optional point name
        identifier: Optional unique point identifier
    """

    x: float
    y: float
    point_type: PointType = PointType.LINE
    smooth: bool = False
    name: str | None = None
    identifier: str | None = None

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass
class Contour:
    """An ordered sequence of points.

    A contour whose first point is a MOVE point is open; every other contour
    is closed and its last on-curve point connects back to the first.

    Attributes:
        points: List of points forming the contour
        identifier: Optional unique contour identifier
    """

    points: list[Point]
    identifier: str | None = field(default=None)

    @property
    def is_open(self) -> bool:
        """Check whether the contour is open.

        Returns:
            True if the first point is a MOVE point, False otherwise
        """
        return bool(self.points) and self.points[0].point_type is PointType.MOVE

    def __len__(self) -> int:
        return len(self.points)
