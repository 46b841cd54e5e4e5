"""Piecewise Bezier representation of contours.

The stroke and pattern engines work on segments rather than on UFO points.
This module converts a Contour into a PiecewiseContour (an ordered list of
line, quadratic and cubic segments) and back without losing geometry:

- Lines, quadratics and cubics map to one segment each
- TrueType quadratic runs with implied on-curve points are decomposed
- Cubic runs with more than two off-curve points (super-Beziers) are decomposed

It also provides ArcLengthIndex for locating points by distance along a path.
"""

from bisect import bisect_right
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from fontTools.misc.bezierTools import calcCubicBounds, calcQuadraticBounds
from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment

from ufostroker.core import _bezier as bz
from ufostroker.core._bezier import Vec
from ufostroker.domain.contour import Contour, Point, PointType

_END_POINT_TYPES = {2: PointType.LINE, 3: PointType.QCURVE, 4: PointType.CURVE}


@dataclass(frozen=True, slots=True)
class Segment:
    """A single line (2 points), quadratic (3) or cubic (4) Bezier segment.

    Attributes:
        points: Control points, first and last are on the curve
    """

    points: tuple[Vec, ...]

    @property
    def start(self) -> Vec:
        return self.points[0]

    @property
    def end(self) -> Vec:
        return self.points[-1]

    @property
    def degree(self) -> int:
        return len(self.points) - 1

    def is_line(self) -> bool:
        return len(self.points) == 2

    def is_degenerate(self) -> bool:
        """Check if every control point coincides with the start point."""
        return all(bz.distance(self.start, p) < bz.EPSILON for p in self.points[1:])

    def point_at(self, t: float) -> Vec:
        return bz.point_at(self.points, t)

    def tangent_at(self, t: float) -> Vec:
        """Unit tangent at t ((0, 0) for a degenerate segment)."""
        return bz.tangent_at(self.points, t)

    def split(self, t: float) -> tuple["Segment", "Segment"]:
        first, second = bz.split(self.points, t)
        return Segment(first), Segment(second)

    def length(self) -> float:
        return bz.arc_length(self.points)

    def bounds(self) -> tuple[float, float, float, float]:
        """Exact bounding box as (min_x, min_y, max_x, max_y)."""
        if len(self.points) == 3:
            return calcQuadraticBounds(*self.points)
        if len(self.points) == 4:
            return calcCubicBounds(*self.points)
        (x0, y0), (x1, y1) = self.points
        return (min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))

    def reversed(self) -> "Segment":
        return Segment(tuple(reversed(self.points)))

    def to_cubic(self) -> "Segment":
        """Degree-elevate a quadratic segment (lines and cubics are unchanged)."""
        return Segment(bz.elevate(self.points))

    def transformed(self, func: Callable[[Vec], Vec]) -> "Segment":
        """Apply a point mapping to every control point."""
        return Segment(tuple(func(p) for p in self.points))


def _segments_for_run(start: Vec, off_curves: list[Vec], end: Vec, end_type: PointType) -> list[Segment]:
    """Build the segments between two on-curve points.

    Args:
        start: Previous on-curve point
        off_curves: Off-curve points in between
        end: On-curve point closing the run
        end_type: Type of the closing point

    Returns:
        One or more segments from start to end
    """
    if not off_curves:
        return [Segment((start, end))]

    segments = []
    if end_type is PointType.QCURVE:
        previous = start
        for control, on_curve in decomposeQuadraticSegment(off_curves + [end]):
            segments.append(Segment((previous, control, on_curve)))
            previous = on_curve
    elif end_type is PointType.CURVE:
        if len(off_curves) == 1:
            segments.append(Segment((start, off_curves[0], end)))
        elif len(off_curves) == 2:
            segments.append(Segment((start, off_curves[0], off_curves[1], end)))
        else:
            previous = start
            for c1, c2, on_curve in decomposeSuperBezierSegment(off_curves + [end]):
                segments.append(Segment((previous, c1, c2, on_curve)))
                previous = on_curve
    else:
        # Off-curve points before a line or move point are invalid; keep the chord
        segments.append(Segment((start, end)))
    return segments


@dataclass
class PiecewiseContour:
    """A contour as an ordered list of Bezier segments.

    Attributes:
        start: First on-curve point
        segments: Consecutive segments, each starting where the previous ends
        closed: True if the last segment ends back at start
    """

    start: Vec
    segments: list[Segment] = field(default_factory=list)
    closed: bool = False

    @classmethod
    def from_contour(cls, contour: Contour) -> "PiecewiseContour":
        """Convert a UFO contour into segments.

        Args:
            contour: Open or closed contour

        Returns:
            PiecewiseContour with the same geometry

        Raises:
            ValueError: If the contour has no points
        """
        points = contour.points
        if not points:
            raise ValueError("Cannot convert an empty contour")

        if contour.is_open:
            start = points[0]
            run = points[1:]
        else:
            first_on = next(
                (i for i, p in enumerate(points) if p.point_type.is_on_curve), None
            )
            if first_on is None:
                # TrueType contour made only of off-curve points
                off_curves = [p.to_tuple() for p in points]
                start_xy = bz.lerp_point(off_curves[-1], off_curves[0], 0.5)
                segments = _segments_for_run(
                    start_xy, off_curves, start_xy, PointType.QCURVE
                )
                return cls(start=start_xy, segments=segments, closed=True)
            start = points[first_on]
            run = points[first_on + 1 :] + points[: first_on + 1]

        segments: list[Segment] = []
        previous = start.to_tuple()
        pending: list[Vec] = []
        for point in run:
            if not point.point_type.is_on_curve:
                pending.append(point.to_tuple())
                continue
            segments.extend(
                _segments_for_run(previous, pending, point.to_tuple(), point.point_type)
            )
            previous = point.to_tuple()
            pending = []

        return cls(start=start.to_tuple(), segments=segments, closed=not contour.is_open)

    def to_contour(self) -> Contour:
        """Convert back to a UFO contour.

        Closed contours start at their start point, typed after the segment
        that closes onto it.

        Returns:
            Contour with MOVE/LINE/QCURVE/CURVE/OFF_CURVE points
        """
        points: list[Point] = []
        segments = self.segments

        if self.closed and segments:
            closing = segments[-1]
            points.append(Point(*self.start, point_type=_END_POINT_TYPES[len(closing.points)]))
            segments = segments[:-1]
        elif not self.closed:
            points.append(Point(*self.start, point_type=PointType.MOVE))

        for segment in segments:
            points.extend(_segment_tail(segment))

        if self.closed and self.segments:
            points.extend(
                Point(*p, point_type=PointType.OFF_CURVE)
                for p in self.segments[-1].points[1:-1]
            )
        return Contour(points=points)

    @property
    def end(self) -> Vec:
        if not self.segments:
            return self.start
        return self.segments[-1].end

    def length(self) -> float:
        return sum(segment.length() for segment in self.segments)

    def bounds(self) -> tuple[float, float, float, float] | None:
        """Bounding box of all segments, or None without segments."""
        if not self.segments:
            return None
        boxes = [segment.bounds() for segment in self.segments]
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )

    def transformed(self, func: Callable[[Vec], Vec]) -> "PiecewiseContour":
        """Apply a point mapping to every control point."""
        return PiecewiseContour(
            start=func(self.start),
            segments=[segment.transformed(func) for segment in self.segments],
            closed=self.closed,
        )

    def subdivided(self, times: int) -> "PiecewiseContour":
        """Split every segment at its midpoint, repeatedly.

        Args:
            times: Number of halving passes (each doubles the segment count)
        """
        segments = self.segments
        for _ in range(times):
            segments = [half for segment in segments for half in segment.split(0.5)]
        return PiecewiseContour(start=self.start, segments=list(segments), closed=self.closed)

    def __len__(self) -> int:
        return len(self.segments)


def _segment_tail(segment: Segment) -> list[Point]:
    """Points after the start of a segment: off-curves then the typed end."""
    tail = [Point(*p, point_type=PointType.OFF_CURVE) for p in segment.points[1:-1]]
    tail.append(Point(*segment.end, point_type=_END_POINT_TYPES[len(segment.points)]))
    return tail


@dataclass
class Piecewise:
    """A collection of piecewise contours (one glyph outline)."""

    contours: list[PiecewiseContour] = field(default_factory=list)

    def to_contours(self) -> list[Contour]:
        return [contour.to_contour() for contour in self.contours]

    def __iter__(self) -> Iterator[PiecewiseContour]:
        return iter(self.contours)

    def __len__(self) -> int:
        return len(self.contours)


class ArcLengthIndex:
    """Maps distances along a piecewise contour to points and tangents.

    Each segment is sampled at a fixed number of parameter steps and the
    cumulative chord length is used as the arc length estimate. Distances
    outside [0, length] are extrapolated along the end tangents.

    Example:
        index = ArcLengthIndex(path)
        point, tangent = index.locate(index.length / 2)
    """

    SAMPLES_PER_SEGMENT = 32

    def __init__(self, contour: PiecewiseContour) -> None:
        self._segments = [s for s in contour.segments if not s.is_degenerate()]
        self._lengths: list[float] = [0.0]
        self._params: list[tuple[int, float]] = [(0, 0.0)]

        total = 0.0
        for index, segment in enumerate(self._segments):
            previous = segment.start
            for step in range(1, self.SAMPLES_PER_SEGMENT + 1):
                t = step / self.SAMPLES_PER_SEGMENT
                point = segment.point_at(t)
                total += bz.distance(previous, point)
                self._lengths.append(total)
                self._params.append((index, t))
                previous = point

        self._total = total

    @property
    def length(self) -> float:
        return self._total

    def is_empty(self) -> bool:
        return not self._segments

    def locate(self, distance: float) -> tuple[Vec, Vec]:
        """Find the point and unit tangent at a distance along the path.

        Args:
            distance: Arc length from the start of the path

        Returns:
            (point, unit tangent)

        Raises:
            ValueError: If the path has no length
        """
        if not self._segments:
            raise ValueError("Cannot locate points on an empty path")

        if distance <= 0.0:
            first = self._segments[0]
            tangent = first.tangent_at(0.0)
            return bz.add(first.start, bz.scale(tangent, distance)), tangent

        if distance >= self._total:
            last = self._segments[-1]
            tangent = last.tangent_at(1.0)
            return bz.add(last.end, bz.scale(tangent, distance - self._total)), tangent

        i = bisect_right(self._lengths, distance) - 1
        seg_a, t_a = self._params[i]
        seg_b, t_b = self._params[i + 1]
        if seg_a != seg_b:
            t_a = 0.0
        span = self._lengths[i + 1] - self._lengths[i]
        fraction = 0.0 if span <= 0.0 else (distance - self._lengths[i]) / span
        t = bz.lerp(t_a, t_b, fraction)
        segment = self._segments[seg_b]
        return segment.point_at(t), segment.tangent_at(t)
