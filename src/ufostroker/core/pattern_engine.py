"""Pattern-along-path placement.

The pattern glyph's outline is normalized into "pattern space": u runs along
the path starting at 0, v runs across it. Every control point (u, v) of a
copy placed at distance d is mapped to

    P(d + u) + N(d + u) * (v + normal offset)

where P and N are the point and left normal at that arc length of the path.
Subdividing the pattern first keeps long curves close to the path's shape.
"""

import math
from dataclasses import dataclass

from ufostroker.config.settings import PatternCopies, PatternSettings
from ufostroker.core import _bezier as bz
from ufostroker.core._bezier import Vec
from ufostroker.core.piecewise import ArcLengthIndex, PiecewiseContour, Segment
from ufostroker.domain.contour import Contour
from ufostroker.domain.glyph import Glyph
from ufostroker.exceptions import PatternError


@dataclass(frozen=True)
class PreparedPattern:
    """A pattern outline in pattern space.

    Attributes:
        contours: Pattern contours, u in [0, width]
        width: Extent along the path
        height: Extent across the path
    """

    contours: tuple[PiecewiseContour, ...]
    width: float
    height: float


def prepare_pattern(pattern: Glyph, settings: PatternSettings) -> PreparedPattern:
    """Normalize a pattern glyph's outline into pattern space.

    Args:
        pattern: Pattern glyph
        settings: Pattern settings (orientation, scale, subdivision, centring)

    Returns:
        PreparedPattern ready to be laid along paths

    Raises:
        PatternError: If the pattern has no outline or no extent along the path
    """
    contours = [PiecewiseContour.from_contour(c) for c in pattern.contours if c.points]
    contours = [c for c in contours if c.segments]
    if not contours:
        raise PatternError(pattern.name, "glyph has no contours")

    sx, sy = settings.pattern_scale.x, settings.pattern_scale.y

    def orient(point: Vec) -> Vec:
        x, y = point
        if settings.is_vertical:
            x, y = y, -x
        return (x * sx, y * sy)

    contours = [c.transformed(orient).subdivided(settings.subdivide) for c in contours]

    boxes = [c.bounds() for c in contours]
    min_x = min(b[0] for b in boxes)
    min_y = min(b[1] for b in boxes)
    max_x = max(b[2] for b in boxes)
    max_y = max(b[3] for b in boxes)
    width = max_x - min_x
    if width < bz.EPSILON:
        raise PatternError(pattern.name, "outline has no width along the path")

    shift_v = (min_y + max_y) / 2 if settings.center_pattern else 0.0
    contours = [c.transformed(lambda p: (p[0] - min_x, p[1] - shift_v)) for c in contours]
    return PreparedPattern(contours=tuple(contours), width=width, height=max_y - min_y)


def _layout(length: float, width: float, settings: PatternSettings) -> tuple[int, float]:
    """Number of copies and the stretch factor applied along the path."""
    if settings.copies is PatternCopies.SINGLE:
        count = 1
    elif width + settings.spacing <= bz.EPSILON:
        count = 1
    else:
        count = max(1, math.floor((length + settings.spacing) / (width + settings.spacing) + 1e-9))

    stretch = 1.0
    if settings.stretch:
        available = length - settings.spacing * (count - 1)
        if available > bz.EPSILON:
            stretch = available / (count * width)
    return count, stretch


def _simplify(contour: PiecewiseContour) -> PiecewiseContour:
    """Drop zero-length segments and merge collinear runs of lines."""
    segments: list[Segment] = []
    for segment in contour.segments:
        if segment.is_degenerate():
            continue
        if segments and segment.is_line() and segments[-1].is_line():
            previous = segments[-1]
            d1 = bz.normalize(bz.sub(previous.end, previous.start))
            d2 = bz.normalize(bz.sub(segment.end, segment.start))
            if abs(bz.cross(d1, d2)) < 1e-6 and bz.dot(d1, d2) > 0:
                segments[-1] = Segment((previous.start, segment.end))
                continue
        segments.append(segment)
    start = segments[0].start if segments else contour.start
    return PiecewiseContour(start=start, segments=segments, closed=contour.closed)


def lay_pattern(
    path: PiecewiseContour, pattern: PreparedPattern, settings: PatternSettings
) -> list[PiecewiseContour]:
    """Lay copies of a prepared pattern along one path.

    Args:
        path: Path to follow
        pattern: Pattern in pattern space
        settings: Pattern settings

    Returns:
        Warped pattern contours (empty for a path without length)
    """
    index = ArcLengthIndex(path)
    if index.is_empty():
        return []

    count, stretch = _layout(index.length, pattern.width, settings)
    advance = pattern.width * stretch + settings.spacing

    result = []
    for copy in range(count):
        origin = settings.tangent_offset + copy * advance

        def warp(point: Vec, origin: float = origin) -> Vec:
            u, v = point
            position, tangent = index.locate(origin + u * stretch)
            normal = bz.left_normal(tangent)
            return bz.add(position, bz.scale(normal, v + settings.normal_offset))

        for contour in pattern.contours:
            warped = contour.transformed(warp)
            result.append(_simplify(warped) if settings.simplify else warped)
    return result


def pattern_along_glyph(glyph: Glyph, pattern: Glyph, settings: PatternSettings) -> Glyph:
    """Replace every open contour of a glyph with copies of a pattern.

    Closed contours, components and all metadata (including lib) are kept.

    Args:
        glyph: Glyph to transform
        pattern: Pattern glyph
        settings: Pattern settings

    Returns:
        New Glyph instance

    Raises:
        PatternError: If the pattern cannot be prepared
    """
    prepared = prepare_pattern(pattern, settings)
    contours: list[Contour] = []
    for contour in glyph.contours:
        if not contour.is_open:
            contours.append(contour)
            continue
        path = PiecewiseContour.from_contour(contour)
        contours.extend(c.to_contour() for c in lay_pattern(path, prepared, settings) if c.segments)
    return glyph.with_outline(contours)
