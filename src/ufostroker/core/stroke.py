"""Variable-width stroking of open piecewise contours.

The stroker walks an open path segment by segment and offsets it to both
sides. The offset distances and the rotation of the offset direction come
from the stroke handles at the segment boundaries and are interpolated along
each segment. Curves are split until each piece turns only slightly, then
each piece is offset as a cubic whose control points move along the normals
at its ends.

Corners between segments get the profile's join on their outer side; the
ends of the path get the profile's caps. The result is a single closed,
counter-clockwise outline per input path.
"""

import math

from ufostroker.config.settings import CapType, JoinType
from ufostroker.core import _bezier as bz
from ufostroker.core._bezier import Vec
from ufostroker.core.piecewise import Piecewise, PiecewiseContour, Segment
from ufostroker.domain.handle import InterpolationType, StrokeHandle, StrokeProfile
from ufostroker.exceptions import StrokeError

MITER_LIMIT = 4.0

# Maximum direction change of a curve piece before it is offset
MAX_PIECE_TURN = math.radians(15)
MAX_SPLIT_DEPTH = 8

LEFT = 1.0
RIGHT = -1.0


def _interpolate(start: StrokeHandle, end: StrokeHandle, t: float) -> tuple[float, float, float]:
    """Left offset, right offset and tangent offset at parameter t."""
    if start.interpolation is InterpolationType.NULL:
        return start.left_offset, start.right_offset, start.tangent_offset
    return (
        bz.lerp(start.left_offset, end.left_offset, t),
        bz.lerp(start.right_offset, end.right_offset, t),
        bz.lerp(start.tangent_offset, end.tangent_offset, t),
    )


def _offset_point(
    point: Vec,
    tangent: Vec,
    side: float,
    start: StrokeHandle,
    end: StrokeHandle,
    t: float,
) -> Vec:
    left, right, angle = _interpolate(start, end, t)
    width = left if side == LEFT else right
    direction = bz.rotate(bz.left_normal(tangent), angle)
    return bz.add(point, bz.scale(direction, width * side))


def _turn(a: Vec, b: Vec) -> float:
    """Unsigned angle between two unit vectors."""
    return abs(math.atan2(bz.cross(a, b), bz.dot(a, b)))


def _split_for_offset(
    segment: Segment, t0: float, t1: float, depth: int = 0
) -> list[tuple[Segment, float, float]]:
    """Split a cubic until every piece is nearly straight.

    Returns:
        List of (piece, t0, t1) with parameters relative to the original segment
    """
    start = segment.tangent_at(0.0)
    middle = segment.tangent_at(0.5)
    end = segment.tangent_at(1.0)
    if depth >= MAX_SPLIT_DEPTH or _turn(start, middle) + _turn(middle, end) <= MAX_PIECE_TURN:
        return [(segment, t0, t1)]
    first, second = segment.split(0.5)
    tm = (t0 + t1) / 2
    return _split_for_offset(first, t0, tm, depth + 1) + _split_for_offset(
        second, tm, t1, depth + 1
    )


def _offset_segment(
    segment: Segment, start: StrokeHandle, end: StrokeHandle, side: float
) -> list[Segment]:
    """Offset one path segment to one side.

    Args:
        segment: Non-degenerate path segment
        start: Handle at the segment start
        end: Handle at the segment end
        side: LEFT or RIGHT

    Returns:
        Consecutive offset segments
    """
    if segment.is_line():
        tangent = segment.tangent_at(0.0)
        return [
            Segment(
                (
                    _offset_point(segment.start, tangent, side, start, end, 0.0),
                    _offset_point(segment.end, tangent, side, start, end, 1.0),
                )
            )
        ]

    result: list[Segment] = []
    for piece, t0, t1 in _split_for_offset(segment.to_cubic(), 0.0, 1.0):
        q0, q1, q2, q3 = piece.points
        ta = piece.tangent_at(0.0)
        tb = piece.tangent_at(1.0)
        span = t1 - t0
        p0 = _offset_point(q0, ta, side, start, end, t0)
        if result:
            p0 = result[-1].end
        result.append(
            Segment(
                (
                    p0,
                    _offset_point(q1, ta, side, start, end, t0 + span / 3),
                    _offset_point(q2, tb, side, start, end, t0 + 2 * span / 3),
                    _offset_point(q3, tb, side, start, end, t1),
                )
            )
        )
    return result


def _arc(center: Vec, start: Vec, end: Vec) -> list[Segment]:
    """Approximate the minor arc around center from start to end with cubics.

    The radius is interpolated when start and end are at different distances.
    """
    va = bz.sub(start, center)
    vb = bz.sub(end, center)
    sweep = math.atan2(bz.cross(va, vb), bz.dot(va, vb))
    if abs(sweep) < bz.EPSILON:
        return [] if bz.distance(start, end) < bz.EPSILON else [Segment((start, end))]

    count = max(1, math.ceil(abs(sweep) / (math.pi / 2) - 1e-9))
    step = sweep / count
    k = 4 / 3 * math.tan(step / 4)
    ra, rb = bz.length(va), bz.length(vb)
    angle0 = math.atan2(va[1], va[0])

    segments = []
    previous = start
    for i in range(count):
        a0 = angle0 + step * i
        a1 = a0 + step
        r0 = bz.lerp(ra, rb, i / count)
        r1 = bz.lerp(ra, rb, (i + 1) / count)
        p3 = end if i == count - 1 else bz.add(center, (math.cos(a1) * r1, math.sin(a1) * r1))
        d0 = (-math.sin(a0), math.cos(a0))
        d1 = (-math.sin(a1), math.cos(a1))
        segments.append(
            Segment(
                (
                    previous,
                    bz.add(previous, bz.scale(d0, k * r0)),
                    bz.sub(p3, bz.scale(d1, k * r1)),
                    p3,
                )
            )
        )
        previous = p3
    return segments


def _miter_point(a: Vec, t_in: Vec, b: Vec, t_out: Vec) -> Vec | None:
    """Intersection of the incoming and outgoing offset lines, if ahead of a."""
    point = bz.line_intersection(a, t_in, b, t_out)
    if point is None or bz.dot(bz.sub(point, a), t_in) <= 0:
        return None
    return point


def _outer_join(
    style: JoinType, center: Vec, a: Vec, b: Vec, t_in: Vec, t_out: Vec
) -> list[Segment]:
    """Connect two offset points on the outer side of a corner."""
    if style is JoinType.BEVEL:
        return [Segment((a, b))]

    if style is JoinType.CIRCLE:
        return _arc(center, a, b)

    miter = _miter_point(a, t_in, b, t_out)
    if style is JoinType.MITER:
        width = max(bz.distance(center, a), bz.distance(center, b))
        if miter is None or bz.distance(center, miter) > MITER_LIMIT * width:
            return [Segment((a, b))]
        return [Segment((a, miter)), Segment((miter, b))]

    # Round: a corner rounded inside the miter
    if miter is None:
        return _arc(center, a, b)
    return [
        Segment(
            (
                a,
                bz.lerp_point(a, miter, bz.KAPPA),
                bz.lerp_point(b, miter, bz.KAPPA),
                b,
            )
        )
    ]


def _join(
    side: float,
    style: JoinType,
    center: Vec,
    a: Vec,
    b: Vec,
    t_in: Vec,
    t_out: Vec,
) -> list[Segment]:
    """Connect the offset curves of two segments on one side of a corner."""
    if bz.distance(a, b) < bz.EPSILON:
        return []

    turn = bz.cross(t_in, t_out)
    if abs(turn) < bz.EPSILON and bz.dot(t_in, t_out) > 0:
        return [Segment((a, b))]

    # A left turn has its outer side on the right
    outer = (turn > 0 and side == RIGHT) or (turn <= 0 and side == LEFT)
    if not outer:
        return [Segment((a, b))]
    return _outer_join(style, center, a, b, t_in, t_out)


def _cap(style: CapType, center: Vec, outward: Vec, a: Vec, b: Vec) -> list[Segment]:
    """Close the end of a stroke from offset point a to offset point b.

    Args:
        style: Cap style (CUSTOM without a cap glyph is a butt cap)
        center: Path end point
        outward: Unit tangent pointing away from the stroke
        a: Offset point the cap starts from
        b: Offset point the cap ends at
    """
    wa = bz.distance(center, a)
    wb = bz.distance(center, b)

    if style is CapType.SQUARE:
        ea = bz.add(a, bz.scale(outward, wa))
        eb = bz.add(b, bz.scale(outward, wb))
        return [Segment((a, ea)), Segment((ea, eb)), Segment((eb, b))]

    if style is CapType.ROUND:
        return [
            Segment(
                (
                    a,
                    bz.add(a, bz.scale(outward, wa * 4 / 3)),
                    bz.add(b, bz.scale(outward, wb * 4 / 3)),
                    b,
                )
            )
        ]

    if style is CapType.CIRCLE:
        apex = bz.add(center, bz.scale(outward, (wa + wb) / 2))
        return _arc(center, a, apex) + _arc(center, apex, b)

    return [Segment((a, b))]


def variable_width_stroke(path: PiecewiseContour, profile: StrokeProfile) -> Piecewise:
    """Stroke an open path.

    Args:
        path: Open piecewise contour
        profile: Handles (one per segment boundary) and cap/join styles

    Returns:
        Piecewise holding one closed outline, or nothing for a path
        without length

    Raises:
        StrokeError: If the path is closed or the handle count does not match
    """
    if path.closed:
        raise StrokeError("Only open contours can be stroked")
    if len(profile.handles) != len(path.segments) + 1:
        raise StrokeError(
            f"Expected {len(path.segments) + 1} stroke handles, got {len(profile.handles)}"
        )

    spans = [(i, s) for i, s in enumerate(path.segments) if not s.is_degenerate()]
    if not spans:
        return Piecewise([])

    left: list[Segment] = []
    right: list[Segment] = []
    previous: Segment | None = None

    for index, segment in spans:
        start_handle = profile.handles[index]
        end_handle = profile.handles[index + 1]
        new_left = _offset_segment(segment, start_handle, end_handle, LEFT)
        new_right = _offset_segment(segment, start_handle, end_handle, RIGHT)

        if previous is not None:
            t_in = previous.tangent_at(1.0)
            t_out = segment.tangent_at(0.0)
            left.extend(
                _join(LEFT, profile.join, segment.start, left[-1].end, new_left[0].start, t_in, t_out)
            )
            right.extend(
                _join(RIGHT, profile.join, segment.start, right[-1].end, new_right[0].start, t_in, t_out)
            )

        left.extend(new_left)
        right.extend(new_right)
        previous = segment

    first = spans[0][1]
    last = spans[-1][1]

    outline: list[Segment] = list(right)
    outline.extend(_cap(profile.cap_end, last.end, last.tangent_at(1.0), right[-1].end, left[-1].end))
    outline.extend(segment.reversed() for segment in reversed(left))
    outline.extend(
        _cap(
            profile.cap_start,
            first.start,
            bz.scale(first.tangent_at(0.0), -1.0),
            left[0].start,
            right[0].start,
        )
    )
    outline = [segment for segment in outline if not segment.is_degenerate()]
    if not outline:
        return Piecewise([])

    return Piecewise([PiecewiseContour(start=outline[0].start, segments=outline, closed=True)])
