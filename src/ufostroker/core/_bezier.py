"""Internal vector and Bezier helpers.

This is an internal module containing the small amount of vector math the
stroke and pattern engines need on top of fontTools.misc.bezierTools.
Points are plain (x, y) tuples. Not intended for public use.
"""

import math

from fontTools.misc.bezierTools import (
    calcCubicArcLength,
    calcQuadraticArcLength,
    segmentPointAtT,
    splitCubicAtT,
    splitQuadraticAtT,
)

Vec = tuple[float, float]

EPSILON = 1e-9

# Control point distance for a quarter circle of radius 1
KAPPA = 0.5522847498


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def scale(a: Vec, factor: float) -> Vec:
    return (a[0] * factor, a[1] * factor)


def dot(a: Vec, b: Vec) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross(a: Vec, b: Vec) -> float:
    return a[0] * b[1] - a[1] * b[0]


def length(a: Vec) -> float:
    return math.hypot(a[0], a[1])


def distance(a: Vec, b: Vec) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def normalize(a: Vec) -> Vec:
    """Unit vector in the direction of a ((0, 0) for a zero vector)."""
    n = length(a)
    if n < EPSILON:
        return (0.0, 0.0)
    return (a[0] / n, a[1] / n)


def left_normal(a: Vec) -> Vec:
    """Vector rotated 90 degrees counter-clockwise."""
    return (-a[1], a[0])


def rotate(a: Vec, angle: float) -> Vec:
    """Rotate a vector counter-clockwise by angle (radians)."""
    if angle == 0.0:
        return a
    c, s = math.cos(angle), math.sin(angle)
    return (a[0] * c - a[1] * s, a[0] * s + a[1] * c)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_point(a: Vec, b: Vec, t: float) -> Vec:
    return (lerp(a[0], b[0], t), lerp(a[1], b[1], t))


def point_at(points: tuple[Vec, ...], t: float) -> Vec:
    """Evaluate a line, quadratic or cubic segment at t."""
    return segmentPointAtT(points, t)


def derivative_at(points: tuple[Vec, ...], t: float) -> Vec:
    """First derivative of a line, quadratic or cubic segment at t."""
    if len(points) == 2:
        return sub(points[1], points[0])
    if len(points) == 3:
        p0, p1, p2 = points
        mt = 1 - t
        return add(scale(sub(p1, p0), 2 * mt), scale(sub(p2, p1), 2 * t))
    p0, p1, p2, p3 = points
    mt = 1 - t
    return add(
        add(scale(sub(p1, p0), 3 * mt * mt), scale(sub(p2, p1), 6 * mt * t)),
        scale(sub(p3, p2), 3 * t * t),
    )


def tangent_at(points: tuple[Vec, ...], t: float) -> Vec:
    """Unit tangent of a segment at t.

    Falls back to chords through the control polygon where the derivative
    vanishes (coincident control points at an end of the curve).

    Returns:
        Unit tangent, or (0, 0) for a segment of zero length
    """
    tangent = normalize(derivative_at(points, t))
    if tangent != (0.0, 0.0):
        return tangent
    if t <= 0.5:
        candidates = [sub(p, points[0]) for p in points[1:]]
    else:
        candidates = [sub(points[-1], p) for p in reversed(points[:-1])]
    for candidate in candidates:
        tangent = normalize(candidate)
        if tangent != (0.0, 0.0):
            return tangent
    return (0.0, 0.0)


def split(points: tuple[Vec, ...], t: float) -> tuple[tuple[Vec, ...], tuple[Vec, ...]]:
    """Split a segment in two at t."""
    if len(points) == 2:
        mid = lerp_point(points[0], points[1], t)
        return (points[0], mid), (mid, points[1])
    if len(points) == 3:
        first, second = splitQuadraticAtT(*points, t)
    else:
        first, second = splitCubicAtT(*points, t)
    return tuple(first), tuple(second)


def elevate(points: tuple[Vec, ...]) -> tuple[Vec, ...]:
    """Express a quadratic segment as a cubic one (other degrees unchanged)."""
    if len(points) != 3:
        return points
    p0, p1, p2 = points
    return (
        p0,
        add(p0, scale(sub(p1, p0), 2 / 3)),
        add(p2, scale(sub(p1, p2), 2 / 3)),
        p2,
    )


def arc_length(points: tuple[Vec, ...]) -> float:
    """Length of a line, quadratic or cubic segment."""
    if len(points) == 2:
        return distance(points[0], points[1])
    if len(points) == 3:
        return calcQuadraticArcLength(*points)
    return calcCubicArcLength(*points)


def line_intersection(p: Vec, d1: Vec, q: Vec, d2: Vec) -> Vec | None:
    """Intersection of the infinite lines p + s*d1 and q + u*d2.

    Returns:
        Intersection point, or None if the lines are parallel
    """
    denominator = cross(d1, d2)
    if abs(denominator) < EPSILON:
        return None
    s = cross(sub(q, p), d2) / denominator
    return add(p, scale(d1, s))
