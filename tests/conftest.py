"""Shared fixtures: small glyphs and UFO font projects written to tmp_path."""

from functools import partial
from pathlib import Path

import pytest
from fontTools.ufoLib import UFOWriter

from ufostroker.domain import Component, Contour, Glyph, Point, PointType
from ufostroker.io.converter import draw_glyph_points


def open_path(*coords: tuple[float, float]) -> Contour:
    """Open polyline through the given points."""
    points = [Point(*coords[0], point_type=PointType.MOVE)]
    points.extend(Point(x, y, point_type=PointType.LINE) for x, y in coords[1:])
    return Contour(points=points)


def closed_rectangle(x0: float, y0: float, x1: float, y1: float) -> Contour:
    """Closed rectangle, counter-clockwise."""
    return Contour(
        points=[
            Point(x0, y0),
            Point(x1, y0),
            Point(x1, y1),
            Point(x0, y1),
        ]
    )


def write_ufo(path: Path, glyphs: list[Glyph]) -> Path:
    """Write a UFO 3 font project with the given glyphs in its default layer."""
    writer = UFOWriter(path)
    glyph_set = writer.getGlyphSet()
    for glyph in glyphs:
        glyph_set.writeGlyph(glyph.name, glyph, partial(draw_glyph_points, glyph))
    glyph_set.writeContents()
    writer.writeLayerContents()
    writer.close()
    return path


@pytest.fixture
def glyph_a() -> Glyph:
    """Glyph with one open contour of four segments (line, line, curve, line)."""
    contour = Contour(
        points=[
            Point(0, 0, point_type=PointType.MOVE),
            Point(100, 0, point_type=PointType.LINE),
            Point(100, 100, point_type=PointType.LINE),
            Point(100, 150, point_type=PointType.OFF_CURVE),
            Point(50, 200, point_type=PointType.OFF_CURVE),
            Point(0, 200, point_type=PointType.CURVE),
            Point(0, 300, point_type=PointType.LINE),
        ]
    )
    return Glyph(
        name="A",
        contours=[contour],
        width=500,
        unicodes=[0x41],
        anchors=[{"name": "top", "x": 250, "y": 700}],
        lib={"com.example.note": "stroke me"},
    )


@pytest.fixture
def glyph_b() -> Glyph:
    """Glyph with only a closed contour."""
    return Glyph(
        name="B",
        contours=[closed_rectangle(0, 0, 200, 300)],
        width=400,
        unicodes=[0x42],
    )


@pytest.fixture
def pattern_glyph() -> Glyph:
    """Closed 20 x 10 rectangle used as a pattern."""
    return Glyph(name="P", contours=[closed_rectangle(0, 0, 20, 10)], width=20)


@pytest.fixture
def ufo_path(tmp_path: Path, glyph_a: Glyph, glyph_b: Glyph, pattern_glyph: Glyph) -> Path:
    """UFO with glyphs A (open), B (closed) and P (pattern)."""
    return write_ufo(tmp_path / "Test.ufo", [glyph_a, glyph_b, pattern_glyph])


@pytest.fixture
def decorated_glyph() -> Glyph:
    """Open-contour glyph carrying every kind of glyph metadata."""
    return Glyph(
        name="D",
        contours=[open_path((0, 0), (100, 0), (100, 100))],
        components=[Component(base_glyph="B", transformation=(1, 0, 0, 1, 10, 20))],
        width=600,
        height=800,
        unicodes=[0x44],
        note="decorated",
        image={"fileName": "sketch.png", "xScale": 1, "color": "1,0,0,0.5"},
        guidelines=[{"x": 50, "name": "stem"}],
        anchors=[{"name": "top", "x": 300, "y": 700}],
        lib={"com.example.flag": True},
    )
