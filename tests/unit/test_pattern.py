"""Tests for pattern-along-path placement."""

import pytest
from conftest import closed_rectangle, open_path

from ufostroker.config import PatternCopies, PatternSettings, Vector
from ufostroker.core.pattern_engine import (
    lay_pattern,
    pattern_along_glyph,
    prepare_pattern,
)
from ufostroker.core.piecewise import PiecewiseContour, Segment
from ufostroker.core.transforms import apply_pattern
from ufostroker.domain import Contour, Glyph, Point, PointType
from ufostroker.exceptions import GeometryError, PatternError


def _bounds(contours: list[PiecewiseContour]) -> tuple[float, float, float, float]:
    boxes = [c.bounds() for c in contours]
    return (
        min(b[0] for b in boxes),
        min(b[1] for b in boxes),
        max(b[2] for b in boxes),
        max(b[3] for b in boxes),
    )


@pytest.fixture
def straight_path() -> PiecewiseContour:
    return PiecewiseContour(start=(0, 0), segments=[Segment(((0, 0), (100, 0)))])


class TestPreparePattern:
    """Tests for normalizing the pattern outline."""

    def test_centred_by_default(self, pattern_glyph: Glyph) -> None:
        prepared = prepare_pattern(pattern_glyph, PatternSettings())
        assert prepared.width == 20
        assert prepared.height == 10
        assert _bounds(list(prepared.contours)) == pytest.approx((0, -5, 20, 5))

    def test_not_centred(self, pattern_glyph: Glyph) -> None:
        prepared = prepare_pattern(pattern_glyph, PatternSettings(center_pattern=False))
        assert _bounds(list(prepared.contours)) == pytest.approx((0, 0, 20, 10))

    def test_starts_at_zero(self) -> None:
        glyph = Glyph(name="P", contours=[closed_rectangle(30, 0, 50, 10)])
        prepared = prepare_pattern(glyph, PatternSettings())
        assert _bounds(list(prepared.contours))[0] == pytest.approx(0)

    def test_scaled(self, pattern_glyph: Glyph) -> None:
        settings = PatternSettings(pattern_scale=Vector(x=2.0, y=0.5))
        prepared = prepare_pattern(pattern_glyph, settings)
        assert prepared.width == pytest.approx(40)
        assert prepared.height == pytest.approx(5)

    def test_vertical_swaps_axes(self, pattern_glyph: Glyph) -> None:
        prepared = prepare_pattern(pattern_glyph, PatternSettings(is_vertical=True))
        assert prepared.width == pytest.approx(10)
        assert prepared.height == pytest.approx(20)

    def test_subdivided(self, pattern_glyph: Glyph) -> None:
        prepared = prepare_pattern(pattern_glyph, PatternSettings(subdivide=2))
        assert len(prepared.contours[0].segments) == 16

    def test_empty_pattern_raises(self) -> None:
        with pytest.raises(PatternError) as exc_info:
            prepare_pattern(Glyph(name="space"), PatternSettings())
        assert exc_info.value.glyph_name == "space"
        assert isinstance(exc_info.value, GeometryError)

    def test_zero_width_pattern_raises(self) -> None:
        glyph = Glyph(name="bar", contours=[open_path((0, 0), (0, 100))])
        with pytest.raises(PatternError):
            prepare_pattern(glyph, PatternSettings())


class TestLayPattern:
    """Tests for copies laid along a path."""

    def test_repeated_copies_fill_path(self, straight_path, pattern_glyph) -> None:
        """A 100 unit path holds five 20 unit copies."""
        settings = PatternSettings()
        result = lay_pattern(straight_path, prepare_pattern(pattern_glyph, settings), settings)
        assert len(result) == 5
        assert _bounds(result) == pytest.approx((0, -5, 100, 5))

    def test_spacing_reduces_copies(self, straight_path, pattern_glyph) -> None:
        settings = PatternSettings(spacing=5.0)
        result = lay_pattern(straight_path, prepare_pattern(pattern_glyph, settings), settings)
        assert len(result) == 4
        starts = sorted(round(c.bounds()[0], 6) for c in result)
        assert starts == [0, 25, 50, 75]

    def test_single_copy(self, straight_path, pattern_glyph) -> None:
        settings = PatternSettings(copies=PatternCopies.SINGLE)
        result = lay_pattern(straight_path, prepare_pattern(pattern_glyph, settings), settings)
        assert len(result) == 1
        assert _bounds(result) == pytest.approx((0, -5, 20, 5))

    def test_single_copy_stretched(self, straight_path, pattern_glyph) -> None:
        settings = PatternSettings(copies=PatternCopies.SINGLE, stretch=True)
        result = lay_pattern(straight_path, prepare_pattern(pattern_glyph, settings), settings)
        assert _bounds(result) == pytest.approx((0, -5, 100, 5))

    def test_repeated_copies_stretched(self, pattern_glyph) -> None:
        path = PiecewiseContour(start=(0, 0), segments=[Segment(((0, 0), (110, 0)))])
        settings = PatternSettings(stretch=True)
        result = lay_pattern(path, prepare_pattern(pattern_glyph, settings), settings)
        assert len(result) == 5
        assert _bounds(result) == pytest.approx((0, -5, 110, 5))
        assert result[0].bounds()[2] == pytest.approx(22)

    def test_normal_offset(self, straight_path, pattern_glyph) -> None:
        settings = PatternSettings(copies=PatternCopies.SINGLE, normal_offset=8.0)
        result = lay_pattern(straight_path, prepare_pattern(pattern_glyph, settings), settings)
        assert _bounds(result) == pytest.approx((0, 3, 20, 13))

    def test_tangent_offset(self, straight_path, pattern_glyph) -> None:
        settings = PatternSettings(copies=PatternCopies.SINGLE, tangent_offset=30.0)
        result = lay_pattern(straight_path, prepare_pattern(pattern_glyph, settings), settings)
        assert _bounds(result) == pytest.approx((30, -5, 50, 5))

    def test_short_path_still_gets_one_copy(self, pattern_glyph) -> None:
        path = PiecewiseContour(start=(0, 0), segments=[Segment(((0, 0), (5, 0)))])
        settings = PatternSettings()
        result = lay_pattern(path, prepare_pattern(pattern_glyph, settings), settings)
        assert len(result) == 1

    def test_zero_length_path(self, pattern_glyph) -> None:
        path = PiecewiseContour(start=(0, 0), segments=[Segment(((0, 0), (0, 0)))])
        settings = PatternSettings()
        assert lay_pattern(path, prepare_pattern(pattern_glyph, settings), settings) == []

    def test_follows_curved_path(self) -> None:
        """Points on the pattern's centre line land on the path."""
        quarter = PiecewiseContour(
            start=(100, 0),
            segments=[Segment(((100, 0), (100, 55.22847498), (55.22847498, 100), (0, 100)))],
        )
        dash = Glyph(name="dash", contours=[open_path((0, 0), (10, 0))])
        settings = PatternSettings()
        result = lay_pattern(quarter, prepare_pattern(dash, settings), settings)
        assert len(result) == 15
        for contour in result:
            for x, y in (contour.start, contour.end):
                assert (x * x + y * y) ** 0.5 == pytest.approx(100, abs=0.1)

    def test_simplify_merges_collinear_lines(self, straight_path, pattern_glyph) -> None:
        settings = PatternSettings(copies=PatternCopies.SINGLE, subdivide=1, simplify=True)
        result = lay_pattern(straight_path, prepare_pattern(pattern_glyph, settings), settings)
        assert len(result[0].segments) == 4

    def test_without_simplify_keeps_subdivisions(self, straight_path, pattern_glyph) -> None:
        settings = PatternSettings(copies=PatternCopies.SINGLE, subdivide=1)
        result = lay_pattern(straight_path, prepare_pattern(pattern_glyph, settings), settings)
        assert len(result[0].segments) == 8


class TestPatternAlongGlyph:
    """Tests for whole-glyph pattern application."""

    def test_open_contours_are_replaced(self, pattern_glyph: Glyph) -> None:
        glyph = Glyph(name="line", contours=[open_path((0, 0), (100, 0))])
        result = pattern_along_glyph(glyph, pattern_glyph, PatternSettings())
        assert len(result.contours) == 5
        assert all(not c.is_open for c in result.contours)

    def test_closed_contours_pass_through(self, pattern_glyph: Glyph) -> None:
        square = closed_rectangle(0, 0, 50, 50)
        glyph = Glyph(name="mixed", contours=[square, open_path((0, 100), (40, 100))])
        result = pattern_along_glyph(glyph, pattern_glyph, PatternSettings())
        assert result.contours[0] is square
        assert len(result.contours) == 3

    def test_lib_is_kept(self, glyph_a: Glyph, pattern_glyph: Glyph) -> None:
        result = apply_pattern(glyph_a, pattern_glyph, PatternSettings())
        assert result.lib == {"com.example.note": "stroke me"}
        assert result.width == 500
        assert result.anchors == glyph_a.anchors

    def test_metadata_is_kept(self, decorated_glyph: Glyph, pattern_glyph: Glyph) -> None:
        """Only the outline changes."""
        result = pattern_along_glyph(decorated_glyph, pattern_glyph, PatternSettings())
        assert len(result.contours) > 1
        assert result.name == "D"
        assert result.width == 600
        assert result.height == 800
        assert result.unicodes == [0x44]
        assert result.note == "decorated"
        assert result.image == {"fileName": "sketch.png", "xScale": 1, "color": "1,0,0,0.5"}
        assert result.guidelines == [{"x": 50, "name": "stem"}]
        assert result.anchors == [{"name": "top", "x": 300, "y": 700}]
        assert result.components == decorated_glyph.components
        assert result.lib == {"com.example.flag": True}

    def test_output_contours_use_ufo_types(self, glyph_a: Glyph, pattern_glyph: Glyph) -> None:
        result = apply_pattern(glyph_a, pattern_glyph, PatternSettings())
        assert result.contours
        for contour in result.contours:
            assert contour.points[0].point_type is PointType.LINE

    def test_curved_pattern_keeps_curves(self) -> None:
        wave = Glyph(
            name="wave",
            contours=[
                Contour(
                    points=[
                        Point(0, 0, PointType.MOVE),
                        Point(5, 10, PointType.OFF_CURVE),
                        Point(15, -10, PointType.OFF_CURVE),
                        Point(20, 0, PointType.CURVE),
                    ]
                )
            ],
        )
        glyph = Glyph(name="line", contours=[open_path((0, 0), (40, 0))])
        result = pattern_along_glyph(glyph, wave, PatternSettings())
        assert len(result.contours) == 2
        assert all(c.is_open for c in result.contours)
        assert result.contours[0].points[-1].point_type is PointType.CURVE
