"""Converters between the fontTools point pen protocol and domain models.

glifLib reads outlines by driving a point pen and writes them by calling a
``drawPoints`` function with one. These helpers sit on both sides of that
protocol so the domain models never depend on fontTools.
"""

from typing import Any

from fontTools.pens.pointPen import AbstractPointPen

from ufostroker.domain.contour import Contour, Point, PointType
from ufostroker.domain.glyph import Component, Glyph


class GlyphPointPen(AbstractPointPen):
    """Point pen collecting an outline into a domain Glyph.

    Example:
        glyph = Glyph(name="")
        readGlyphFromString(data, glyph, GlyphPointPen(glyph))
    """

    def __init__(self, glyph: Glyph) -> None:
        self._glyph = glyph
        self._points: list[Point] | None = None
        self._identifier: str | None = None

    def beginPath(self, identifier: str | None = None, **kwargs: Any) -> None:
        self._points = []
        self._identifier = identifier

    def endPath(self) -> None:
        if self._points is None:
            raise ValueError("endPath() called without beginPath()")
        self._glyph.contours.append(
            Contour(points=self._points, identifier=self._identifier)
        )
        self._points = None
        self._identifier = None

    def addPoint(
        self,
        pt: tuple[float, float],
        segmentType: str | None = None,
        smooth: bool = False,
        name: str | None = None,
        identifier: str | None = None,
        **kwargs: Any,
    ) -> None:
        if self._points is None:
            raise ValueError("addPoint() called outside of a path")
        self._points.append(
            Point(
                x=pt[0],
                y=pt[1],
                point_type=PointType.from_segment_type(segmentType),
                smooth=bool(smooth),
                name=name,
                identifier=identifier,
            )
        )

    def addComponent(
        self,
        baseGlyphName: str,
        transformation: tuple[float, float, float, float, float, float],
        identifier: str | None = None,
        **kwargs: Any,
    ) -> None:
        self._glyph.components.append(
            Component(
                base_glyph=baseGlyphName,
                transformation=tuple(transformation),
                identifier=identifier,
            )
        )


def _number(value: float) -> int | float:
    """Write integral floats as ints so .glif files stay tidy."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def draw_glyph_points(glyph: Glyph, pen: AbstractPointPen) -> None:
    """Draw a domain glyph's contours and components into a point pen.

    Args:
        glyph: Glyph to draw
        pen: Any object implementing the point pen protocol
    """
    for contour in glyph.contours:
        pen.beginPath(identifier=contour.identifier)
        for point in contour.points:
            pen.addPoint(
                (_number(point.x), _number(point.y)),
                segmentType=point.point_type.segment_type,
                smooth=point.smooth,
                name=point.name,
                identifier=point.identifier,
            )
        pen.endPath()

    for component in glyph.components:
        pen.addComponent(
            component.base_glyph,
            component.transformation,
            identifier=component.identifier,
        )
