"""Noodle transform: a uniform stroke around every open contour.

The stroke parameters are the same at every segment boundary, so a contour
with S segments gets S + 1 identical stroke handles.
"""

from ufostroker.config.settings import StrokeSettings
from ufostroker.core.piecewise import PiecewiseContour
from ufostroker.core.stroke import variable_width_stroke
from ufostroker.domain.contour import Contour
from ufostroker.domain.glyph import Glyph
from ufostroker.domain.handle import InterpolationType, StrokeHandle, StrokeProfile


def build_stroke_handles(path: PiecewiseContour, settings: StrokeSettings) -> list[StrokeHandle]:
    """Build one stroke handle per segment boundary of a path.

    Args:
        path: Open piecewise contour
        settings: Noodle settings

    Returns:
        len(path.segments) + 1 identical handles
    """
    handle = StrokeHandle(
        left_offset=settings.distance,
        right_offset=settings.distance,
        tangent_offset=settings.angle,
        interpolation=InterpolationType.LINEAR,
    )
    return [handle] * (len(path.segments) + 1)


def build_stroke_profile(path: PiecewiseContour, settings: StrokeSettings) -> StrokeProfile:
    """Bundle the handles of a path with the cap and join styles."""
    return StrokeProfile(
        handles=tuple(build_stroke_handles(path, settings)),
        cap_start=settings.cap_start,
        cap_end=settings.cap_end,
        join=settings.join,
    )


def stroke_contour(contour: Contour, settings: StrokeSettings) -> list[Contour]:
    """Stroke one open contour.

    Args:
        contour: Open contour
        settings: Noodle settings

    Returns:
        The stroked outline contours (empty for a contour without length)
    """
    path = PiecewiseContour.from_contour(contour)
    outline = variable_width_stroke(path, build_stroke_profile(path, settings))
    return outline.to_contours()


def stroke_glyph(glyph: Glyph, settings: StrokeSettings) -> Glyph:
    """Replace every open contour of a glyph with its stroked outline.

    Closed contours stay where they are. The returned glyph has an empty lib;
    everything else is copied from the input.

    Args:
        glyph: Glyph to transform
        settings: Noodle settings

    Returns:
        New Glyph instance
    """
    contours: list[Contour] = []
    for contour in glyph.contours:
        if contour.is_open:
            contours.extend(stroke_contour(contour, settings))
        else:
            contours.append(contour)
    return glyph.with_outline(contours, lib={})
