"""Glyph representation.

This module defines the glyph record, which holds everything a .glif file
stores: the outline (contours and components) and the non-geometric metadata
that transformations must carry through untouched.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from ufostroker.domain.contour import Contour

IDENTITY_TRANSFORMATION = (1, 0, 0, 1, 0, 0)


@dataclass(frozen=True, slots=True)
class Component:
    """A reference to another glyph.

    Attributes:
        base_glyph: Name of the referenced glyph
        transformation: Affine transformation (xx, xy, yx, yy, dx, dy)
        identifier: Optional unique component identifier
    """

    base_glyph: str
    transformation: tuple[float, float, float, float, float, float] = IDENTITY_TRANSFORMATION
    identifier: str | None = None


@dataclass
class Glyph:
    """A single glyph record as stored in a .glif file.

    The attribute names match what ``fontTools.ufoLib.glifLib`` reads from and
    writes to a glyph object, so an instance can be handed to glifLib directly.

    Attributes:
        name: Glyph name (e.g., "A", "B", "exclam")
        contours: Outline contours
        components: Component references
        width: Advance width
        height: Advance height
        unicodes: Unicode code points
        note: Free-form note
        image: Image reference data
        guidelines: Guideline data dictionaries
        anchors: Anchor data dictionaries
        lib: Opaque custom data
    """

    name: str
    contours: list[Contour] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)
    width: float = 0
    height: float = 0
    unicodes: list[int] = field(default_factory=list)
    note: str | None = None
    image: dict[str, Any] | None = None
    guidelines: list[dict[str, Any]] = field(default_factory=list)
    anchors: list[dict[str, Any]] = field(default_factory=list)
    lib: dict[str, Any] = field(default_factory=dict)

    def has_open_contours(self) -> bool:
        """Check if at least one contour is open.

        Returns:
            True if any contour starts with a MOVE point
        """
        return any(contour.is_open for contour in self.contours)

    def with_outline(
        self, contours: list[Contour], lib: dict[str, Any] | None = None
    ) -> "Glyph":
        """Return a copy of this glyph with a new outline.

        Every other field is carried over unchanged. Components and metadata
        containers are shallow-copied so the two records never share lists.

        Args:
            contours: The new contours
            lib: Replacement lib (None keeps the current one)

        Returns:
            New Glyph instance
        """
        return replace(
            self,
            contours=list(contours),
            components=list(self.components),
            unicodes=list(self.unicodes),
            guidelines=list(self.guidelines),
            anchors=list(self.anchors),
            lib=dict(self.lib) if lib is None else lib,
        )
