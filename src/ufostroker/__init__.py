"""ufostroker - Apply path effects to the open contours of UFO fonts.

ufostroker is a CLI tool that walks the default layer of a UFO font project and
replaces every open contour with either a stroked outline ("noodle") or copies
of a pattern glyph laid along the path ("pattern").

Example:
    $ ufostroker --ufo MyFont.ufo --output MyFont-Stroked.ufo noodle --size 20

This will copy MyFont.ufo to MyFont-Stroked.ufo and stroke every glyph that
has at least one open contour with a 40 unit wide noodle.
"""

__version__ = "0.1.0"
__author__ = "Simon Cozens"

__all__ = ["__author__", "__version__"]
