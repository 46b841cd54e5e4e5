"""Font I/O layer for ufostroker.

This module handles reading and writing UFO font projects using
fontTools.ufoLib. It provides a clean abstraction layer between glifLib and
the domain models.

Key responsibilities:
- Open a UFO and expose its default layer
- Convert .glif data to and from domain Glyph models
- Copy the input UFO to an explicit output location

Key classes:
- FontProject: Load a UFO font project
- Layer: Ordered glyph records and their file paths
"""

from ufostroker.io.reader import FontProject, Layer, read_glyph
from ufostroker.io.writer import copy_font_directory, same_location, write_glyph

__all__ = [
    "FontProject",
    "Layer",
    "copy_font_directory",
    "read_glyph",
    "same_location",
    "write_glyph",
]
