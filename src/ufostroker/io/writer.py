"""Writers for transformed glyphs and output font projects.

This module provides write_glyph for serializing a domain Glyph to a .glif
file and copy_font_directory for seeding an output UFO from the input.
"""

import shutil
from functools import partial
from pathlib import Path

from fontTools.ufoLib.errors import UFOLibError
from fontTools.ufoLib.glifLib import writeGlyphToString

from ufostroker.domain.glyph import Glyph
from ufostroker.exceptions import GlyphWriteError, OutputCopyError
from ufostroker.io.converter import draw_glyph_points


def write_glyph(glyph: Glyph, path: Path) -> None:
    """Write a glyph record to a .glif file, replacing any existing file.

    The file is always written in glifLib's current GLIF format version.

    Args:
        glyph: Glyph to write
        path: Destination .glif file

    Raises:
        GlyphWriteError: If the glyph cannot be serialized or written
    """
    try:
        text = writeGlyphToString(
            glyph.name,
            glyph,
            partial(draw_glyph_points, glyph),
            validate=True,
        )
        path.write_text(text, encoding="utf-8")
    except (OSError, UFOLibError) as e:
        raise GlyphWriteError(str(path), str(e)) from e


def copy_font_directory(source: Path, destination: Path) -> None:
    """Recursively copy a UFO directory, merging into an existing destination.

    Args:
        source: Input UFO directory
        destination: Output UFO directory

    Raises:
        OutputCopyError: If the copy fails
    """
    try:
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except (OSError, shutil.Error) as e:
        raise OutputCopyError(str(source), str(destination), str(e)) from e


def same_location(first: Path, second: Path) -> bool:
    """Check whether two paths point at the same directory."""
    return first.resolve() == second.resolve()
