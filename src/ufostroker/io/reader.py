"""UFO font project reader.

This module provides the FontProject and Layer classes for loading a UFO
directory and walking the glyphs of its default layer, and read_glyph for
parsing a single .glif file into a domain Glyph.
"""

from collections.abc import Iterator
from pathlib import Path

from fontTools.ufoLib import DEFAULT_GLYPHS_DIRNAME, UFOReader
from fontTools.ufoLib.errors import UFOLibError
from fontTools.ufoLib.glifLib import GlyphSet, readGlyphFromString

from ufostroker.domain.glyph import Glyph
from ufostroker.exceptions import FontLoadError, GlyphReadError
from ufostroker.io.converter import GlyphPointPen


def read_glyph(path: Path) -> Glyph:
    """Read a .glif file into a domain Glyph.

    Args:
        path: Path to the .glif file

    Returns:
        Glyph with outline and metadata

    Raises:
        GlyphReadError: If the file cannot be read or is not valid GLIF
    """
    try:
        data = path.read_bytes()
        glyph = Glyph(name="")
        readGlyphFromString(data, glyph, GlyphPointPen(glyph))
    except (OSError, UFOLibError) as e:
        raise GlyphReadError(str(path), str(e)) from e
    return glyph


class Layer:
    """One glyph layer of a UFO font project.

    Glyphs are yielded in the order of the layer's contents.plist.

    Example:
        layer = FontProject(Path("font.ufo")).load().default_layer()
        for glyph in layer:
            print(glyph.name, layer.get_path(glyph.name))
    """

    def __init__(self, name: str, path: str, glyph_set: GlyphSet) -> None:
        """Initialize the layer.

        Args:
            name: Layer name
            path: Layer directory relative to the UFO root
            glyph_set: glifLib glyph set for the layer directory
        """
        self._name = name
        self._path = path
        self._glyph_set = glyph_set

    @property
    def name(self) -> str:
        """Layer name."""
        return self._name

    @property
    def path(self) -> str:
        """Layer directory relative to the UFO root (e.g. 'glyphs')."""
        return self._path

    def glyph_names(self) -> list[str]:
        """Glyph names in layer order."""
        return self._glyph_set.keys()

    def contains_glyph(self, name: str) -> bool:
        """Check whether the layer has a glyph with this name."""
        return name in self._glyph_set

    def get_path(self, name: str) -> Path | None:
        """Get the .glif file path of a glyph, relative to the layer directory.

        Args:
            name: Glyph name

        Returns:
            Relative path, or None if the glyph is not in the layer
        """
        file_name = self._glyph_set.contents.get(name)
        if file_name is None:
            return None
        return Path(file_name)

    def get_glyph(self, name: str) -> Glyph:
        """Read a glyph record from the layer.

        Args:
            name: Glyph name

        Returns:
            Glyph record

        Raises:
            GlyphReadError: If the glyph is missing or cannot be parsed
        """
        glyph = Glyph(name=name)
        try:
            self._glyph_set.readGlyph(name, glyph, GlyphPointPen(glyph))
        except (KeyError, UFOLibError) as e:
            raise GlyphReadError(f"{self._path}/{name}", str(e)) from e
        return glyph

    def iter_glyphs(self) -> Iterator[Glyph]:
        """Iterate over all glyph records in layer order.

        Yields:
            Glyph records
        """
        for name in self.glyph_names():
            yield self.get_glyph(name)

    def __iter__(self) -> Iterator[Glyph]:
        return self.iter_glyphs()

    def __len__(self) -> int:
        return len(self._glyph_set)


class FontProject:
    """A UFO font project on disk.

    Example:
        project = FontProject(Path("font.ufo"))
        project.load()
        layer = project.default_layer()
    """

    def __init__(self, path: Path) -> None:
        """Initialize the font project.

        Args:
            path: Path to the .ufo directory
        """
        self._path = path
        self._reader: UFOReader | None = None

    @property
    def path(self) -> Path:
        """Path to the UFO directory."""
        return self._path

    def load(self) -> "FontProject":
        """Open the UFO.

        Returns:
            self, for chaining

        Raises:
            FontLoadError: If the path is missing or not a valid UFO
        """
        if not self._path.exists():
            raise FontLoadError(str(self._path), "no such file or directory")
        try:
            self._reader = UFOReader(self._path, validate=True)
        except UFOLibError as e:
            raise FontLoadError(str(self._path), str(e)) from e
        return self

    @property
    def format_version(self) -> tuple[int, int]:
        """UFO format version as (major, minor)."""
        return tuple(self._require_reader().formatVersionTuple)

    def default_layer(self) -> Layer:
        """Get the default glyph layer.

        Returns:
            Layer stored in the UFO's default glyphs directory

        Raises:
            FontLoadError: If the layer cannot be opened
        """
        reader = self._require_reader()
        try:
            name = reader.getDefaultLayerName()
            glyph_set = reader.getGlyphSet(name)
        except UFOLibError as e:
            raise FontLoadError(str(self._path), str(e)) from e
        return Layer(name=name, path=DEFAULT_GLYPHS_DIRNAME, glyph_set=glyph_set)

    def close(self) -> None:
        """Close the UFO and free resources."""
        if self._reader is not None:
            self._reader.close()
            self._reader = None

    def _require_reader(self) -> UFOReader:
        if self._reader is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._reader

    def __enter__(self) -> "FontProject":
        """Context manager entry."""
        return self.load()

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
