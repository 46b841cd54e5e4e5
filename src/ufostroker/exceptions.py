"""Exception hierarchy for ufostroker."""


class UfoStrokerError(Exception):
    """Base exception for all ufostroker errors."""

    pass


class ConfigurationError(UfoStrokerError):
    """Errors in the run configuration. Always raised before any glyph is touched."""

    pass


class InvalidOptionError(ConfigurationError):
    """An option value that cannot be degraded to a default."""

    def __init__(self, option: str, value: str, choices: list[str]) -> None:
        self.option = option
        self.value = value
        self.choices = choices
        super().__init__(
            f"Invalid value '{value}' for '{option}' (expected one of: {', '.join(choices)})"
        )


class PatternGlyphNotFoundError(ConfigurationError):
    """Requested pattern glyph not found in the active layer."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")


class UnknownModeError(ConfigurationError):
    """Requested transformation mode does not exist."""

    def __init__(self, mode: str) -> None:
        self.mode = mode
        super().__init__(f"Unknown mode '{mode}'")


class LogFileError(ConfigurationError):
    """The requested log file cannot be opened."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open log file '{path}': {reason}")


class FontError(UfoStrokerError):
    """Errors related to reading or writing font data."""

    pass


class FontLoadError(FontError):
    """Error loading a UFO font project."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphReadError(FontError):
    """Error reading or parsing a .glif file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read glyph '{path}': {reason}")


class GlyphWriteError(FontError):
    """Error writing a .glif file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write glyph '{path}': {reason}")


class OutputCopyError(FontError):
    """Error copying the input font project to the output location."""

    def __init__(self, source: str, destination: str, reason: str) -> None:
        self.source = source
        self.destination = destination
        self.reason = reason
        super().__init__(f"Could not copy '{source}' to '{destination}': {reason}")


class GeometryError(UfoStrokerError):
    """Errors in geometric calculations."""

    pass


class StrokeError(GeometryError):
    """Error stroking a contour."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PatternError(GeometryError):
    """The pattern glyph cannot be laid along a path."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Cannot use '{glyph_name}' as a pattern: {reason}")
