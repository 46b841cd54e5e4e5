"""Configuration settings for ufostroker."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class CapType(str, Enum):
    """Shape added at the ends of a stroked open contour."""

    ROUND = "round"
    CIRCLE = "circle"
    SQUARE = "square"
    CUSTOM = "custom"


class JoinType(str, Enum):
    """Shape added at the outer side of corners between segments."""

    ROUND = "round"
    CIRCLE = "circle"
    MITER = "miter"
    BEVEL = "bevel"


class PatternCopies(str, Enum):
    """How many copies of the pattern are laid along a path."""

    SINGLE = "single"
    REPEATED = "repeated"


class LogLevel(str, Enum):
    """Logging levels accepted on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Vector(BaseModel):
    """A 2D vector."""

    model_config = ConfigDict(frozen=True)

    x: float = 1.0
    y: float = 1.0


class StrokeSettings(BaseModel):
    """Settings for the noodle (uniform stroke) transform.

    Resolved once per run and shared read-only by every contour.
    """

    model_config = ConfigDict(frozen=True)

    cap_start: CapType = Field(
        default=CapType.ROUND,
        description="Cap at the start of each stroke",
    )
    cap_end: CapType = Field(
        default=CapType.ROUND,
        description="Cap at the end of each stroke",
    )
    join: JoinType = Field(
        default=JoinType.ROUND,
        description="Join at corners between segments",
    )
    distance: float = Field(
        default=10.0,
        description="Half-width of the stroke in font units",
    )
    angle: float = Field(
        default=0.0,
        description="Rotation of the stroke from the path normal, in radians",
    )


class PatternSettings(BaseModel):
    """Settings for the pattern-along-path transform.

    Resolved once per run and shared read-only by every glyph.
    """

    model_config = ConfigDict(frozen=True)

    copies: PatternCopies = Field(
        default=PatternCopies.REPEATED,
        description="Lay a single copy or repeat the pattern along the path",
    )
    pattern_scale: Vector = Field(
        default_factory=Vector,
        description="Scale applied to the pattern before it is laid out",
    )
    subdivide: int = Field(
        default=0,
        ge=0,
        description="Times to split each pattern segment at its midpoint (0 = off)",
    )
    spacing: float = Field(
        default=0.0,
        description="Padding trailing each copy",
    )
    normal_offset: float = Field(
        default=0.0,
        description="Offset of the pattern along the path normal",
    )
    tangent_offset: float = Field(
        default=0.0,
        description="Offset of the pattern along the path tangent",
    )
    center_pattern: bool = Field(
        default=True,
        description="Centre the pattern vertically on the path",
    )
    stretch: bool = Field(
        default=False,
        description="Stretch copies so they fill the path exactly",
    )
    simplify: bool = Field(
        default=False,
        description="Tidy the resulting outline",
    )
    is_vertical: bool = Field(
        default=False,
        description="Lay the pattern's vertical axis along the path",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging if None)",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Only log errors to the console",
    )


class RunConfig(BaseModel):
    """Settings for one ufostroker run."""

    ufo: Path = Field(description="Input UFO font project")
    output: Path | None = Field(
        default=None,
        description="Output UFO (None = modify the input in place)",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
