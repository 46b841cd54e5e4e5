"""Resolution of raw CLI option strings into transform settings.

Options arrive as a mapping from option name to an optional string. Absent
options take their default. A malformed value is logged as a warning and the
default is kept, with one exception: cap and join styles shape the stroke
itself, so an unknown literal for them aborts the run.

Values are taken verbatim. Surrounding whitespace, digit separators and
non-finite numbers make a value malformed.
"""

import math
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, TypeVar

import structlog

from ufostroker.config.settings import (
    CapType,
    JoinType,
    PatternCopies,
    PatternSettings,
    StrokeSettings,
    Vector,
)
from ufostroker.exceptions import InvalidOptionError

E = TypeVar("E", bound=Enum)

Options = Mapping[str, str | None]

_BOOLEAN_LITERALS = {"true": True, "false": False}


def _get_logger(logger: Any | None) -> Any:
    if logger is None:
        return structlog.get_logger("ufostroker")
    return logger


def _bare(value: str) -> str:
    if value != value.strip() or "_" in value:
        raise ValueError(f"malformed number: {value!r}")
    return value


def _parse_float(value: str) -> float:
    number = float(_bare(value))
    if not math.isfinite(number):
        raise ValueError(f"non-finite number: {value!r}")
    return number


def _parse_count(value: str) -> int:
    count = int(_bare(value))
    if count < 0:
        raise ValueError(f"negative count: {count}")
    return count


def _parse_bool(value: str) -> bool:
    return _BOOLEAN_LITERALS[value]


def _resolve_lenient(
    options: Options,
    option: str,
    default: Any,
    parse: Callable[[str], Any],
    logger: Any,
) -> Any:
    """Parse one option, falling back to the default with a warning.

    Args:
        options: Raw option mapping
        option: Option name
        default: Value used when the option is absent or malformed
        parse: Converter raising ValueError/KeyError on malformed input
        logger: Logger receiving the warning

    Returns:
        Parsed value or the default
    """
    raw = options.get(option)
    if raw is None:
        return default
    try:
        return parse(raw)
    except (ValueError, KeyError):
        fallback = default.value if isinstance(default, Enum) else default
        logger.warning(
            "Invalid option value, falling back to default",
            option=option,
            value=raw,
            default=fallback,
        )
        return default


def _resolve_strict(options: Options, option: str, enum_type: type[E], default: E) -> E:
    """Parse an enum option that must not degrade.

    Raises:
        InvalidOptionError: If the value is not one of the enum's literals
    """
    raw = options.get(option)
    if raw is None:
        return default
    try:
        return enum_type(raw)
    except ValueError:
        raise InvalidOptionError(
            option, raw, [member.value for member in enum_type]
        ) from None


def resolve_stroke_settings(options: Options, logger: Any | None = None) -> StrokeSettings:
    """Build noodle settings from raw option strings.

    Recognised options: ``capstart``, ``capend``, ``join`` (fatal when
    unknown), ``size`` and ``angle`` (floats, warn on failure).

    Args:
        options: Mapping from option name to raw value (None = absent)
        logger: structlog logger for warnings (module logger if None)

    Returns:
        Fully populated StrokeSettings

    Raises:
        InvalidOptionError: If a cap or join literal is unknown
    """
    log = _get_logger(logger)
    defaults = StrokeSettings()

    return StrokeSettings(
        cap_start=_resolve_strict(options, "capstart", CapType, defaults.cap_start),
        cap_end=_resolve_strict(options, "capend", CapType, defaults.cap_end),
        join=_resolve_strict(options, "join", JoinType, defaults.join),
        distance=_resolve_lenient(options, "size", defaults.distance, _parse_float, log),
        angle=_resolve_lenient(options, "angle", defaults.angle, _parse_float, log),
    )


def resolve_pattern_settings(options: Options, logger: Any | None = None) -> PatternSettings:
    """Build pattern-along-path settings from raw option strings.

    Every pattern option degrades to its default with a warning when it
    cannot be parsed; none of them is fatal.

    Args:
        options: Mapping from option name to raw value (None = absent)
        logger: structlog logger for warnings (module logger if None)

    Returns:
        Fully populated PatternSettings
    """
    log = _get_logger(logger)
    defaults = PatternSettings()

    def lenient(option: str, default: Any, parse: Callable[[str], Any]) -> Any:
        return _resolve_lenient(options, option, default, parse, log)

    return PatternSettings(
        copies=lenient("repeat_mode", defaults.copies, PatternCopies),
        pattern_scale=Vector(
            x=lenient("sx", defaults.pattern_scale.x, _parse_float),
            y=lenient("sy", defaults.pattern_scale.y, _parse_float),
        ),
        subdivide=lenient("subdivide", defaults.subdivide, _parse_count),
        spacing=lenient("spacing", defaults.spacing, _parse_float),
        normal_offset=lenient("noffset", defaults.normal_offset, _parse_float),
        tangent_offset=lenient("toffset", defaults.tangent_offset, _parse_float),
        center_pattern=lenient("center_pattern", defaults.center_pattern, _parse_bool),
        stretch=lenient("stretch", defaults.stretch, _parse_bool),
        simplify=lenient("simplify", defaults.simplify, _parse_bool),
        is_vertical=lenient("vertical", defaults.is_vertical, _parse_bool),
    )
