"""Logging utilities for ufostroker."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from ufostroker.config.settings import LogLevel
from ufostroker.exceptions import InvalidOptionError, LogFileError

_FILE_HANDLER_NAME = "ufostroker-file"
_CONSOLE_HANDLER_NAME = "ufostroker-console"


@dataclass
class ProcessingStats:
    """Statistics from processing run."""

    transformed_count: int = 0
    skipped_count: int = 0
    glyph_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_glyph_time_ms(self) -> float | None:
        """Average time per transformed glyph."""
        if not self.glyph_timings_ms:
            return None
        return sum(self.glyph_timings_ms) / len(self.glyph_timings_ms)


def _replace_handler(root_logger: logging.Logger, handler: logging.Handler) -> None:
    for existing in list(root_logger.handlers):
        if existing.get_name() == handler.get_name():
            root_logger.removeHandler(existing)
            existing.close()
    root_logger.addHandler(handler)


def _level(name: str) -> int:
    """Map a level name to its logging constant.

    Raises:
        InvalidOptionError: If the name is not a supported level
    """
    try:
        return getattr(logging, LogLevel(name.upper()).value)
    except ValueError:
        raise InvalidOptionError("log_level", name, [level.value for level in LogLevel]) from None


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger

    Raises:
        InvalidOptionError: If a level name is not supported
        LogFileError: If the log file cannot be opened
    """
    console_threshold = _level(console_level)
    if quiet:
        console_threshold = max(console_threshold, logging.ERROR)
    file_threshold = _level(file_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            raise LogFileError(str(log_file), e.strerror or str(e)) from e
        file_handler.set_name(_FILE_HANDLER_NAME)
        file_handler.setLevel(file_threshold)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _replace_handler(root_logger, file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_CONSOLE_HANDLER_NAME)
    console_handler.setLevel(console_threshold)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _replace_handler(root_logger, console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("ufostroker")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_glyph_transformed(self, glyph_name: str, duration_ms: float) -> None:
        """Log a transformed glyph."""
        self._logger.info(
            "Glyph transformed",
            glyph=glyph_name,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.transformed_count += 1
        self._stats.glyph_timings_ms.append(duration_ms)

    def record_glyph_skipped(self) -> None:
        """Count a glyph without open contours. Skips are not logged."""
        self._stats.skipped_count += 1

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
