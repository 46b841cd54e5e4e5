"""Batch orchestration of a ufostroker run.

This module coordinates one run end to end:

1. Resolve the transform settings for the requested mode
2. Load the UFO and take its default layer
3. Load the pattern glyph (pattern mode)
4. Copy the UFO to the output location when one is given
5. Traverse the layer once

Configuration problems are detected in steps 1 and 3, before anything is
copied or written.
"""

import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar

from ufostroker.config import (
    PatternSettings,
    RunConfig,
    resolve_pattern_settings,
    resolve_stroke_settings,
)
from ufostroker.core.pattern_engine import prepare_pattern
from ufostroker.core.transforms import GlyphTransform, PatternTransform, StrokeTransform
from ufostroker.core.traverser import traverse
from ufostroker.io import FontProject, Layer, copy_font_directory, same_location
from ufostroker.exceptions import (
    ConfigurationError,
    PatternGlyphNotFoundError,
    UnknownModeError,
)
from ufostroker.utils import ProcessingLogger, ProcessingStats, configure_logging


class FontProcessor:
    """Runs one transform over the default layer of a UFO.

    Example:
        config = RunConfig(ufo=Path("font.ufo"), output=Path("out.ufo"))
        processor = FontProcessor(config)
        stats = processor.run("noodle", {"size": "20"})
    """

    MODES: ClassVar[tuple[str, ...]] = ("noodle", "pattern")

    def __init__(self, config: RunConfig, logger: Any | None = None) -> None:
        """Initialize font processor with configuration.

        Args:
            config: Input/output paths and logging settings
            logger: structlog logger (logging is configured from config if None)
        """
        self.config = config
        if logger is None:
            logger = configure_logging(
                log_file=config.logging.log_file,
                console_level=config.logging.log_level,
                file_level=config.logging.file_log_level,
                quiet=config.logging.quiet,
            )
        self.logger = logger
        self.processing_logger = ProcessingLogger(self.logger)

    @property
    def output_path(self) -> Path:
        """Directory the transformed UFO ends up in."""
        return self.config.output if self.config.output is not None else self.config.ufo

    def run(self, mode: str, options: Mapping[str, str | None]) -> ProcessingStats:
        """Apply a transform to every eligible glyph.

        Args:
            mode: "noodle" or "pattern"
            options: Raw option strings for the mode; pattern mode needs
                "pattern_glyph"

        Returns:
            ProcessingStats with counts and timing

        Raises:
            ConfigurationError: On an unknown mode, a fatal option value or a
                missing pattern glyph
            FontError: If the UFO cannot be loaded, copied, read or written
        """
        if mode not in self.MODES:
            raise UnknownModeError(mode)

        stats = self.processing_logger.stats
        stats.start_time = time.time()

        self.logger.info(
            "Starting font processing",
            mode=mode,
            input=str(self.config.ufo),
            output=str(self.output_path),
        )

        if mode == "noodle":
            stroke_settings = resolve_stroke_settings(options, logger=self.logger)
        else:
            pattern_settings = resolve_pattern_settings(options, logger=self.logger)
            pattern_name = options.get("pattern_glyph")
            if not pattern_name:
                raise ConfigurationError("Pattern mode requires a pattern glyph")

        project = FontProject(self.config.ufo).load()
        try:
            layer = project.default_layer()
            self.logger.info(
                "Font loaded",
                format_version=".".join(str(v) for v in project.format_version),
                layer=layer.name,
                glyph_count=len(layer),
            )

            transform: GlyphTransform
            if mode == "noodle":
                transform = StrokeTransform(settings=stroke_settings)
            else:
                transform = self._pattern_transform(layer, pattern_name, pattern_settings)

            self._prepare_output()

            traverse(
                layer,
                input_base=self.config.ufo / layer.path,
                output_base=self.output_path / layer.path,
                transform=transform,
                processing_logger=self.processing_logger,
            )
        finally:
            project.close()

        stats.end_time = time.time()
        self.logger.info(
            "Processing complete",
            transformed=stats.transformed_count,
            skipped=stats.skipped_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return stats

    def _pattern_transform(
        self, layer: Layer, name: str, settings: PatternSettings
    ) -> PatternTransform:
        """Load and check the pattern glyph.

        Raises:
            PatternGlyphNotFoundError: If the layer has no such glyph
            PatternError: If the glyph has no usable outline
        """
        if not layer.contains_glyph(name):
            raise PatternGlyphNotFoundError(name)
        pattern = layer.get_glyph(name)
        prepared = prepare_pattern(pattern, settings)
        self.logger.debug(
            "Pattern glyph loaded",
            glyph=name,
            contours=len(prepared.contours),
            width=round(prepared.width, 2),
            height=round(prepared.height, 2),
        )
        return PatternTransform(pattern=pattern, settings=settings)

    def _prepare_output(self) -> None:
        """Copy the input UFO to the output location if it is a different one."""
        output = self.config.output
        if output is None:
            return
        if output.exists() and same_location(self.config.ufo, output):
            return
        copy_font_directory(self.config.ufo, output)
        self.logger.info("Copied font project", source=str(self.config.ufo), destination=str(output))
