"""CLI application entry point for ufostroker.

This module provides the main CLI interface using Typer. Global options
(input/output UFO and logging) belong to the application callback; each
transform mode is a subcommand. Transform options are passed through as raw
strings and converted by the settings resolver.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, NoReturn

import structlog
import typer

from ufostroker import __version__
from ufostroker.cli.output import (
    print_error,
    print_font_info,
    print_header,
    print_step,
    print_success,
)
from ufostroker.config import LogLevel, LoggingConfig, RunConfig
from ufostroker.core import FontProcessor
from ufostroker.exceptions import ConfigurationError, FontError, UfoStrokerError

# Create the Typer app
app = typer.Typer(
    name="ufostroker",
    help="Apply noodle and pattern-along-path effects to the open contours of a UFO font.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class GlobalOptions:
    """Options given before the subcommand."""

    run_config: RunConfig
    quiet: bool


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"ufostroker v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    ufo: Annotated[
        Path,
        typer.Option(
            "--ufo",
            "-i",
            help="Path to the input UFO font project",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output UFO (default: modify the input in place)",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            case_sensitive=False,
            help="Console logging level",
        ),
    ] = LogLevel.INFO,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Apply a path effect to every glyph with open contours.

    Example:
        ufostroker -i MyFont.ufo -o MyFont-Noodle.ufo noodle --size 20
    """
    ctx.obj = GlobalOptions(
        run_config=RunConfig(
            ufo=ufo,
            output=output,
            logging=LoggingConfig(log_file=log_file, log_level=log_level, quiet=quiet),
        ),
        quiet=quiet,
    )


def _fail(logger: Any, event: str, error: Exception, message: str) -> NoReturn:
    """Log an error, report it on the console and exit with status 1."""
    logger.error(event, error=str(error), error_type=type(error).__name__)
    print_error(message)
    raise typer.Exit(code=1) from None


def _run(ctx: typer.Context, mode: str, options: dict[str, str | None]) -> None:
    """Run one transform mode and report the outcome."""
    global_options: GlobalOptions = ctx.obj
    config = global_options.run_config
    quiet = global_options.quiet

    if not quiet:
        print_header(__version__)

    # Replaced by the configured logger once logging is set up
    logger: Any = structlog.get_logger("ufostroker")

    try:
        processor = FontProcessor(config)
        logger = processor.logger

        if not quiet:
            print_font_info(
                font_path=str(config.ufo),
                output_path=str(processor.output_path),
                mode=mode,
            )
            print_step("Processing")

        stats = processor.run(mode, options)

        if not quiet:
            print_success(output_path=str(processor.output_path), stats=stats)

    except ConfigurationError as e:
        _fail(logger, "Invalid configuration", e, str(e))
    except FontError as e:
        _fail(logger, "Font I/O failed", e, str(e))
    except UfoStrokerError as e:
        _fail(logger, "Processing failed", e, str(e))
    except KeyboardInterrupt:
        print_error("Interrupted")
        raise typer.Exit(code=130) from None
    except typer.Exit:
        raise
    except Exception as e:
        _fail(logger, "Unexpected error", e, f"Unexpected error: {e}")


@app.command()
def noodle(
    ctx: typer.Context,
    capstart: Annotated[
        str | None,
        typer.Option("--capstart", help="Start cap (round|circle|square|custom)"),
    ] = None,
    capend: Annotated[
        str | None,
        typer.Option("--capend", help="End cap (round|circle|square|custom)"),
    ] = None,
    join: Annotated[
        str | None,
        typer.Option("--join", help="Corner join (round|circle|miter|bevel)"),
    ] = None,
    size: Annotated[
        str | None,
        typer.Option("--size", help="Half-width of the stroke [default: 10]"),
    ] = None,
    angle: Annotated[
        str | None,
        typer.Option("--angle", help="Stroke angle in radians [default: 0]"),
    ] = None,
) -> None:
    """Replace every open contour with a stroked outline."""
    _run(
        ctx,
        "noodle",
        {
            "capstart": capstart,
            "capend": capend,
            "join": join,
            "size": size,
            "angle": angle,
        },
    )


@app.command()
def pattern(
    ctx: typer.Context,
    pattern_glyph: Annotated[
        str,
        typer.Option(
            "--pattern-glyph",
            "-p",
            help="Name of the glyph laid along each open contour",
            show_default=False,
        ),
    ],
    repeat_mode: Annotated[
        str | None,
        typer.Option("--repeat-mode", "-r", help="single|repeated [default: repeated]"),
    ] = None,
    sx: Annotated[
        str | None,
        typer.Option("--sx", help="Horizontal pattern scale [default: 1]"),
    ] = None,
    sy: Annotated[
        str | None,
        typer.Option("--sy", help="Vertical pattern scale [default: 1]"),
    ] = None,
    subdivide: Annotated[
        str | None,
        typer.Option("--subdivide", help="Pattern subdivision passes [default: 0]"),
    ] = None,
    spacing: Annotated[
        str | None,
        typer.Option("--spacing", help="Space between copies [default: 0]"),
    ] = None,
    noffset: Annotated[
        str | None,
        typer.Option("--noffset", help="Offset along the path normal [default: 0]"),
    ] = None,
    toffset: Annotated[
        str | None,
        typer.Option("--toffset", help="Offset along the path tangent [default: 0]"),
    ] = None,
    stretch: Annotated[
        str | None,
        typer.Option("--stretch", help="Stretch copies to fill the path (true|false)"),
    ] = None,
    simplify: Annotated[
        str | None,
        typer.Option("--simplify", help="Tidy the resulting outline (true|false)"),
    ] = None,
    center_pattern: Annotated[
        str | None,
        typer.Option("--center_pattern", help="Centre the pattern on the path (true|false)"),
    ] = None,
    vertical: Annotated[
        str | None,
        typer.Option("--vertical", help="Lay the pattern vertically (true|false)"),
    ] = None,
) -> None:
    """Lay copies of a pattern glyph along every open contour."""
    _run(
        ctx,
        "pattern",
        {
            "pattern_glyph": pattern_glyph,
            "repeat_mode": repeat_mode,
            "sx": sx,
            "sy": sy,
            "subdivide": subdivide,
            "spacing": spacing,
            "noffset": noffset,
            "toffset": toffset,
            "stretch": stretch,
            "simplify": simplify,
            "center_pattern": center_pattern,
            "vertical": vertical,
        },
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
