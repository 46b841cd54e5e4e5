"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with step indicators and formatted summaries.
"""


from rich.console import Console
from rich.text import Text

from ufostroker.utils import ProcessingStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]ufostroker[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, output_path: str, mode: str) -> None:
    """Print the run's input, output and mode.

    Args:
        font_path: Path to the input UFO
        output_path: Path the transformed UFO is written to
        mode: Transform mode name
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    if output_path != font_path:
        line.append(" → ")
        line.append(output_path)
    console.print(line)
    console.print(f"  mode {SYM_DOT} {mode}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(output_path: str, stats: ProcessingStats) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to the output UFO
        stats: Statistics of the finished run
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    console.print(
        f"  {stats.transformed_count} glyphs transformed {SYM_DOT} "
        f"{stats.skipped_count} skipped"
    )

    if stats.avg_glyph_time_ms is not None:
        console.print(f"  {stats.avg_glyph_time_ms:.1f}ms avg")


def print_error(message: str) -> None:
    """Print error message.

    Args:
        message: Main error message
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
