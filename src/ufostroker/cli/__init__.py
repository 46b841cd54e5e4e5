"""Command-line interface for ufostroker.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Global input/output and logging options
- One subcommand per transform mode (noodle, pattern)
- Detailed error reporting
"""

from ufostroker.cli.app import cli

__all__ = ["cli"]
