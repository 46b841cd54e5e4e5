"""Utility functions for ufostroker.

This module provides utility functions including:

- Logging setup and configuration
- Per-run processing statistics
"""

from ufostroker.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
