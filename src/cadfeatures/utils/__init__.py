"""Utility functions for cadfeatures.

This module provides utility functions including:

- Logging setup and configuration
- Analysis statistics tracking
"""

from cadfeatures.utils.logging import (
    AnalysisLogger,
    AnalysisStats,
    configure_logging,
    get_logger,
    reset_logging,
)

__all__ = [
    "AnalysisLogger",
    "AnalysisStats",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
