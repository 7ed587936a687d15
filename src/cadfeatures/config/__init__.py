"""Configuration management for cadfeatures.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, keyword arguments or
defaults. No environment variables are read.

Key classes:
- HoleFilterConfig: Diameter window and grouping tolerance
- MachiningConfig: Complex-shape detection threshold
- LoggingConfig: Logging settings
- AnalyzerSettings: Main analyzer settings
"""

from cadfeatures.config.settings import (
    COMPLEX_POLYLINE_THRESHOLD,
    DEFAULT_DIAMETER_TOLERANCE,
    DEFAULT_MAX_DIAMETER,
    DEFAULT_MIN_DIAMETER,
    AnalyzerSettings,
    HoleFilterConfig,
    LoggingConfig,
    MachiningConfig,
    get_default_settings,
)

__all__ = [
    "COMPLEX_POLYLINE_THRESHOLD",
    "DEFAULT_DIAMETER_TOLERANCE",
    "DEFAULT_MAX_DIAMETER",
    "DEFAULT_MIN_DIAMETER",
    "AnalyzerSettings",
    "HoleFilterConfig",
    "LoggingConfig",
    "MachiningConfig",
    "get_default_settings",
]
