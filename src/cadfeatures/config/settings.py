"""Configuration settings for cadfeatures."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

# Circles under 3 mm are engraving or decoration, over 50 mm are cut-outs.
DEFAULT_MIN_DIAMETER = 3.0
DEFAULT_MAX_DIAMETER = 50.0
# Holes are grouped by diameter rounded to this step (mm).
DEFAULT_DIAMETER_TOLERANCE = 0.1
# More polylines than this means compound, non-rectangular machining.
COMPLEX_POLYLINE_THRESHOLD = 4


class HoleFilterConfig(BaseModel):
    """Diameter window and grouping tolerance for hole detection.

    All values are in drawing units (millimetres for the drawings this
    engine is tuned for).
    """

    min_diameter: float = Field(
        default=DEFAULT_MIN_DIAMETER,
        ge=0.0,
        description="Smallest diameter counted as a drill hole (inclusive)",
    )
    max_diameter: float = Field(
        default=DEFAULT_MAX_DIAMETER,
        gt=0.0,
        description="Largest diameter counted as a drill hole (inclusive)",
    )
    tolerance: float = Field(
        default=DEFAULT_DIAMETER_TOLERANCE,
        gt=0.0,
        le=10.0,
        description="Rounding step used to group holes by diameter",
    )

    @model_validator(mode="after")
    def _check_window(self) -> "HoleFilterConfig":
        if self.max_diameter < self.min_diameter:
            raise ValueError(
                f"max_diameter ({self.max_diameter}) is smaller than "
                f"min_diameter ({self.min_diameter})"
            )
        return self


class MachiningConfig(BaseModel):
    """Configuration for complex-machining detection."""

    complex_polyline_threshold: int = Field(
        default=COMPLEX_POLYLINE_THRESHOLD,
        ge=0,
        description="Polyline count above which the drawing needs complex machining",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class AnalyzerSettings(BaseModel):
    """Main analyzer settings."""

    holes: HoleFilterConfig = Field(default_factory=HoleFilterConfig)
    machining: MachiningConfig = Field(default_factory=MachiningConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AnalyzerSettings:
    """Get default analyzer settings."""
    return AnalyzerSettings()
