"""Analysis result types.

This module defines the values the engine produces:
- HoleCandidate: A circle recorded as a potential drill point
- BoundingBox: Axis-aligned extent of the drawing
- HoleGroup: Filtered holes sharing one rounded diameter
- HoleSummary, MachiningSummary, DrawingStats: Sections of the result
- AnalysisResult: Top-level, immutable output of one analysis
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class HoleCandidate:
    """A circle interpreted as a potential drill hole.

    The radius is carried as-is from the source circle, including zero or
    negative values; filtering happens when holes are grouped.

    Attributes:
        x: Center X coordinate
        y: Center Y coordinate
        radius: Circle radius
        layer: Layer of the source circle
    """

    x: float
    y: float
    radius: float
    layer: str

    @property
    def diameter(self) -> float:
        """Hole diameter (2 × radius)."""
        return self.radius * 2

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "radius": self.radius,
            "diameter": self.diameter,
            "layer": self.layer,
        }


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Left edge
        min_y: Bottom edge
        max_x: Right edge
        max_y: Top edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, x: float, y: float) -> bool:
        """Check whether a point lies inside or on the box."""
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def to_dict(self) -> dict[str, Any]:
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True, slots=True)
class HoleGroup:
    """Holes that share the same rounded diameter.

    Attributes:
        diameter: Rounded diameter used as the grouping key
        holes: Holes in first-seen order
    """

    diameter: float
    holes: tuple[HoleCandidate, ...]

    @property
    def count(self) -> int:
        return len(self.holes)

    def to_dict(self) -> dict[str, Any]:
        return {"diameter": self.diameter, "count": self.count}


@dataclass(frozen=True, slots=True)
class HoleSummary:
    """Hole section of an analysis result.

    ``count``, ``diameter_min`` and ``diameter_max`` cover every detected
    candidate; ``groups`` only the ones kept by the diameter filter.
    """

    count: int = 0
    candidates: tuple[HoleCandidate, ...] = field(default_factory=tuple)
    diameter_min: float | None = None
    diameter_max: float | None = None
    groups: tuple[HoleGroup, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "candidates": [c.to_dict() for c in self.candidates],
            "diameter_min": self.diameter_min,
            "diameter_max": self.diameter_max,
            "groups": [g.to_dict() for g in self.groups],
        }


@dataclass(frozen=True, slots=True)
class MachiningSummary:
    """Machining section of an analysis result."""

    has_complex_shapes: bool = False
    arc_count: int = 0
    polyline_count: int = 0
    spline_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_complex_shapes": self.has_complex_shapes,
            "arc_count": self.arc_count,
            "polyline_count": self.polyline_count,
            "spline_count": self.spline_count,
        }


@dataclass(frozen=True, slots=True)
class DrawingStats:
    """Entity and layer statistics."""

    total_entities: int = 0
    layers: frozenset[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_entities": self.total_entities,
            "layers": sorted(self.layers),
        }


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Features extracted from one drawing.

    Attributes:
        success: False only when the drawing could not be parsed
        error: Failure message when ``success`` is False
        holes: Detected holes
        machining: Complex-machining indicators
        bounding_box: Drawing extent, None if no entity had coordinates
        stats: Entity and layer statistics
    """

    success: bool
    error: str | None = None
    holes: HoleSummary = field(default_factory=HoleSummary)
    machining: MachiningSummary = field(default_factory=MachiningSummary)
    bounding_box: BoundingBox | None = None
    stats: DrawingStats = field(default_factory=DrawingStats)

    @classmethod
    def failure(cls, message: str) -> "AnalysisResult":
        """Build the result returned when the drawing could not be parsed.

        Args:
            message: Reason reported by the parser

        Returns:
            Unsuccessful result with empty sections
        """
        return cls(success=False, error=message or "Unknown error")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "success": self.success,
            "error": self.error,
            "holes": self.holes.to_dict(),
            "machining": self.machining.to_dict(),
            "bounding_box": self.bounding_box.to_dict() if self.bounding_box else None,
            "stats": self.stats.to_dict(),
        }
