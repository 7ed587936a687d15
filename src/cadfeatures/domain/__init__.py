"""Domain models for cadfeatures.

This module contains the drawing entities the engine consumes and the
result values it produces. All models are:

- Immutable (frozen dataclasses)
- Independent of the DXF parser's own entity classes

Key classes:
- Point: A 2D coordinate
- Circle, Arc, Line, Polyline, Spline, UnknownEntity: Drawing entities
- HoleCandidate: A circle recorded as a potential drill point
- BoundingBox: Extent of the drawing
- AnalysisResult: Output of one analysis
"""

from cadfeatures.domain.entity import (
    DEFAULT_LAYER,
    Arc,
    Circle,
    DrawingEntity,
    EntityKind,
    Line,
    Point,
    Polyline,
    Spline,
    UnknownEntity,
)
from cadfeatures.domain.result import (
    AnalysisResult,
    BoundingBox,
    DrawingStats,
    HoleCandidate,
    HoleGroup,
    HoleSummary,
    MachiningSummary,
)

__all__: list[str] = [
    # Enums and constants
    "EntityKind",
    "DEFAULT_LAYER",
    # Entities
    "Point",
    "Circle",
    "Arc",
    "Line",
    "Polyline",
    "Spline",
    "UnknownEntity",
    "DrawingEntity",
    # Results
    "HoleCandidate",
    "BoundingBox",
    "HoleGroup",
    "HoleSummary",
    "MachiningSummary",
    "DrawingStats",
    "AnalysisResult",
]
