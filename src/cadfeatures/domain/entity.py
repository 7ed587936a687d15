"""Drawing entity types consumed by the feature-extraction engine.

This module defines the closed set of 2D entities the engine understands:
- Point: A plain 2D coordinate
- Circle, Arc: Center/radius entities
- Line, Polyline: Vertex-sequence entities
- Spline: A curve whose control points are not needed for feature purposes
- UnknownEntity: Any other entity kind the parser emitted

Every entity carries a layer. Missing geometric fields are filled with
defaults by the adapter in ``cadfeatures.io.converter`` before an entity is
constructed, so all fields here are required and always valid numbers.
"""

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_LAYER = "0"


class EntityKind(str, Enum):
    """Entity discriminator, named after the DXF entity type."""

    CIRCLE = "CIRCLE"
    ARC = "ARC"
    LINE = "LINE"
    POLYLINE = "POLYLINE"
    SPLINE = "SPLINE"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D drawing space.

    Attributes:
        x: X coordinate in drawing units (mm)
        y: Y coordinate in drawing units (mm)
    """

    x: float = 0.0
    y: float = 0.0

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Circle:
    """A full circle, the raw material for hole detection."""

    center: Point = ORIGIN
    radius: float = 0.0
    layer: str = DEFAULT_LAYER

    @property
    def kind(self) -> EntityKind:
        return EntityKind.CIRCLE


@dataclass(frozen=True, slots=True)
class Arc:
    """A circular arc. Start and end angles are not tracked."""

    center: Point = ORIGIN
    radius: float = 0.0
    layer: str = DEFAULT_LAYER

    @property
    def kind(self) -> EntityKind:
        return EntityKind.ARC


@dataclass(frozen=True, slots=True)
class Line:
    """A straight line given by its points (start and end)."""

    points: tuple[Point, ...] = field(default_factory=tuple)
    layer: str = DEFAULT_LAYER

    @property
    def kind(self) -> EntityKind:
        return EntityKind.LINE


@dataclass(frozen=True, slots=True)
class Polyline:
    """A polyline; covers both POLYLINE and LWPOLYLINE source entities."""

    vertices: tuple[Point, ...] = field(default_factory=tuple)
    layer: str = DEFAULT_LAYER

    @property
    def kind(self) -> EntityKind:
        return EntityKind.POLYLINE


@dataclass(frozen=True, slots=True)
class Spline:
    """A spline curve."""

    layer: str = DEFAULT_LAYER

    @property
    def kind(self) -> EntityKind:
        return EntityKind.SPLINE


@dataclass(frozen=True, slots=True)
class UnknownEntity:
    """Any entity type the engine does not interpret (TEXT, HATCH, ...).

    Attributes:
        source_type: Entity type name as reported by the parser
        layer: Layer name
    """

    source_type: str = ""
    layer: str = DEFAULT_LAYER

    @property
    def kind(self) -> EntityKind:
        return EntityKind.UNKNOWN


DrawingEntity = Circle | Arc | Line | Polyline | Spline | UnknownEntity
