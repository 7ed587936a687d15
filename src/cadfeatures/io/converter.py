"""Converters from parser output to domain entities.

Two parser shapes are supported:
- ezdxf entities, as loaded by ``DrawingReader``
- Plain mapping records, as emitted by JSON-speaking DXF parsers::

    {"type": "CIRCLE", "center": {"x": 10, "y": 5}, "radius": 3, "layer": "DRILL"}

Both apply the same default-on-missing-field policy: a missing center
becomes the origin, a missing or non-numeric coordinate or radius becomes
0.0, and a missing or empty layer becomes "0". A malformed entity never
raises; it is converted with defaults so one bad entity cannot abort the
analysis of an otherwise valid drawing.
"""

import math
from collections.abc import Iterable, Mapping
from typing import Any

from ezdxf.entities import DXFGraphic
from ezdxf.lldxf.const import DXFError

from cadfeatures.domain import (
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

POLYLINE_TYPES = frozenset({"POLYLINE", "LWPOLYLINE"})


def entity_kind(entity_type: str) -> EntityKind:
    """Map a parser entity type name to its kind (LWPOLYLINE -> POLYLINE)."""
    entity_type = entity_type.upper()
    if entity_type in POLYLINE_TYPES:
        return EntityKind.POLYLINE
    try:
        return EntityKind(entity_type)
    except ValueError:
        return EntityKind.UNKNOWN


def _number(value: Any) -> float:
    """Coerce a coordinate or radius, 0.0 when missing or not a finite number."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    value = float(value)
    return value if math.isfinite(value) else 0.0


def _layer(value: Any) -> str:
    return value if isinstance(value, str) and value else DEFAULT_LAYER


def _point(value: Any) -> Point:
    """Build a point from a mapping ``{"x", "y"}`` or an ``(x, y[, z])`` sequence."""
    if isinstance(value, Mapping):
        return Point(_number(value.get("x")), _number(value.get("y")))

    if value is not None and not isinstance(value, str):
        try:
            coords = list(value)
        except TypeError:
            return Point()
        if len(coords) >= 2:
            return Point(_number(coords[0]), _number(coords[1]))

    return Point()


def _points(values: Any) -> tuple[Point, ...]:
    if values is None or isinstance(values, str | Mapping):
        return ()
    try:
        return tuple(_point(v) for v in values)
    except TypeError:
        return ()


def record_to_entity(record: Mapping[str, Any]) -> DrawingEntity:
    """Convert a plain parser record to a domain entity.

    Args:
        record: Mapping with at least a ``type`` key

    Returns:
        Domain entity; unsupported types become ``UnknownEntity``
    """
    entity_type = str(record.get("type") or "").upper()
    kind = entity_kind(entity_type)
    layer = _layer(record.get("layer"))

    if kind in (EntityKind.CIRCLE, EntityKind.ARC):
        cls = Circle if kind == EntityKind.CIRCLE else Arc
        return cls(
            center=_point(record.get("center")),
            radius=_number(record.get("radius")),
            layer=layer,
        )

    if kind == EntityKind.LINE:
        if record.get("vertices") is not None:
            points = _points(record.get("vertices"))
        else:
            points = _points(
                [p for p in (record.get("start"), record.get("end")) if p is not None]
            )
        return Line(points=points, layer=layer)

    if kind == EntityKind.POLYLINE:
        return Polyline(vertices=_points(record.get("vertices")), layer=layer)

    if kind == EntityKind.SPLINE:
        return Spline(layer=layer)

    return UnknownEntity(source_type=entity_type, layer=layer)


def records_to_entities(records: Iterable[Mapping[str, Any]]) -> list[DrawingEntity]:
    """Convert a sequence of parser records, keeping their order."""
    return [record_to_entity(record) for record in records]


def _polyline_vertices(entity: DXFGraphic) -> tuple[Point, ...]:
    try:
        if entity.dxftype() == "LWPOLYLINE":
            return _points(entity.get_points("xy"))  # type: ignore[attr-defined]
        return _points(entity.points())  # type: ignore[attr-defined]
    except (DXFError, AttributeError, TypeError, ValueError):
        return ()


def ezdxf_entity_to_domain(entity: DXFGraphic) -> DrawingEntity:
    """Convert an ezdxf graphic entity to a domain entity.

    Args:
        entity: Entity from an ezdxf layout (e.g. model space)

    Returns:
        Domain entity; unsupported types become ``UnknownEntity``
    """
    entity_type = entity.dxftype()
    kind = entity_kind(entity_type)
    dxf = entity.dxf
    layer = _layer(dxf.get("layer"))

    if kind in (EntityKind.CIRCLE, EntityKind.ARC):
        cls = Circle if kind == EntityKind.CIRCLE else Arc
        return cls(
            center=_point(dxf.get("center")),
            radius=_number(dxf.get("radius")),
            layer=layer,
        )

    if kind == EntityKind.LINE:
        endpoints = [p for p in (dxf.get("start"), dxf.get("end")) if p is not None]
        return Line(points=_points(endpoints), layer=layer)

    if kind == EntityKind.POLYLINE:
        return Polyline(vertices=_polyline_vertices(entity), layer=layer)

    if kind == EntityKind.SPLINE:
        return Spline(layer=layer)

    return UnknownEntity(source_type=entity_type, layer=layer)
