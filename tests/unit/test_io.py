"""Unit tests for the drawing I/O layer.

Tests for DrawingReader and the converter functions.
"""

import base64
import io
from pathlib import Path
from unittest.mock import MagicMock

import ezdxf
import pytest

from cadfeatures.domain import (
    Arc,
    Circle,
    EntityKind,
    Line,
    Point,
    Polyline,
    Spline,
    UnknownEntity,
)
from cadfeatures.exceptions import DrawingFormatError, DrawingLoadError
from cadfeatures.io.converter import (
    entity_kind,
    ezdxf_entity_to_domain,
    record_to_entity,
    records_to_entities,
)
from cadfeatures.io.reader import DrawingReader


def _sample_doc():
    doc = ezdxf.new()
    msp = doc.modelspace()
    msp.add_lwpolyline([(0, 0), (600, 0), (600, 400), (0, 400)], close=True,
                       dxfattribs={"layer": "CONTOUR"})
    msp.add_circle((50, 50), 2.5, dxfattribs={"layer": "DRILL"})
    msp.add_circle((550, 50), 2.5, dxfattribs={"layer": "DRILL"})
    msp.add_arc((300, 400), 20, 180, 360)
    msp.add_line((0, 200), (600, 200))
    msp.add_text("PANEL A")
    return doc


def _dxf_text(doc) -> str:
    stream = io.StringIO()
    doc.write(stream)
    return stream.getvalue()


@pytest.mark.parametrize(
    ("entity_type", "expected"),
    [
        ("CIRCLE", EntityKind.CIRCLE),
        ("arc", EntityKind.ARC),
        ("LWPOLYLINE", EntityKind.POLYLINE),
        ("POLYLINE", EntityKind.POLYLINE),
        ("TEXT", EntityKind.UNKNOWN),
        ("", EntityKind.UNKNOWN),
    ],
)
def test_entity_kind(entity_type, expected):
    """Parser type names map onto the closed set of entity kinds."""
    assert entity_kind(entity_type) == expected


class TestRecordToEntity:
    """Tests for converting plain parser records."""

    def test_circle(self):
        """A complete circle record keeps its geometry and layer."""
        entity = record_to_entity(
            {"type": "CIRCLE", "center": {"x": 10, "y": 5}, "radius": 3, "layer": "DRILL"}
        )

        assert entity == Circle(center=Point(10.0, 5.0), radius=3.0, layer="DRILL")

    def test_circle_missing_fields_use_defaults(self):
        """A circle without center, radius or layer is filled with defaults."""
        assert record_to_entity({"type": "CIRCLE"}) == Circle(
            center=Point(0.0, 0.0), radius=0.0, layer="0"
        )

    def test_non_numeric_values_become_zero(self):
        """Non-numeric coordinates and radii are treated as missing."""
        entity = record_to_entity(
            {"type": "ARC", "center": {"x": "abc", "y": None}, "radius": float("nan")}
        )

        assert entity == Arc(center=Point(0.0, 0.0), radius=0.0)

    def test_type_is_case_insensitive(self):
        """Lower-case type names are accepted."""
        assert isinstance(record_to_entity({"type": "spline"}), Spline)

    def test_lwpolyline_and_polyline_are_the_same(self):
        """Both polyline variants map to Polyline."""
        vertices = [{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 10, "y": 10}]

        lw = record_to_entity({"type": "LWPOLYLINE", "vertices": vertices})
        heavy = record_to_entity({"type": "POLYLINE", "vertices": vertices})

        assert lw == heavy
        assert isinstance(lw, Polyline)
        assert len(lw.vertices) == 3

    def test_line_from_vertices_or_endpoints(self):
        """Lines accept a vertex list or start/end points."""
        from_vertices = record_to_entity(
            {"type": "LINE", "vertices": [{"x": 0, "y": 0}, {"x": 5, "y": 5}]}
        )
        from_endpoints = record_to_entity({"type": "LINE", "start": (0, 0), "end": (5, 5)})

        assert from_vertices == from_endpoints == Line(points=(Point(0, 0), Point(5, 5)))

    def test_polyline_with_garbage_vertices(self):
        """Malformed vertices become origin points instead of raising."""
        entity = record_to_entity({"type": "POLYLINE", "vertices": [{"x": 1}, 42, None]})

        assert entity.vertices == (Point(1.0, 0.0), Point(), Point())

    def test_unknown_type(self):
        """Unsupported types are kept as UnknownEntity with their layer."""
        entity = record_to_entity({"type": "HATCH", "layer": "FILL"})

        assert entity == UnknownEntity(source_type="HATCH", layer="FILL")

    def test_empty_layer_defaults_to_zero(self):
        """An empty layer name falls back to "0"."""
        assert record_to_entity({"type": "SPLINE", "layer": ""}).layer == "0"

    def test_records_to_entities_keeps_order(self):
        """Batch conversion keeps record order."""
        entities = records_to_entities([{"type": "SPLINE"}, {"type": "CIRCLE"}])

        assert [type(e) for e in entities] == [Spline, Circle]


class TestEzdxfEntityToDomain:
    """Tests for converting ezdxf entities."""

    def test_converts_supported_types(self):
        """Each ezdxf entity type maps to its domain counterpart."""
        entities = [ezdxf_entity_to_domain(e) for e in _sample_doc().modelspace()]

        assert [type(e) for e in entities] == [
            Polyline, Circle, Circle, Arc, Line, UnknownEntity,
        ]
        polyline, circle, _, arc, line, text = entities
        assert polyline.layer == "CONTOUR"
        assert len(polyline.vertices) == 4
        assert circle == Circle(center=Point(50.0, 50.0), radius=2.5, layer="DRILL")
        assert arc.radius == 20.0
        assert line.points == (Point(0.0, 200.0), Point(600.0, 200.0))
        assert text.source_type == "TEXT"

    def test_heavy_polyline_and_spline(self):
        """POLYLINE vertices are read and SPLINE is recognised."""
        doc = ezdxf.new()
        msp = doc.modelspace()
        msp.add_polyline2d([(0, 0), (10, 0), (10, 10)])
        msp.add_spline([(0, 0), (5, 5), (10, 0)])

        polyline, spline = (ezdxf_entity_to_domain(e) for e in msp)

        assert polyline == Polyline(vertices=(Point(0, 0), Point(10, 0), Point(10, 10)))
        assert isinstance(spline, Spline)

    def test_missing_attributes_use_defaults(self):
        """An entity without center or radius converts with defaults."""
        entity = MagicMock()
        entity.dxftype.return_value = "CIRCLE"
        entity.dxf.get.return_value = None

        assert ezdxf_entity_to_domain(entity) == Circle()


class TestDrawingReader:
    """Tests for DrawingReader class."""

    def test_read_file(self, tmp_path: Path):
        """Entities are read from model space in file order."""
        path = tmp_path / "panel.dxf"
        _sample_doc().saveas(path)

        entities = DrawingReader().read_file(path)

        assert len(entities) == 6
        assert sum(isinstance(e, Circle) for e in entities) == 2

    def test_read_missing_file(self, tmp_path: Path):
        """A missing file raises DrawingLoadError."""
        with pytest.raises(DrawingLoadError, match="file not found"):
            DrawingReader().read_file(tmp_path / "missing.dxf")

    def test_read_directory(self, tmp_path: Path):
        """A directory is not a drawing."""
        with pytest.raises(DrawingLoadError, match="not a file"):
            DrawingReader().read_file(tmp_path)

    def test_read_text(self):
        """DXF text content is parsed."""
        entities = DrawingReader().read_text(_dxf_text(_sample_doc()))

        assert len(entities) == 6

    def test_read_empty_text(self):
        """Empty content is a format error."""
        with pytest.raises(DrawingFormatError, match="empty document"):
            DrawingReader().read_text("   ")

    def test_read_invalid_text(self):
        """Content that is not DXF is a format error."""
        with pytest.raises(DrawingFormatError):
            DrawingReader().read_text("this is\nnot a drawing\n")

    def test_read_base64(self):
        """Base64 payloads are decoded then parsed."""
        payload = base64.b64encode(_dxf_text(_sample_doc()).encode("utf-8")).decode("ascii")

        entities = DrawingReader().read_base64(payload)

        assert len(entities) == 6

    def test_read_base64_keeps_non_ascii_layers(self):
        """UTF-8 drawings keep accented layer names."""
        doc = ezdxf.new("R2018")
        doc.layers.add("Perçage")
        doc.modelspace().add_circle((10, 10), 4, dxfattribs={"layer": "Perçage"})
        payload = base64.b64encode(_dxf_text(doc).encode("utf-8")).decode("ascii")

        entities = DrawingReader().read_base64(payload)

        assert entities == [Circle(center=Point(10.0, 10.0), radius=4.0, layer="Perçage")]

    def test_read_empty_base64(self):
        """A payload that decodes to nothing is a format error."""
        with pytest.raises(DrawingFormatError, match="empty document"):
            DrawingReader().read_base64("")

    def test_read_invalid_base64(self):
        """Undecodable payloads raise DrawingLoadError with the decode reason."""
        with pytest.raises(DrawingLoadError, match="base64 decoding failed"):
            DrawingReader().read_base64("not base64!!")

    def test_format_error_is_a_load_error(self):
        """Callers can catch every reader failure as DrawingLoadError."""
        assert issubclass(DrawingFormatError, DrawingLoadError)
