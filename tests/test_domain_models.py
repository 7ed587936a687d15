"""Tests for domain models to verify they work correctly."""

import dataclasses

import pytest

from cadfeatures.domain import (
    DEFAULT_LAYER,
    AnalysisResult,
    Arc,
    BoundingBox,
    Circle,
    EntityKind,
    HoleCandidate,
    HoleGroup,
    Line,
    Point,
    Polyline,
    Spline,
    UnknownEntity,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_defaults_to_origin(self) -> None:
        """Test that a point without coordinates is the origin."""
        assert Point() == Point(0.0, 0.0)

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.5, -2.0).to_tuple() == (1.5, -2.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 300.0  # type: ignore[misc]


class TestEntities:
    """Tests for drawing entity variants."""

    def test_every_entity_defaults_to_layer_zero(self) -> None:
        """Test that all entity kinds fall back to layer "0"."""
        for entity in (Circle(), Arc(), Line(), Polyline(), Spline(), UnknownEntity()):
            assert entity.layer == DEFAULT_LAYER == "0"

    def test_entity_kinds(self) -> None:
        """Test the discriminator of each variant."""
        assert Circle().kind == EntityKind.CIRCLE
        assert Arc().kind == EntityKind.ARC
        assert Line().kind == EntityKind.LINE
        assert Polyline().kind == EntityKind.POLYLINE
        assert Spline().kind == EntityKind.SPLINE
        assert UnknownEntity(source_type="TEXT").kind == EntityKind.UNKNOWN

    def test_circle_defaults(self) -> None:
        """Test that a bare circle sits at the origin with zero radius."""
        circle = Circle()
        assert circle.center == Point(0.0, 0.0)
        assert circle.radius == 0.0

    def test_entities_immutable(self) -> None:
        """Test that entities cannot be modified after construction."""
        polyline = Polyline(vertices=(Point(0, 0), Point(1, 1)))
        with pytest.raises(dataclasses.FrozenInstanceError):
            polyline.layer = "CUT"  # type: ignore[misc]


class TestHoleCandidate:
    """Tests for HoleCandidate class."""

    def test_diameter_is_twice_radius(self) -> None:
        """Test diameter derivation."""
        hole = HoleCandidate(x=10.0, y=20.0, radius=2.5, layer="DRILL")
        assert hole.diameter == 5.0

    def test_to_dict_includes_diameter(self) -> None:
        """Test serialization."""
        data = HoleCandidate(x=1.0, y=2.0, radius=3.0, layer="0").to_dict()
        assert data == {"x": 1.0, "y": 2.0, "radius": 3.0, "diameter": 6.0, "layer": "0"}


class TestBoundingBox:
    """Tests for BoundingBox class."""

    def test_width_and_height(self) -> None:
        """Test derived dimensions."""
        box = BoundingBox(min_x=-10.0, min_y=5.0, max_x=90.0, max_y=45.0)
        assert box.width == 100.0
        assert box.height == 40.0

    def test_contains(self) -> None:
        """Test point containment, edges included."""
        box = BoundingBox(min_x=0.0, min_y=0.0, max_x=10.0, max_y=10.0)
        assert box.contains(5.0, 5.0)
        assert box.contains(10.0, 0.0)
        assert not box.contains(10.1, 5.0)


class TestAnalysisResult:
    """Tests for AnalysisResult class."""

    def test_failure_shape(self) -> None:
        """Test that a failure result carries the message and empty sections."""
        result = AnalysisResult.failure("Invalid or empty drawing")

        assert result.success is False
        assert result.error == "Invalid or empty drawing"
        assert result.holes.count == 0
        assert result.holes.candidates == ()
        assert result.holes.diameter_min is None
        assert result.holes.diameter_max is None
        assert result.machining.has_complex_shapes is False
        assert result.machining.arc_count == 0
        assert result.bounding_box is None
        assert result.stats.total_entities == 0
        assert result.stats.layers == frozenset()

    def test_failure_never_has_empty_error(self) -> None:
        """Test that an empty parser message is replaced."""
        assert AnalysisResult.failure("").error

    def test_to_dict(self) -> None:
        """Test JSON-compatible serialization."""
        hole = HoleCandidate(x=0.0, y=0.0, radius=3.0, layer="0")
        result = AnalysisResult.failure("boom")
        result = dataclasses.replace(
            result,
            success=True,
            error=None,
            holes=dataclasses.replace(
                result.holes,
                count=1,
                candidates=(hole,),
                groups=(HoleGroup(diameter=6.0, holes=(hole,)),),
            ),
            bounding_box=BoundingBox(-3.0, -3.0, 3.0, 3.0),
        )

        data = result.to_dict()

        assert data["success"] is True
        assert data["holes"]["count"] == 1
        assert data["holes"]["groups"] == [{"diameter": 6.0, "count": 1}]
        assert data["bounding_box"]["width"] == 6.0
        assert data["stats"] == {"total_entities": 0, "layers": []}
