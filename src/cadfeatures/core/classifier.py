"""Entity classifier: the first stage of feature extraction.

Walks the entity list once and records:
- Hole candidates (one per circle, radius carried as-is)
- Arc, polyline and spline counts
- The running bounding box of every coordinate-bearing entity
- The set of layers seen

The classifier records and never judges: degenerate entities (zero or
negative radius, empty vertex lists) are counted like any other, and
filtering is left to the hole grouper.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from cadfeatures.core.geometry import expand_to_circle, expand_to_points
from cadfeatures.domain import (
    Arc,
    BoundingBox,
    Circle,
    DrawingEntity,
    HoleCandidate,
    Line,
    Polyline,
    Spline,
)
from cadfeatures.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ClassifierOutput:
    """Everything the classifier learned from one entity list.

    Attributes:
        hole_candidates: One candidate per circle, in input order
        arc_count: Number of arcs
        polyline_count: Number of polylines (lines are not counted)
        spline_count: Number of splines
        bounding_box: Extent of all coordinate-bearing entities, or None
        layers: Distinct layer names
        total_entities: Length of the input sequence
    """

    hole_candidates: tuple[HoleCandidate, ...] = field(default_factory=tuple)
    arc_count: int = 0
    polyline_count: int = 0
    spline_count: int = 0
    bounding_box: BoundingBox | None = None
    layers: frozenset[str] = field(default_factory=frozenset)
    total_entities: int = 0


def classify(entities: Sequence[DrawingEntity]) -> ClassifierOutput:
    """Classify drawing entities in a single pass.

    Dispatch per entity type:
    - Circle: hole candidate, box widened by center ± radius
    - Arc: arc count, box widened by center ± radius
    - Polyline: polyline count, box widened by every vertex
    - Line: box widened by every point, no counter
    - Spline: spline count, box untouched
    - Anything else: only its layer and the total count

    Args:
        entities: Drawing entities, possibly empty

    Returns:
        Frozen classifier output; the input is not modified
    """
    candidates: list[HoleCandidate] = []
    layers: set[str] = set()
    arc_count = 0
    polyline_count = 0
    spline_count = 0
    box: BoundingBox | None = None

    for entity in entities:
        layers.add(entity.layer)

        if isinstance(entity, Circle):
            candidates.append(
                HoleCandidate(
                    x=entity.center.x,
                    y=entity.center.y,
                    radius=entity.radius,
                    layer=entity.layer,
                )
            )
            box = expand_to_circle(box, entity.center, entity.radius)
        elif isinstance(entity, Arc):
            arc_count += 1
            box = expand_to_circle(box, entity.center, entity.radius)
        elif isinstance(entity, Polyline):
            polyline_count += 1
            box = expand_to_points(box, entity.vertices)
        elif isinstance(entity, Line):
            box = expand_to_points(box, entity.points)
        elif isinstance(entity, Spline):
            spline_count += 1
        # UnknownEntity: layer and total only

    output = ClassifierOutput(
        hole_candidates=tuple(candidates),
        arc_count=arc_count,
        polyline_count=polyline_count,
        spline_count=spline_count,
        bounding_box=box,
        layers=frozenset(layers),
        total_entities=len(entities),
    )
    logger.debug(
        "Entities classified",
        total=output.total_entities,
        circles=len(output.hole_candidates),
        arcs=arc_count,
        polylines=polyline_count,
        splines=spline_count,
        layers=len(layers),
    )
    return output
