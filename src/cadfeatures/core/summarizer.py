"""Result summarizer: assembles the analysis result and its text digest."""

from collections.abc import Mapping, Sequence
from decimal import ROUND_HALF_UP, Decimal

from cadfeatures.config.settings import COMPLEX_POLYLINE_THRESHOLD
from cadfeatures.core.classifier import ClassifierOutput
from cadfeatures.domain import (
    AnalysisResult,
    DrawingStats,
    HoleCandidate,
    HoleGroup,
    HoleSummary,
    MachiningSummary,
)

NOTHING_DETECTED = "No entities detected"
SECTION_SEPARATOR = " | "


def has_complex_shapes(
    arc_count: int,
    spline_count: int,
    polyline_count: int,
    polyline_threshold: int = COMPLEX_POLYLINE_THRESHOLD,
) -> bool:
    """Decide whether a drawing needs more than straight cuts.

    Any arc or spline counts; polylines count only above the threshold.
    """
    return arc_count > 0 or spline_count > 0 or polyline_count > polyline_threshold


def summarize(
    classified: ClassifierOutput,
    grouped_holes: Mapping[float, Sequence[HoleCandidate]],
    polyline_threshold: int = COMPLEX_POLYLINE_THRESHOLD,
) -> AnalysisResult:
    """Build the analysis result from classifier and grouper output.

    Hole count and diameter range cover every detected circle, filtered or
    not; only ``holes.groups`` reflects the diameter filter.

    Args:
        classified: Output of ``classify``
        grouped_holes: Output of ``group_holes``
        polyline_threshold: Polyline count above which shapes are complex

    Returns:
        Successful analysis result
    """
    candidates = classified.hole_candidates
    diameters = [c.diameter for c in candidates]

    holes = HoleSummary(
        count=len(candidates),
        candidates=candidates,
        diameter_min=min(diameters) if diameters else None,
        diameter_max=max(diameters) if diameters else None,
        groups=tuple(
            HoleGroup(diameter=diameter, holes=tuple(group))
            for diameter, group in grouped_holes.items()
        ),
    )
    machining = MachiningSummary(
        has_complex_shapes=has_complex_shapes(
            classified.arc_count,
            classified.spline_count,
            classified.polyline_count,
            polyline_threshold,
        ),
        arc_count=classified.arc_count,
        polyline_count=classified.polyline_count,
        spline_count=classified.spline_count,
    )
    return AnalysisResult(
        success=True,
        holes=holes,
        machining=machining,
        bounding_box=classified.bounding_box,
        stats=DrawingStats(
            total_entities=classified.total_entities,
            layers=classified.layers,
        ),
    )


def format_diameter(diameter: float) -> str:
    """Format a diameter with at least one decimal (6 -> "6.0", 6.0005 -> "6.0005").

    Uses the shortest text that reads back as the same float, so distinct
    bucket keys never print alike.
    """
    text = f"{Decimal(repr(float(diameter))):f}"
    return text if "." in text else text + ".0"


def format_length(value: float) -> str:
    """Format a length in whole millimetres, halves rounded up (12.5 -> "13")."""
    return f"{Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP):f}"


def describe(result: AnalysisResult) -> str:
    """Render a one-line digest of an analysis result.

    Sections, in order and only when non-empty:
    - Holes: each diameter group as ``<count>×Ø<diameter>mm``
    - Machining: non-zero arc and spline counts
    - Dimensions: bounding box ``<width>×<height>mm``

    Examples:
        "Holes: 2×Ø6.0mm, 1×Ø50.0mm | Dimensions: 125×6mm"

    Returns:
        Digest string, ``"Error: ..."`` for failed results, and
        ``NOTHING_DETECTED`` when no section has content
    """
    if not result.success:
        return f"Error: {result.error}"

    parts: list[str] = []

    if result.holes.groups:
        groups = ", ".join(
            f"{group.count}×Ø{format_diameter(group.diameter)}mm"
            for group in result.holes.groups
        )
        parts.append(f"Holes: {groups}")

    details: list[str] = []
    if result.machining.arc_count > 0:
        details.append(f"{result.machining.arc_count} arcs")
    if result.machining.spline_count > 0:
        details.append(f"{result.machining.spline_count} splines")
    if details:
        parts.append(f"Machining: {', '.join(details)}")

    if result.bounding_box is not None:
        box = result.bounding_box
        parts.append(f"Dimensions: {format_length(box.width)}×{format_length(box.height)}mm")

    return SECTION_SEPARATOR.join(parts) if parts else NOTHING_DETECTED
