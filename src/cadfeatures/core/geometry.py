"""Bounding-box arithmetic.

Boxes are immutable: every function returns a new ``BoundingBox`` and
treats ``None`` as the empty box (no coordinate seen yet). Widening is
monotonic, a box never shrinks.

All functions are pure and stateless.
"""

from collections.abc import Iterable

from cadfeatures.domain import BoundingBox, Point


def expand_to_point(box: BoundingBox | None, x: float, y: float) -> BoundingBox:
    """Widen a box so that it contains a point.

    Args:
        box: Current box, or None if nothing has been seen yet
        x: X coordinate
        y: Y coordinate

    Returns:
        Smallest box containing both ``box`` and the point

    Examples:
        >>> expand_to_point(None, 1.0, 2.0)
        BoundingBox(min_x=1.0, min_y=2.0, max_x=1.0, max_y=2.0)
    """
    if box is None:
        return BoundingBox(min_x=x, min_y=y, max_x=x, max_y=y)

    return BoundingBox(
        min_x=min(box.min_x, x),
        min_y=min(box.min_y, y),
        max_x=max(box.max_x, x),
        max_y=max(box.max_y, y),
    )


def expand_to_circle(
    box: BoundingBox | None, center: Point, radius: float
) -> BoundingBox:
    """Widen a box by ``center ± radius`` on both axes.

    A negative radius covers the same square as its absolute value.

    Args:
        box: Current box, or None
        center: Circle or arc center
        radius: Radius

    Returns:
        Widened box
    """
    r = abs(radius)
    box = expand_to_point(box, center.x - r, center.y - r)
    return expand_to_point(box, center.x + r, center.y + r)


def expand_to_points(box: BoundingBox | None, points: Iterable[Point]) -> BoundingBox | None:
    """Widen a box by every point of a vertex sequence.

    Returns:
        Widened box, or the input unchanged when ``points`` is empty
    """
    for point in points:
        box = expand_to_point(box, point.x, point.y)
    return box
