"""Hole filtering and grouping.

Circles outside the diameter window are dropped, the rest are bucketed by
their diameter rounded to the grouping tolerance. ``5.96`` and ``6.04``
both land in the ``6.0`` bucket at the default 0.1 mm tolerance, while
``5.4`` and ``6.0`` stay apart.
"""

from collections.abc import Iterable
from decimal import ROUND_FLOOR, Decimal

from cadfeatures.config.settings import (
    DEFAULT_DIAMETER_TOLERANCE,
    DEFAULT_MAX_DIAMETER,
    DEFAULT_MIN_DIAMETER,
)
from cadfeatures.domain import HoleCandidate


def filter_holes(
    candidates: Iterable[HoleCandidate],
    min_diameter: float = DEFAULT_MIN_DIAMETER,
    max_diameter: float = DEFAULT_MAX_DIAMETER,
) -> list[HoleCandidate]:
    """Keep candidates whose diameter lies in ``[min_diameter, max_diameter]``.

    Args:
        candidates: Hole candidates in detection order
        min_diameter: Smallest kept diameter (inclusive)
        max_diameter: Largest kept diameter (inclusive)

    Returns:
        Kept candidates, order preserved
    """
    return [c for c in candidates if min_diameter <= c.diameter <= max_diameter]


def round_diameter(diameter: float, tolerance: float = DEFAULT_DIAMETER_TOLERANCE) -> float:
    """Round a diameter to the nearest multiple of ``tolerance``, halves up.

    Works on the decimal text of both values, so a diameter written as
    ``5.05`` is an exact tie and goes to ``5.1``.

    Args:
        diameter: Raw diameter
        tolerance: Rounding step, must be positive

    Returns:
        Rounded diameter, free of float noise (``6.0`` rather than
        ``6.000000000000001``)

    Raises:
        ValueError: If tolerance is not positive
    """
    if tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")

    step = Decimal(str(tolerance))
    steps = (Decimal(str(diameter)) / step + Decimal("0.5")).to_integral_value(ROUND_FLOOR)
    return float(steps * step)


def group_holes(
    candidates: Iterable[HoleCandidate],
    min_diameter: float = DEFAULT_MIN_DIAMETER,
    max_diameter: float = DEFAULT_MAX_DIAMETER,
    tolerance: float = DEFAULT_DIAMETER_TOLERANCE,
) -> dict[float, list[HoleCandidate]]:
    """Filter candidates by diameter and group them by rounded diameter.

    Args:
        candidates: Hole candidates, typically unfiltered classifier output
        min_diameter: Smallest kept diameter (inclusive)
        max_diameter: Largest kept diameter (inclusive)
        tolerance: Rounding step used as grouping key

    Returns:
        Mapping of rounded diameter to its holes, keys in first-seen order.
        Empty when nothing passes the filter.
    """
    groups: dict[float, list[HoleCandidate]] = {}

    for candidate in filter_holes(candidates, min_diameter, max_diameter):
        key = round_diameter(candidate.diameter, tolerance)
        groups.setdefault(key, []).append(candidate)

    return groups
