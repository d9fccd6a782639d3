"""Geometric predicates.

Every turn-direction and on-segment decision in geomforge goes through this
module, evaluated against one :class:`~geomforge.core.precision.PrecisionModel`.
Two calls with the same coordinates and the same model always agree.
"""

import math
from typing import Optional, Sequence

from .coordinate import Coordinate, as_coordinate
from .precision import PrecisionModel, resolve_precision
from .types import Orientation


def orientation(
    origin,
    first,
    second,
    precision: Optional[PrecisionModel] = None
) -> Orientation:
    """Return the turn direction of ``origin -> first -> second``.

    The coordinates are snapped to ``precision`` and the sign of
    ``cross(first - origin, second - origin)`` is taken. The turn is collinear
    when the perpendicular offset implied by the cross product is within the
    model's length tolerance.

    Args:
        origin: Coordinate the two vectors start from
        first: End of the first vector
        second: End of the second vector
        precision: Precision model (default floating model if None)

    Returns:
        Orientation tag

    Examples:
        >>> orientation((0, 0), (1, 0), (1, 1))
        <Orientation.COUNTER_CLOCKWISE: 'counter_clockwise'>
        >>> orientation((0, 0), (1, 1), (2, 2))
        <Orientation.COLLINEAR: 'collinear'>
    """
    precision = resolve_precision(precision)
    origin = precision.make_precise(as_coordinate(origin))
    first = precision.make_precise(as_coordinate(first))
    second = precision.make_precise(as_coordinate(second))

    u = first - origin
    v = second - origin
    det = u.cross_z(v)

    scale = max(math.hypot(u.x, u.y), math.hypot(v.x, v.y))
    if abs(det) <= precision.tolerance(origin, first, second) * scale:
        return Orientation.COLLINEAR

    if det > 0:
        return Orientation.COUNTER_CLOCKWISE
    return Orientation.CLOCKWISE


def distance(first, second, three_dimensional: bool = False) -> float:
    """Euclidean distance between two coordinates, XY only by default."""
    first = as_coordinate(first)
    second = as_coordinate(second)
    if first == second:
        return 0.0
    if three_dimensional:
        return math.sqrt(
            (first.x - second.x) ** 2 + (first.y - second.y) ** 2 + (first.z - second.z) ** 2
        )
    return math.hypot(first.x - second.x, first.y - second.y)


def segment_distance(start, end, coordinate) -> float:
    """Distance from ``coordinate`` to the closed segment ``start``-``end``."""
    start = as_coordinate(start)
    end = as_coordinate(end)
    coordinate = as_coordinate(coordinate)

    direction = end - start
    length_sq = direction.x * direction.x + direction.y * direction.y
    if length_sq == 0:
        return distance(start, coordinate)

    t = (coordinate - start).dot(direction) / length_sq
    t = max(0.0, min(1.0, t))
    projection = Coordinate(start.x + t * direction.x, start.y + t * direction.y)
    return distance(projection, coordinate)


def segment_contains(
    start,
    end,
    coordinate,
    precision: Optional[PrecisionModel] = None
) -> bool:
    """Check whether ``coordinate`` lies on the segment ``start``-``end``.

    Args:
        start: First end point of the segment
        end: Second end point of the segment
        coordinate: Coordinate to test
        precision: Precision model (default floating model if None)

    Returns:
        True if the coordinate is an end point or lies within tolerance of
        the segment
    """
    start = as_coordinate(start)
    end = as_coordinate(end)
    coordinate = as_coordinate(coordinate)
    if not (start.is_valid and end.is_valid and coordinate.is_valid):
        return False

    precision = resolve_precision(precision)

    # empty segment
    if start.xy == end.xy:
        return start.xy == coordinate.xy

    if coordinate.xy == start.xy or coordinate.xy == end.xy:
        return True

    tol = precision.tolerance(start, end, coordinate)
    if not (min(start.x, end.x) - tol <= coordinate.x <= max(start.x, end.x) + tol
            and min(start.y, end.y) - tol <= coordinate.y <= max(start.y, end.y) + tol):
        return False

    return segment_distance(start, end, coordinate) <= tol


def signed_area(ring: Sequence[Coordinate]) -> float:
    """Shoelace area of a ring, positive when counter-clockwise.

    The ring may be open or closed.
    """
    count = len(ring)
    if count < 3:
        return 0.0
    total = 0.0
    for i in range(count):
        a = ring[i]
        b = ring[(i + 1) % count]
        total += a.x * b.y - b.x * a.y
    return total / 2.0


def is_convex_ring(
    ring: Sequence[Coordinate],
    precision: Optional[PrecisionModel] = None
) -> bool:
    """Check that the vertices of an open ring never turn both ways."""
    count = len(ring)
    if count < 3:
        return False

    seen = set()
    for i in range(count):
        turn = orientation(ring[i], ring[(i + 1) % count], ring[(i + 2) % count], precision)
        if turn is not Orientation.COLLINEAR:
            seen.add(turn)
    return len(seen) == 1


__all__ = [
    'orientation',
    'distance',
    'segment_distance',
    'segment_contains',
    'signed_area',
    'is_convex_ring',
]
