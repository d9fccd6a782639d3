"""Exact convex hull using the Graham scan.

Runs in O(n log n): the coordinates are sorted by polar angle around the
lowest coordinate, then a stack keeps only counter-clockwise turns.

Reference: http://en.wikipedia.org/wiki/Graham_scan
"""

from functools import cmp_to_key
from typing import Optional

from ..core.coordinate import Coordinate
from ..core.errors import require
from ..core.geometry_utils import as_coordinates, dedupe
from ..core.precision import PrecisionModel, resolve_precision
from ..core.predicates import distance, orientation
from ..core.types import Orientation
from .result import HullResult


def _polar_comparator(origin: Coordinate, precision: PrecisionModel):
    """Order coordinates by polar angle around ``origin``, nearer first on ties."""

    def compare(first: Coordinate, second: Coordinate) -> int:
        if first == second:
            return 0

        turn = orientation(origin, first, second, precision)
        if turn is Orientation.COUNTER_CLOCKWISE:
            return -1
        if turn is Orientation.CLOCKWISE:
            return 1
        return -1 if distance(origin, first) < distance(origin, second) else 1

    return compare


class ExactHullBuilder:
    """Computes the exact convex hull of a coordinate set.

    Duplicate coordinates (including the closing coordinate of a ring) are
    ignored. The hull is returned counter-clockwise from the lowest
    coordinate and closed when it has at least three vertices. Collinear
    input degenerates to its two extreme coordinates.

    Args:
        source: Coordinates (any form accepted by ``as_coordinates``)
        precision: Precision model (default floating model if None)

    Raises:
        NullArgumentError: If source is None
    """

    def __init__(self, source, precision: Optional[PrecisionModel] = None):
        self._source = as_coordinates(require(source, 'source'), 'source')
        self._precision = resolve_precision(precision)
        self._result: Optional[HullResult] = None

    @property
    def source(self):
        return self._source

    @property
    def precision(self) -> PrecisionModel:
        return self._precision

    @property
    def result(self) -> HullResult:
        if self._result is None:
            self.compute()
        return self._result

    def compute(self) -> HullResult:
        """Compute (or recompute) the convex hull."""
        self._result = self._compute()
        return self._result

    def _compute(self) -> HullResult:
        coordinates = dedupe(self._source)
        if len(coordinates) < 3:
            return HullResult(tuple(coordinates))

        # lowest coordinate, leftmost on ties
        pivot_index = min(range(len(coordinates)), key=lambda i: (coordinates[i].y, coordinates[i].x))
        coordinates[0], coordinates[pivot_index] = coordinates[pivot_index], coordinates[0]
        pivot = coordinates[0]

        candidates = sorted(coordinates[1:], key=cmp_to_key(_polar_comparator(pivot, self._precision)))

        stack = [pivot]
        for candidate in candidates:
            while len(stack) >= 2 and orientation(stack[-2], stack[-1], candidate, self._precision) is not Orientation.COUNTER_CLOCKWISE:
                stack.pop()
            stack.append(candidate)

        return HullResult.closed(stack)


def convex_hull(source, precision: Optional[PrecisionModel] = None) -> HullResult:
    """Compute the exact convex hull of a coordinate set or polygon.

    Args:
        source: Coordinates, or a Shapely Polygon whose shell is used
        precision: Precision model (default floating model if None)

    Returns:
        HullResult, closed when the hull has at least three vertices

    Raises:
        NullArgumentError: If source is None

    Examples:
        >>> hull = convex_hull([(0, 0), (2, 0), (1, 1), (2, 2), (0, 2)])
        >>> [c.xy for c in hull.vertices]
        [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]
    """
    return ExactHullBuilder(source, precision).result


__all__ = [
    'ExactHullBuilder',
    'convex_hull',
]
