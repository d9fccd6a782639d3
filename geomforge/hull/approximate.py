"""Approximate convex hull using the Bentley-Faust-Preparata algorithm.

The algorithm runs in O(n) by splitting the X range into ``n // 2`` bins and
keeping only the lowest and highest coordinate of each bin before running a
monotone chain over the bin extremes. Coordinates between the retained
extremes of a bin can end up slightly outside the result, never further than
one bin width. Use :func:`geomforge.hull.exact.convex_hull` for the exact hull.

Reference: http://geomalgorithms.com/a11-_hull-2.html
"""

from typing import List, Optional

from ..core.errors import require
from ..core.geometry_utils import as_coordinates, dedupe
from ..core.precision import PrecisionModel, resolve_precision
from ..core.predicates import orientation
from ..core.types import Orientation
from .result import HullResult


class ApproximateHullBuilder:
    """Computes the approximate convex hull of a coordinate set.

    Inputs may lie outside the result by up to one bin width,
    ``(max_x - min_x) / (n // 2)``.

    The result is computed on first access of :attr:`result` and cached. The
    builder keeps a snapshot of the source, so later changes to the caller's
    sequence do not affect it. Instances are not meant to be shared across
    threads.

    Args:
        source: Coordinates (any form accepted by ``as_coordinates``)
        precision: Precision model (default floating model if None)

    Raises:
        NullArgumentError: If source is None

    Examples:
        >>> builder = ApproximateHullBuilder([(0, 0), (4, 0), (2, 1), (4, 4), (0, 4)])
        >>> [c.xy for c in builder.result]
        [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0), (0.0, 0.0)]
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
        """Compute (or recompute) the approximate hull."""
        self._result = self._compute()
        return self._result

    def _compute(self) -> HullResult:
        source = self._source
        precision = self._precision
        count = len(source)

        if count < 4:
            return HullResult(tuple(dedupe(source)))

        # indices of the min/max Y coordinates at the min and max X
        min_min = min_max = 0
        max_min = max_max = 0
        x_min = x_max = source[0].x

        for i in range(1, count):
            coordinate = source[i]
            if coordinate.x <= x_min:
                if coordinate.x < x_min:
                    x_min = coordinate.x
                    min_min = min_max = i
                elif coordinate.y < source[min_min].y:
                    min_min = i
                elif coordinate.y > source[min_max].y:
                    min_max = i
            if coordinate.x >= x_max:
                if coordinate.x > x_max:
                    x_max = coordinate.x
                    max_min = max_max = i
                elif coordinate.y < source[max_min].y:
                    max_min = i
                elif coordinate.y > source[max_max].y:
                    max_max = i

        # all coordinates on one vertical line
        if x_min == x_max:
            if min_max != min_min:
                return HullResult((source[min_min], source[min_max]))
            return HullResult((source[min_min],))

        bins = count // 2
        bin_min: List[Optional[int]] = [None] * (bins + 2)
        bin_max: List[Optional[int]] = [None] * (bins + 2)
        bin_min[0], bin_max[0] = min_min, min_max
        bin_min[bins + 1], bin_max[bins + 1] = max_min, max_max

        lower_left = source[min_min]
        lower_right = source[max_min]
        x_range = x_max - x_min

        for i, coordinate in enumerate(source):
            if coordinate.x == x_min or coordinate.x == x_max:
                continue

            turn = orientation(lower_left, lower_right, coordinate, precision)
            if turn is Orientation.COLLINEAR:
                continue

            index = min(int(bins * (coordinate.x - x_min) / x_range) + 1, bins)
            if turn is Orientation.CLOCKWISE:
                # below the lower line
                current = bin_min[index]
                if current is None or coordinate.y < source[current].y:
                    bin_min[index] = i
            else:
                current = bin_max[index]
                if current is None or coordinate.y > source[current].y:
                    bin_max[index] = i

        stack = []

        # lower chain, left to right
        for index in bin_min:
            if index is None:
                continue
            candidate = source[index]
            while len(stack) >= 2 and orientation(stack[-2], stack[-1], candidate, precision) is not Orientation.COUNTER_CLOCKWISE:
                stack.pop()
            stack.append(candidate)

        if max_max != max_min:
            stack.append(source[max_max])

        bottom = len(stack) - 1

        # upper chain, right to left, on top of the lower chain
        for index in reversed(bin_max[:bins + 1]):
            if index is None:
                continue
            candidate = source[index]
            while len(stack) - 1 > bottom and orientation(stack[-2], stack[-1], candidate, precision) is not Orientation.COUNTER_CLOCKWISE:
                stack.pop()
            stack.append(candidate)

        # joining end point
        if min_max != min_min:
            stack.append(source[min_min])

        return HullResult(tuple(stack[:-1]) + (stack[0],))


def approximate_convex_hull(source, precision: Optional[PrecisionModel] = None) -> HullResult:
    """Compute the approximate convex hull of a coordinate set or polygon.

    The hull is not guaranteed to contain every input. Only the extreme
    coordinates of each vertical bin are kept, so an input may lie outside
    the result by up to one bin width, ``(max_x - min_x) / (n // 2)`` for
    ``n`` input coordinates.

    Args:
        source: Coordinates, or a Shapely Polygon whose shell is used
        precision: Precision model (default floating model if None)

    Returns:
        Closed HullResult (unclosed distinct inputs for fewer than 4 coordinates)

    Raises:
        NullArgumentError: If source is None

    Examples:
        >>> from shapely.geometry import Polygon
        >>> hull = approximate_convex_hull(Polygon([(0, 0), (4, 0), (2, 1), (4, 4), (0, 4)]))
        >>> hull.is_closed
        True
    """
    return ApproximateHullBuilder(source, precision).result


__all__ = [
    'ApproximateHullBuilder',
    'approximate_convex_hull',
]
