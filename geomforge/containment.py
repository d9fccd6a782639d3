"""Point-in-polygon membership using the winding number.

For every ring edge that crosses the horizontal line through the target
coordinate, the orientation of the target against the edge decides whether
the ring winds around it (upward crossings with the target on the left count
+1, downward crossings with the target on the right count -1). A collinear
crossing means the target lies on the boundary, where the winding number is
not defined.

Reference: http://geomalgorithms.com/a03-_inclusion.html
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .core.coordinate import Coordinate, as_coordinate
from .core.errors import require
from .core.geometry_utils import as_ring, polygon_rings
from .core.precision import PrecisionModel, resolve_precision
from .core.predicates import orientation, segment_contains
from .core.types import BoundaryStatus, Location, Orientation


@dataclass(frozen=True)
class ContainmentResult:
    """Winding number of a ring around a coordinate plus boundary status."""

    winding_number: int
    boundary: BoundaryStatus = BoundaryStatus.UNKNOWN

    @property
    def is_on_boundary(self) -> bool:
        return self.boundary is BoundaryStatus.ON_BOUNDARY

    @property
    def is_inside(self) -> bool:
        """Non-zero winding number and not known to be on the boundary."""
        return self.winding_number != 0 and not self.is_on_boundary

    @property
    def location(self) -> Location:
        if self.is_on_boundary:
            return Location.ON_BOUNDARY
        if self.winding_number != 0:
            return Location.INSIDE
        return Location.OUTSIDE


class PointContainmentTester:
    """Computes the winding number of a closed ring around a coordinate.

    The result is computed on first access of :attr:`result` and cached.
    Assigning a different :attr:`coordinate` or :attr:`verify_boundary`
    invalidates the cache. Not safe to share across threads while the
    setters are in use.

    Args:
        shell: Closed ring (at least 4 coordinates, first == last) or a
            Shapely Polygon whose shell is used
        coordinate: Target coordinate
        verify_boundary: Scan all edges for the target when no crossing
            already put it on the boundary
        precision: Precision model (default floating model if None)

    Raises:
        NullArgumentError: If shell or coordinate is None
        ShapePreconditionError: If shell has fewer than 4 coordinates or is
            not closed

    Examples:
        >>> square = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
        >>> tester = PointContainmentTester(square, (2, 2))
        >>> tester.result.winding_number
        1
        >>> tester.coordinate = (5, 5)
        >>> tester.result.winding_number
        0
    """

    def __init__(
        self,
        shell,
        coordinate,
        verify_boundary: bool = False,
        precision: Optional[PrecisionModel] = None
    ):
        self._shell = as_ring(require(shell, 'shell'), 'shell')
        self._coordinate = as_coordinate(require(coordinate, 'coordinate'))
        self._verify_boundary = verify_boundary
        self._precision = resolve_precision(precision)
        self._result: Optional[ContainmentResult] = None

    @property
    def shell(self):
        return self._shell

    @property
    def precision(self) -> PrecisionModel:
        return self._precision

    @property
    def coordinate(self) -> Coordinate:
        return self._coordinate

    @coordinate.setter
    def coordinate(self, value):
        value = as_coordinate(require(value, 'coordinate'))
        if value != self._coordinate:
            self._coordinate = value
            self._result = None

    @property
    def verify_boundary(self) -> bool:
        return self._verify_boundary

    @verify_boundary.setter
    def verify_boundary(self, value: bool):
        if value != self._verify_boundary:
            self._verify_boundary = value
            self._result = None

    @property
    def result(self) -> ContainmentResult:
        if self._result is None:
            self.compute()
        return self._result

    def compute(self) -> ContainmentResult:
        """Compute (or recompute) the winding number."""
        shell = self._shell
        target = self._coordinate
        precision = self._precision

        winding = 0
        boundary = BoundaryStatus.UNKNOWN

        for start, end in zip(shell, shell[1:]):
            if start.y <= target.y < end.y:
                # upward crossing
                turn = orientation(target, start, end, precision)
                if turn is Orientation.COUNTER_CLOCKWISE:
                    winding += 1
                elif turn is Orientation.COLLINEAR:
                    boundary = BoundaryStatus.ON_BOUNDARY
            elif start.y > target.y >= end.y:
                # downward crossing
                turn = orientation(target, start, end, precision)
                if turn is Orientation.CLOCKWISE:
                    winding -= 1
                elif turn is Orientation.COLLINEAR:
                    boundary = BoundaryStatus.ON_BOUNDARY

        if boundary is BoundaryStatus.UNKNOWN and self._verify_boundary:
            boundary = self._check_boundary()

        self._result = ContainmentResult(winding, boundary)
        return self._result

    def _check_boundary(self) -> BoundaryStatus:
        for start, end in zip(self._shell, self._shell[1:]):
            if segment_contains(start, end, self._coordinate, self._precision):
                return BoundaryStatus.ON_BOUNDARY
        return BoundaryStatus.OFF_BOUNDARY


def winding_number(
    shell,
    coordinate,
    precision: Optional[PrecisionModel] = None
) -> int:
    """Winding number of a closed ring around a coordinate.

    Examples:
        >>> winding_number([(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)], (2, 2))
        1
    """
    return PointContainmentTester(shell, coordinate, precision=precision).result.winding_number


def is_inside_polygon(
    shell,
    coordinate,
    holes: Optional[Iterable] = None,
    precision: Optional[PrecisionModel] = None
) -> bool:
    """Check whether a coordinate lies inside a polygon with optional holes.

    The coordinate is inside when the shell winds around it and no hole does.

    Args:
        shell: Closed shell ring, or a Shapely Polygon (its interiors are
            used as holes unless ``holes`` is given)
        coordinate: Target coordinate
        holes: Closed hole rings
        precision: Precision model (default floating model if None)

    Raises:
        NullArgumentError: If shell or coordinate is None
        ShapePreconditionError: If any ring is too short or not closed
    """
    shell_ring, hole_rings = polygon_rings(shell, holes)
    shell_ring = as_ring(shell_ring, 'shell')
    hole_rings = [as_ring(hole, 'hole') for hole in hole_rings]
    require(coordinate, 'coordinate')
    if PointContainmentTester(shell_ring, coordinate, precision=precision).result.winding_number == 0:
        return False

    for hole in hole_rings:
        if PointContainmentTester(hole, coordinate, precision=precision).result.winding_number != 0:
            return False

    return True


def locate(
    shell,
    coordinate,
    holes: Optional[Iterable] = None,
    precision: Optional[PrecisionModel] = None
) -> Location:
    """Locate a coordinate relative to a polygon with optional holes.

    Boundary verification is run against the shell and every hole.

    Examples:
        >>> square = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
        >>> locate(square, (0, 2))
        <Location.ON_BOUNDARY: 'on_boundary'>
    """
    shell_ring, hole_rings = polygon_rings(shell, holes)
    shell_ring = as_ring(shell_ring, 'shell')
    hole_rings = [as_ring(hole, 'hole') for hole in hole_rings]
    require(coordinate, 'coordinate')
    outer = PointContainmentTester(shell_ring, coordinate, True, precision).result
    if outer.is_on_boundary:
        return Location.ON_BOUNDARY
    if outer.winding_number == 0:
        return Location.OUTSIDE

    for hole in hole_rings:
        inner = PointContainmentTester(hole, coordinate, True, precision).result
        if inner.is_on_boundary:
            return Location.ON_BOUNDARY
        if inner.winding_number != 0:
            return Location.OUTSIDE

    return Location.INSIDE


__all__ = [
    'ContainmentResult',
    'PointContainmentTester',
    'winding_number',
    'is_inside_polygon',
    'locate',
]
