"""Repair of polygon rings that degenerate after precision snapping.

Snapping coordinates to a coarser precision model can merge neighbouring
vertices. The repair removes the resulting consecutive duplicates and
classifies what is left: a polygon, a line, a point or nothing. Holes are
repaired the same way and dropped when they no longer bound an area.

The input is never modified; a new :class:`ValidationResult` is returned.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from shapely.geometry import GeometryCollection, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from .core.coordinate import Coordinate
from .core.errors import RepairWarning, require
from .core.geometry_utils import polygon_rings, to_shapely_shape
from .core.precision import PrecisionModel, resolve_precision
from .core.predicates import orientation
from .core.types import GeometryOutcome, Orientation

Ring = Tuple[Coordinate, ...]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a ring repair.

    ``shell`` holds the repaired ring for ``POLYGON``, the two end points for
    ``LINE``, the single coordinate for ``POINT`` and nothing for ``NONE``.
    ``holes`` is only populated for polygons.
    """

    outcome: GeometryOutcome
    shell: Ring = ()
    holes: Tuple[Ring, ...] = field(default_factory=tuple)
    dropped_holes: int = 0

    @property
    def is_polygon(self) -> bool:
        return self.outcome is GeometryOutcome.POLYGON

    @property
    def is_empty(self) -> bool:
        return self.outcome is GeometryOutcome.NONE

    def to_shapely(self) -> BaseGeometry:
        """Polygon, LineString, Point or an empty Polygon."""
        if self.outcome is GeometryOutcome.POLYGON:
            return to_shapely_shape(self.shell, self.holes)
        return to_shapely_shape(self.shell)


def remove_consecutive_duplicates(ring: Sequence[Coordinate]) -> List[Coordinate]:
    """Drop every coordinate equal to its predecessor, scanning from the end."""
    result = list(ring)
    for index in range(len(result) - 1, 0, -1):
        if result[index] == result[index - 1]:
            del result[index]
    return result


def _is_collinear(ring: Sequence[Coordinate], precision: PrecisionModel) -> bool:
    first, second = ring[0], ring[1]
    return all(
        orientation(first, second, other, precision) is Orientation.COLLINEAR
        for other in ring[2:]
    )


class RingValidator:
    """Repairs a polygon shell and its holes.

    Steps, applied to the shell and to each hole:

    1. Snap every coordinate with the precision model.
    2. Remove consecutive duplicates.
    3. Classify: no coordinates is ``NONE``, at most two is ``POINT`` (the
       first remaining coordinate), at most three is ``LINE`` between the
       first two, all vertices collinear is ``LINE`` between the first two,
       anything else is ``POLYGON``.

    Holes that do not classify as polygons are dropped. When the shell
    collapses or holes are dropped a :class:`RepairWarning` is emitted.

    The result is computed on first access of :attr:`result` and cached.

    Args:
        shell: Shell ring or a Shapely Polygon
        holes: Hole rings (defaults to the interiors of a Shapely Polygon)
        precision: Precision model used for snapping

    Raises:
        NullArgumentError: If shell is None

    Examples:
        >>> validator = RingValidator([(0, 0), (0, 0), (1, 1), (2, 2), (0, 0)])
        >>> validator.result.outcome
        <GeometryOutcome.LINE: 'line'>
        >>> [c.xy for c in validator.result.shell]
        [(0.0, 0.0), (1.0, 1.0)]
    """

    def __init__(
        self,
        shell,
        holes: Optional[Iterable] = None,
        precision: Optional[PrecisionModel] = None
    ):
        self._shell, self._holes = polygon_rings(require(shell, 'shell'), holes, 'shell')
        self._precision = resolve_precision(precision)
        self._result: Optional[ValidationResult] = None

    @property
    def shell(self) -> Ring:
        return self._shell

    @property
    def holes(self) -> List[Ring]:
        return list(self._holes)

    @property
    def precision(self) -> PrecisionModel:
        return self._precision

    @property
    def result(self) -> ValidationResult:
        if self._result is None:
            self.compute()
        return self._result

    def compute(self) -> ValidationResult:
        """Compute (or recompute) the repaired geometry."""
        outcome, shell = self.repair_ring(self._shell)

        if outcome is not GeometryOutcome.POLYGON:
            if self._shell:
                warnings.warn(
                    f"Polygon shell collapsed to {outcome.value} after snapping to {self._precision}",
                    RepairWarning,
                    stacklevel=2,
                )
            self._result = ValidationResult(outcome, shell)
            return self._result

        holes = []
        for hole in self._holes:
            hole_outcome, repaired = self.repair_ring(hole)
            if hole_outcome is GeometryOutcome.POLYGON:
                holes.append(repaired)

        dropped = len(self._holes) - len(holes)
        if dropped:
            warnings.warn(
                f"Dropped {dropped} degenerate hole(s) after snapping to {self._precision}",
                RepairWarning,
                stacklevel=2,
            )

        self._result = ValidationResult(outcome, shell, tuple(holes), dropped)
        return self._result

    def repair_ring(self, ring: Sequence[Coordinate]) -> Tuple[GeometryOutcome, Ring]:
        """Snap, de-duplicate and classify a single ring."""
        snapped = [self._precision.make_precise(c) for c in ring]
        remaining = remove_consecutive_duplicates(snapped)

        if not remaining:
            return GeometryOutcome.NONE, ()
        if len(remaining) <= 2:
            return GeometryOutcome.POINT, (remaining[0],)
        if len(remaining) <= 3 or _is_collinear(remaining, self._precision):
            return GeometryOutcome.LINE, (remaining[0], remaining[1])
        return GeometryOutcome.POLYGON, tuple(remaining)


def validate_ring(
    ring,
    holes: Optional[Iterable] = None,
    precision: Optional[PrecisionModel] = None
) -> ValidationResult:
    """Repair a ring and its holes.

    Args:
        ring: Shell ring or a Shapely Polygon
        holes: Hole rings
        precision: Precision model used for snapping (default floating)

    Returns:
        ValidationResult tagged POLYGON, LINE, POINT or NONE

    Raises:
        NullArgumentError: If ring is None

    Examples:
        >>> validate_ring([(0, 0), (0.4, 0), (0.4, 0.4), (0, 0)],
        ...               precision=PrecisionModel.fixed(1.0)).outcome
        <GeometryOutcome.POINT: 'point'>
    """
    return RingValidator(ring, holes, precision).result


def validate_polygon(
    polygon: Polygon,
    precision: Optional[PrecisionModel] = None
) -> BaseGeometry:
    """Repair a Shapely polygon, returning the surviving Shapely geometry.

    Examples:
        >>> from shapely.geometry import box
        >>> validate_polygon(box(0, 0, 0.2, 0.2), PrecisionModel.fixed(1.0)).geom_type
        'Point'
    """
    require(polygon, 'polygon')
    return RingValidator(polygon, precision=precision).result.to_shapely()


def _repair_geometry(
    geometry: Optional[BaseGeometry],
    precision: Optional[PrecisionModel]
) -> Optional[BaseGeometry]:
    """Repair the polygons of a geometry, None when nothing survives."""
    if geometry is None or geometry.is_empty:
        return None

    if isinstance(geometry, Polygon):
        repaired = RingValidator(geometry, precision=precision).result
        return None if repaired.is_empty else repaired.to_shapely()

    if isinstance(geometry, (MultiPolygon, GeometryCollection)):
        parts = [_repair_geometry(part, precision) for part in geometry.geoms]
        parts = [part for part in parts if part is not None]
        if not parts:
            return None
        if all(isinstance(part, Polygon) for part in parts):
            return MultiPolygon(parts)
        return GeometryCollection(parts)

    return geometry


def validate_geometries(
    geometries: Union[Iterable[BaseGeometry], BaseGeometry],
    precision: Optional[PrecisionModel] = None,
    verbose: bool = False
) -> List[BaseGeometry]:
    """Repair a collection of geometries.

    Polygons are repaired with :class:`RingValidator`. MultiPolygon and
    GeometryCollection values have their polygon members repaired and are
    rebuilt from the members that survive; a MultiPolygon with a collapsed
    member becomes a GeometryCollection. Other geometries are kept unchanged.
    None entries, empty geometries and geometries that collapse to nothing
    are filtered out.

    Args:
        geometries: Shapely geometries, or a Shapely multi-part geometry whose
            members are repaired one by one
        precision: Precision model used for snapping (default floating)
        verbose: Print one line per repaired geometry (default: False)

    Returns:
        List of surviving Shapely geometries, in input order

    Examples:
        >>> from shapely.geometry import box
        >>> parts = MultiPolygon([box(10, 10, 15, 15), box(0, 0, 0.2, 0.2)])
        >>> [g.geom_type for g in validate_geometries(parts, PrecisionModel.fixed(1.0))]
        ['Polygon', 'Point']
    """
    require(geometries, 'geometries')
    if isinstance(geometries, BaseGeometry):
        geometries = getattr(geometries, 'geoms', [geometries])

    result: List[BaseGeometry] = []
    for index, geometry in enumerate(geometries):
        if geometry is None or geometry.is_empty:
            if verbose:
                print(f"Geometry {index}: empty, removed")
            continue

        if isinstance(geometry, Polygon):
            repaired = RingValidator(geometry, precision=precision).result
            if verbose and (not repaired.is_polygon or repaired.dropped_holes):
                print(f"Geometry {index}: {repaired.outcome.value}, {repaired.dropped_holes} hole(s) dropped")
            if not repaired.is_empty:
                result.append(repaired.to_shapely())
            continue

        repaired = _repair_geometry(geometry, precision)
        if verbose and isinstance(geometry, (MultiPolygon, GeometryCollection)):
            kept = 0 if repaired is None else len(repaired.geoms)
            print(f"Geometry {index}: {geometry.geom_type}, {kept} of {len(geometry.geoms)} member(s) kept")
        if repaired is not None:
            result.append(repaired)

    return result


__all__ = [
    'ValidationResult',
    'RingValidator',
    'remove_consecutive_duplicates',
    'validate_ring',
    'validate_polygon',
    'validate_geometries',
]
