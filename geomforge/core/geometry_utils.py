"""Coercion helpers between geomforge coordinates and other representations.

Algorithms work on tuples of :class:`Coordinate`. These helpers accept the
representations callers usually hold (sequences of tuples, numpy arrays,
Shapely geometries) and convert results back for export.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
from shapely.geometry import LineString, MultiLineString, Point, Polygon
from shapely.geometry.base import BaseGeometry

from .coordinate import Coordinate, as_coordinate
from .errors import NullArgumentError, ShapePreconditionError

CoordinateTuple = Tuple[Coordinate, ...]


def as_coordinates(source, argument: str = 'source') -> CoordinateTuple:
    """Convert ``source`` to a tuple of coordinates.

    Args:
        source: Sequence of coordinates or (x, y[, z]) tuples, an Nx2/Nx3
            numpy array, a Shapely LineString/LinearRing, or a Shapely
            Polygon (its shell is used)
        argument: Argument name reported in errors

    Returns:
        Tuple of Coordinate

    Raises:
        NullArgumentError: If source is None

    Examples:
        >>> as_coordinates(np.array([[0, 0], [1, 2]]))
        (Coordinate(x=0.0, y=0.0, z=0.0), Coordinate(x=1.0, y=2.0, z=0.0))
    """
    if source is None:
        raise NullArgumentError(argument)

    if isinstance(source, Polygon):
        if source.is_empty:
            return ()
        source = source.exterior

    if isinstance(source, BaseGeometry):
        return tuple(as_coordinate(c) for c in source.coords)

    if isinstance(source, np.ndarray):
        if source.size == 0:
            return ()
        array = np.atleast_2d(np.asarray(source, dtype=float))
        if array.shape[1] not in (2, 3):
            raise ShapePreconditionError(
                f"Expected an Nx2 or Nx3 array, got shape {source.shape}.", argument
            )
        return tuple(Coordinate(*row) for row in array.tolist())

    return tuple(as_coordinate(c) for c in source)


def as_ring(source, argument: str = 'shell') -> CoordinateTuple:
    """Convert ``source`` to a closed ring, enforcing the ring preconditions.

    Raises:
        NullArgumentError: If source is None
        ShapePreconditionError: If the ring has fewer than 4 coordinates or
            its first and last coordinates differ
    """
    ring = as_coordinates(source, argument)
    if len(ring) < 4:
        raise ShapePreconditionError(
            f"The {argument} must contain at least 3 different coordinates.", argument
        )
    if ring[0] != ring[-1]:
        raise ShapePreconditionError(
            f"The first and the last coordinates of the {argument} must be equal.", argument
        )
    return ring


def polygon_rings(
    shell,
    holes: Optional[Iterable] = None,
    argument: str = 'shell'
) -> Tuple[CoordinateTuple, List[CoordinateTuple]]:
    """Split a polygon into shell and hole coordinate tuples.

    ``shell`` may be a Shapely Polygon, in which case its interiors are used
    as holes unless ``holes`` is given explicitly. Rings are not validated.
    """
    if shell is None:
        raise NullArgumentError(argument)

    if isinstance(shell, Polygon):
        if holes is None:
            holes = list(shell.interiors)
        shell = shell.exterior if not shell.is_empty else ()

    shell_coords = as_coordinates(shell, argument)
    hole_coords = [as_coordinates(hole, 'hole') for hole in (holes or []) if hole is not None]
    return shell_coords, hole_coords


def dedupe(coordinates: Iterable[Coordinate]) -> List[Coordinate]:
    """Distinct coordinates in first-seen order."""
    seen = set()
    result = []
    for coordinate in coordinates:
        if coordinate not in seen:
            seen.add(coordinate)
            result.append(coordinate)
    return result


def to_array(coordinates: Sequence[Coordinate], three_dimensional: bool = False) -> np.ndarray:
    """Convert coordinates to an Nx2 (or Nx3) float array."""
    width = 3 if three_dimensional else 2
    if not coordinates:
        return np.empty((0, width), dtype=float)
    if three_dimensional:
        return np.array([[c.x, c.y, c.z] for c in coordinates], dtype=float)
    return np.array([[c.x, c.y] for c in coordinates], dtype=float)


def to_shapely_lines(lines: Iterable[Sequence[Coordinate]]) -> MultiLineString:
    """Build a MultiLineString from the lines with at least two coordinates."""
    parts = [[c.xy for c in line] for line in lines if len(line) >= 2]
    return MultiLineString(parts)


def to_shapely_shape(coordinates: Sequence[Coordinate], holes: Iterable[Sequence[Coordinate]] = ()) -> BaseGeometry:
    """Build the Shapely geometry matching the number of distinct coordinates.

    Three or more coordinates give a Polygon, two a LineString, one a Point
    and none an empty Polygon.
    """
    distinct = dedupe(coordinates)
    if len(distinct) >= 3:
        return Polygon(
            [c.xy for c in coordinates],
            holes=[[c.xy for c in hole] for hole in holes],
        )
    if len(distinct) == 2:
        return LineString([c.xy for c in distinct])
    if len(distinct) == 1:
        point = distinct[0]
        return Point(point.x, point.y, point.z) if point.z else Point(point.x, point.y)
    return Polygon()


__all__ = [
    'as_coordinates',
    'as_ring',
    'polygon_rings',
    'dedupe',
    'to_array',
    'to_shapely_lines',
    'to_shapely_shape',
]
