"""Coordinate value types.

Coordinates, coordinate vectors and envelopes are small immutable values.
Equality is exact numeric equality; tolerance-aware comparisons live in
:mod:`geomforge.core.predicates`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .errors import ShapePreconditionError


@dataclass(frozen=True)
class CoordinateVector:
    """Difference of two coordinates."""

    x: float
    y: float
    z: float = 0.0

    @property
    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    @property
    def is_valid(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def dot(self, other: CoordinateVector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross_z(self, other: CoordinateVector) -> float:
        """Z component of the cross product (the 2D cross product)."""
        return self.x * other.y - self.y * other.x

    def normalize(self) -> CoordinateVector:
        """Return the vector scaled to unit length in the XY plane.

        The zero vector is returned unchanged.
        """
        length = math.hypot(self.x, self.y)
        if length == 0:
            return self
        return CoordinateVector(self.x / length, self.y / length, self.z / length)

    def perpendicular(self) -> CoordinateVector:
        """Return the XY part rotated 90 degrees counter-clockwise."""
        return CoordinateVector(-self.y, self.x)

    def __mul__(self, factor: float) -> CoordinateVector:
        return CoordinateVector(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> CoordinateVector:
        return CoordinateVector(-self.x, -self.y, -self.z)


@dataclass(frozen=True)
class Coordinate:
    """An (x, y, z) position. Z defaults to 0 and is ignored by 2D algorithms.

    Examples:
        >>> a = Coordinate(1, 2)
        >>> b = Coordinate(4, 6)
        >>> (b - a).length
        5.0
        >>> a + (b - a) * 0.5
        Coordinate(x=2.5, y=4.0, z=0.0)
    """

    x: float
    y: float
    z: float = 0.0

    @property
    def xy(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def is_valid(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def __sub__(self, other: Coordinate) -> CoordinateVector:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return CoordinateVector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __add__(self, vector: CoordinateVector) -> Coordinate:
        if not isinstance(vector, CoordinateVector):
            return NotImplemented
        return Coordinate(self.x + vector.x, self.y + vector.y, self.z + vector.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    @staticmethod
    def centroid(coordinates: Iterable[Coordinate]) -> Coordinate:
        """Arithmetic mean of the coordinates, NaN components if empty."""
        coordinates = list(coordinates)
        if not coordinates:
            return Coordinate(math.nan, math.nan, math.nan)
        count = len(coordinates)
        return Coordinate(
            sum(c.x for c in coordinates) / count,
            sum(c.y for c in coordinates) / count,
            sum(c.z for c in coordinates) / count,
        )

    @staticmethod
    def lower_bound(coordinates: Iterable[Coordinate]) -> Coordinate:
        coordinates = list(coordinates)
        return Coordinate(
            min(c.x for c in coordinates),
            min(c.y for c in coordinates),
            min(c.z for c in coordinates),
        )

    @staticmethod
    def upper_bound(coordinates: Iterable[Coordinate]) -> Coordinate:
        coordinates = list(coordinates)
        return Coordinate(
            max(c.x for c in coordinates),
            max(c.y for c in coordinates),
            max(c.z for c in coordinates),
        )


@dataclass(frozen=True)
class Envelope:
    """Axis-aligned bounding box used to describe rectangular clip windows."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ShapePreconditionError(
                "The minimum of the envelope is greater than the maximum.", "envelope"
            )

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[Coordinate]) -> Envelope:
        coordinates = list(coordinates)
        if not coordinates:
            raise ShapePreconditionError("No coordinates are specified.", "coordinates")
        lower = Coordinate.lower_bound(coordinates)
        upper = Coordinate.upper_bound(coordinates)
        return cls(lower.x, lower.y, upper.x, upper.y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, coordinate: Coordinate) -> bool:
        return (self.min_x <= coordinate.x <= self.max_x
                and self.min_y <= coordinate.y <= self.max_y)

    def corners(self) -> List[Coordinate]:
        """The four corners, clockwise from (min_x, min_y)."""
        return [
            Coordinate(self.min_x, self.min_y),
            Coordinate(self.min_x, self.max_y),
            Coordinate(self.max_x, self.max_y),
            Coordinate(self.max_x, self.min_y),
        ]


def as_coordinate(value) -> Coordinate:
    """Convert a Coordinate, (x, y) or (x, y, z) sequence to a Coordinate."""
    if isinstance(value, Coordinate):
        return value
    values = [float(v) for v in value]
    if len(values) not in (2, 3):
        raise ShapePreconditionError(
            f"Only 2 or 3 dimensional coordinates are supported, got {len(values)}.",
            "coordinate",
        )
    return Coordinate(*values)


__all__ = [
    'Coordinate',
    'CoordinateVector',
    'Envelope',
    'as_coordinate',
]
