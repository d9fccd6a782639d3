"""Immutable convex hull result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np
from shapely.geometry.base import BaseGeometry

from ..core.coordinate import Coordinate
from ..core.geometry_utils import to_array, to_shapely_shape


@dataclass(frozen=True)
class HullResult:
    """Ordered hull coordinates.

    Hulls with at least three vertices are closed (first == last). Degenerate
    hulls hold their one or two coordinates, or the distinct inputs of a
    too-small source, without closure.
    """

    coordinates: Tuple[Coordinate, ...]

    @classmethod
    def closed(cls, vertices) -> HullResult:
        """Build a result from open hull vertices, closing it when possible."""
        vertices = tuple(vertices)
        if len(vertices) >= 3 and vertices[0] != vertices[-1]:
            vertices = vertices + (vertices[0],)
        return cls(vertices)

    @property
    def is_closed(self) -> bool:
        return len(self.coordinates) >= 3 and self.coordinates[0] == self.coordinates[-1]

    @property
    def vertices(self) -> Tuple[Coordinate, ...]:
        """Hull coordinates without the closing repetition."""
        if self.is_closed:
            return self.coordinates[:-1]
        return self.coordinates

    def to_array(self) -> np.ndarray:
        return to_array(self.coordinates)

    def to_shapely(self) -> BaseGeometry:
        """Polygon for a proper hull, LineString or Point when degenerate."""
        return to_shapely_shape(self.coordinates)

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coordinates)

    def __getitem__(self, index):
        return self.coordinates[index]


__all__ = ['HullResult']
