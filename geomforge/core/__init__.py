"""Core types and utilities for geomforge.

This module provides the coordinate value types, the precision model, the
geometric predicates, enums and exceptions shared by every algorithm.
"""

from .types import (
    Orientation,
    Location,
    BoundaryStatus,
    GeometryOutcome,
    PrecisionModelType,
)

from .errors import (
    GeomforgeError,
    NullArgumentError,
    ShapePreconditionError,
    ConfigurationError,
    RepairWarning,
)

from .coordinate import Coordinate, CoordinateVector, Envelope, as_coordinate

from .precision import (
    EPS,
    PrecisionModel,
    DEFAULT_PRECISION,
    resolve_precision,
    least_precise,
    most_precise,
)

from .predicates import (
    orientation,
    distance,
    segment_distance,
    segment_contains,
    signed_area,
    is_convex_ring,
)

__all__ = [
    # Enums
    'Orientation',
    'Location',
    'BoundaryStatus',
    'GeometryOutcome',
    'PrecisionModelType',

    # Exceptions
    'GeomforgeError',
    'NullArgumentError',
    'ShapePreconditionError',
    'ConfigurationError',
    'RepairWarning',

    # Values
    'Coordinate',
    'CoordinateVector',
    'Envelope',
    'as_coordinate',

    # Precision
    'EPS',
    'PrecisionModel',
    'DEFAULT_PRECISION',
    'resolve_precision',
    'least_precise',
    'most_precise',

    # Predicates
    'orientation',
    'distance',
    'segment_distance',
    'segment_contains',
    'signed_area',
    'is_convex_ring',
]
