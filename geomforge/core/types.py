"""Type definitions for geomforge results.

This module defines the enums used as explicit tags in predicate and
algorithm results.
"""

from enum import Enum


class Orientation(Enum):
    """Turn direction formed by three ordered coordinates.

    Attributes:
        CLOCKWISE: The third coordinate lies right of the first two
        COUNTER_CLOCKWISE: The third coordinate lies left of the first two
        COLLINEAR: The three coordinates lie on one line within tolerance

    Examples:
        >>> from geomforge import orientation, Orientation
        >>> orientation((0, 0), (1, 0), (1, 1)) is Orientation.COUNTER_CLOCKWISE
        True
    """
    CLOCKWISE = 'clockwise'
    COUNTER_CLOCKWISE = 'counter_clockwise'
    COLLINEAR = 'collinear'


class Location(Enum):
    """Location of a coordinate relative to a polygon.

    Attributes:
        INSIDE: Strictly inside the polygon
        OUTSIDE: Strictly outside the polygon
        ON_BOUNDARY: On the shell or a hole boundary

    Examples:
        >>> from geomforge import locate, Location
        >>> square = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
        >>> locate(square, (2, 2)) is Location.INSIDE
        True
    """
    INSIDE = 'inside'
    OUTSIDE = 'outside'
    ON_BOUNDARY = 'on_boundary'


class BoundaryStatus(Enum):
    """Whether a winding-number computation determined boundary membership.

    Attributes:
        UNKNOWN: No crossing hit the coordinate and no verification was run
        ON_BOUNDARY: The coordinate lies on an edge of the ring
        OFF_BOUNDARY: Verification ran and found no edge containing it
    """
    UNKNOWN = 'unknown'
    ON_BOUNDARY = 'on_boundary'
    OFF_BOUNDARY = 'off_boundary'


class GeometryOutcome(Enum):
    """Kind of geometry left after ring repair.

    Attributes:
        POLYGON: The ring is still a valid polygon shell
        LINE: The ring collapsed to a line between two coordinates
        POINT: The ring collapsed to a single coordinate
        NONE: Nothing survived

    Examples:
        >>> from geomforge import validate_ring, GeometryOutcome
        >>> validate_ring([(1, 1), (1, 1)]).outcome is GeometryOutcome.POINT
        True
    """
    POLYGON = 'polygon'
    LINE = 'line'
    POINT = 'point'
    NONE = 'none'


class PrecisionModelType(Enum):
    """Numeric model used by a precision model.

    Attributes:
        FLOATING: Double precision, values used as-is
        FLOATING_SINGLE: Values rounded to single precision
        FIXED: Values rounded to a fixed grid
    """
    FLOATING = 'floating'
    FLOATING_SINGLE = 'floating_single'
    FIXED = 'fixed'


__all__ = [
    'Orientation',
    'Location',
    'BoundaryStatus',
    'GeometryOutcome',
    'PrecisionModelType',
]
