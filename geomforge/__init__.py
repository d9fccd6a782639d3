"""Geomforge - Computational geometry kernel.

This library provides robust orientation predicates under a configurable
precision model, convex hulls, Cyrus-Beck line clipping, winding-number
point containment and repair of degenerate polygon rings. Inputs are plain
coordinate sequences, numpy arrays or Shapely geometries.
"""


# Convex hull functions
from .hull import (
    HullResult,
    ApproximateHullBuilder,
    approximate_convex_hull,
    ExactHullBuilder,
    convex_hull,
)

# Clipping functions
from .clip import (
    ClipResult,
    SegmentClipper,
    clip_line,
    clip_lines,
    clip_polygon,
    clip_polygons,
)

# Containment functions
from .containment import (
    ContainmentResult,
    PointContainmentTester,
    winding_number,
    is_inside_polygon,
    locate,
)

# Ring repair functions
from .validation import (
    ValidationResult,
    RingValidator,
    validate_ring,
    validate_polygon,
    validate_geometries,
)

# Core values, precision and predicates
from .core import (
    Coordinate,
    CoordinateVector,
    Envelope,
    PrecisionModel,
    least_precise,
    most_precise,
    orientation,
    distance,
)

# Core types (enums)
from .core import (
    Orientation,
    Location,
    BoundaryStatus,
    GeometryOutcome,
    PrecisionModelType,
)

# Core exceptions
from .core import (
    GeomforgeError,
    NullArgumentError,
    ShapePreconditionError,
    ConfigurationError,
    RepairWarning,
)

__all__ = [

    # Convex hulls
    'HullResult',
    'ApproximateHullBuilder',
    'approximate_convex_hull',
    'ExactHullBuilder',
    'convex_hull',

    # Clipping
    'ClipResult',
    'SegmentClipper',
    'clip_line',
    'clip_lines',
    'clip_polygon',
    'clip_polygons',

    # Containment
    'ContainmentResult',
    'PointContainmentTester',
    'winding_number',
    'is_inside_polygon',
    'locate',

    # Ring repair
    'ValidationResult',
    'RingValidator',
    'validate_ring',
    'validate_polygon',
    'validate_geometries',

    # Values, precision and predicates
    'Coordinate',
    'CoordinateVector',
    'Envelope',
    'PrecisionModel',
    'least_precise',
    'most_precise',
    'orientation',
    'distance',

    # Types
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
]

__version__ = '0.1.0'
