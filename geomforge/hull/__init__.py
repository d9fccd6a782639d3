"""Convex hull construction.

Two independent builders share only the predicate layer:

- :class:`ApproximateHullBuilder` (Bentley-Faust-Preparata, O(n), approximate)
- :class:`ExactHullBuilder` (Graham scan, O(n log n), exact)
"""

from .result import HullResult
from .approximate import ApproximateHullBuilder, approximate_convex_hull
from .exact import ExactHullBuilder, convex_hull

__all__ = [
    'HullResult',
    'ApproximateHullBuilder',
    'approximate_convex_hull',
    'ExactHullBuilder',
    'convex_hull',
]
