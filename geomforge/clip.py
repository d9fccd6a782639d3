"""Line clipping against convex windows using the Cyrus-Beck algorithm.

Each segment is parameterised as ``first + t * (second - first)`` with
``t`` in [0, 1]. Every window edge either raises the entering bound or lowers
the exiting bound of ``t`` depending on the sign of the segment direction
projected on the edge's outward normal. The visible part is the remaining
parameter interval, if any.

Clipped segments of one polyline are stitched back together while they share
end points. Polygons are clipped as lines: the shell and each hole give
independent polylines, the result is not a polygon.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from shapely.geometry import MultiLineString, Polygon

from .core.coordinate import Coordinate, CoordinateVector, Envelope
from .core.errors import ShapePreconditionError, require
from .core.geometry_utils import as_coordinates, polygon_rings, to_shapely_lines
from .core.precision import PrecisionModel, resolve_precision
from .core.predicates import is_convex_ring, signed_area

Line = Tuple[Coordinate, ...]


@dataclass(frozen=True)
class ClipResult:
    """Clipped polylines.

    Every input line contributes its visible pieces in order, and always at
    least one entry: a line with no visible part yields one empty tuple.
    """

    lines: Tuple[Line, ...]

    @property
    def visible(self) -> Tuple[Line, ...]:
        """The non-empty output lines."""
        return tuple(line for line in self.lines if line)

    @property
    def is_empty(self) -> bool:
        return not self.visible

    def to_shapely(self) -> MultiLineString:
        return to_shapely_lines(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __getitem__(self, index):
        return self.lines[index]


def window_coordinates(window, precision: Optional[PrecisionModel] = None) -> Line:
    """Convert a clip window to its open list of distinct vertices.

    Args:
        window: Envelope, or a ring of coordinates (closed or open), or a
            Shapely Polygon
        precision: Precision model used for the convexity check

    Raises:
        NullArgumentError: If window is None
        ShapePreconditionError: If the window has fewer than 3 distinct
            vertices or is not convex
    """
    require(window, 'window', "The clipping window is null.")

    if isinstance(window, Envelope):
        vertices = window.corners()
    else:
        vertices = list(as_coordinates(window, 'window'))

    distinct = []
    for vertex in vertices:
        if not distinct or distinct[-1] != vertex:
            distinct.append(vertex)
    while len(distinct) > 1 and distinct[0] == distinct[-1]:
        distinct.pop()

    if len(distinct) < 3:
        raise ShapePreconditionError(
            "The clipping window must contain at least 3 different coordinates.", 'window'
        )
    if not is_convex_ring(distinct, precision):
        raise ShapePreconditionError("The clipping window is not convex.", 'window')

    return tuple(distinct)


def window_normals(window: Sequence[Coordinate]) -> List[CoordinateVector]:
    """Outward unit normal of every window edge, the last edge wrapping around."""
    clockwise = signed_area(window) < 0
    normals = []
    for index, vertex in enumerate(window):
        following = window[(index + 1) % len(window)]
        normal = (following - vertex).normalize().perpendicular()
        normals.append(normal if clockwise else -normal)
    return normals


def clip_segment(
    first: Coordinate,
    second: Coordinate,
    window: Sequence[Coordinate],
    normals: Sequence[CoordinateVector],
) -> Optional[Tuple[Coordinate, Coordinate]]:
    """Clip one segment, returning its visible end points or None."""
    direction = second - first
    min_t, max_t = 0.0, 1.0

    for vertex, normal in zip(window, normals):
        pn = direction.dot(normal)
        qn = (first - vertex).dot(normal)

        if pn < 0:
            # entering
            min_t = max(min_t, -qn / pn)
        elif pn > 0:
            # exiting
            max_t = min(max_t, -qn / pn)
        elif qn > 0:
            # parallel and outside this edge
            return None

    if min_t > max_t:
        return None

    start = first if min_t == 0 else first + direction * min_t
    end = second if max_t == 1 else first + direction * max_t
    return start, end


class SegmentClipper:
    """Clips polylines against a convex window.

    The result is computed on first access of :attr:`result` and cached.

    Args:
        lines: Iterable of polylines (each any form accepted by
            ``as_coordinates``)
        window: Envelope or convex ring
        precision: Precision model for the window convexity check

    Raises:
        NullArgumentError: If lines or window is None
        ShapePreconditionError: If the window is degenerate or not convex

    Examples:
        >>> square = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
        >>> clipper = SegmentClipper([[(-1, 2), (5, 2)]], square)
        >>> [[c.xy for c in line] for line in clipper.result]
        [[(0.0, 2.0), (4.0, 2.0)]]
    """

    def __init__(self, lines: Iterable, window, precision: Optional[PrecisionModel] = None):
        require(lines, 'source')
        self._precision = resolve_precision(precision)
        self._window = window_coordinates(window, self._precision)
        self._lines = tuple(as_coordinates(line, 'source') for line in lines)
        self._result: Optional[ClipResult] = None

    @property
    def source(self) -> Tuple[Line, ...]:
        return self._lines

    @property
    def window(self) -> Line:
        return self._window

    @property
    def result(self) -> ClipResult:
        if self._result is None:
            self.compute()
        return self._result

    def compute(self) -> ClipResult:
        """Compute (or recompute) the clipped lines."""
        normals = window_normals(self._window)
        output: List[Line] = []

        for line in self._lines:
            current: List[Coordinate] = []

            for first, second in zip(line, line[1:]):
                piece = clip_segment(first, second, self._window, normals)
                if piece is None:
                    continue

                start, end = piece
                if current and current[-1] == start:
                    if len(current) == 2 and current[0] == current[1]:
                        # a lone touching point grows into the following piece
                        current = [start, end]
                    elif end != start:
                        current.append(end)
                else:
                    if current:
                        output.append(tuple(current))
                    current = list(piece)

            output.append(tuple(current))

        self._result = ClipResult(tuple(output))
        return self._result


def clip_line(line, window, precision: Optional[PrecisionModel] = None) -> ClipResult:
    """Clip a single polyline against a window.

    Args:
        line: Polyline coordinates or a Shapely LineString
        window: Envelope, convex ring of coordinates, or Shapely Polygon
        precision: Precision model for the window convexity check

    Returns:
        ClipResult with the visible pieces of the line

    Examples:
        >>> result = clip_line([(-5, -5), (-1, -1)], Envelope(0, 0, 4, 4))
        >>> result.is_empty
        True
    """
    require(line, 'source')
    return SegmentClipper([line], window, precision).result


def clip_lines(lines: Iterable, window, precision: Optional[PrecisionModel] = None) -> ClipResult:
    """Clip several polylines against one shared window."""
    return SegmentClipper(lines, window, precision).result


def clip_polygon(
    polygon,
    window,
    holes: Optional[Iterable] = None,
    precision: Optional[PrecisionModel] = None
) -> ClipResult:
    """Clip the boundary of a polygon against a window.

    The shell and every hole are clipped as independent polylines, the shell
    first.

    Args:
        polygon: Shell coordinates or a Shapely Polygon
        window: Envelope, convex ring of coordinates, or Shapely Polygon
        holes: Hole rings (defaults to the interiors of a Shapely Polygon)
        precision: Precision model for the window convexity check
    """
    shell, hole_rings = polygon_rings(polygon, holes, 'source')
    return SegmentClipper([shell] + hole_rings, window, precision).result


def clip_polygons(
    polygons: Iterable,
    window,
    precision: Optional[PrecisionModel] = None
) -> ClipResult:
    """Clip the boundaries of many polygons against one shared window.

    Each polygon is a Shapely Polygon or a ``(shell, holes)`` pair; None
    entries are skipped.
    """
    require(polygons, 'source')
    require(window, 'window', "The clipping window is null.")

    lines = []
    for polygon in polygons:
        if polygon is None:
            continue
        if isinstance(polygon, Polygon):
            shell, holes = polygon_rings(polygon, None, 'source')
        else:
            shell, holes = polygon_rings(polygon[0], polygon[1], 'source')
        lines.append(shell)
        lines.extend(holes)

    return SegmentClipper(lines, window, precision).result


__all__ = [
    'ClipResult',
    'SegmentClipper',
    'window_coordinates',
    'window_normals',
    'clip_segment',
    'clip_line',
    'clip_lines',
    'clip_polygon',
    'clip_polygons',
]
