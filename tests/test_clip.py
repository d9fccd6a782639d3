"""Tests for Cyrus-Beck line clipping."""

import numpy as np
import pytest
from shapely.geometry import LineString, Polygon, box

from geomforge import (
    ClipResult,
    Envelope,
    NullArgumentError,
    SegmentClipper,
    ShapePreconditionError,
    clip_line,
    clip_lines,
    clip_polygon,
    clip_polygons,
)
from geomforge.clip import clip_segment, window_coordinates, window_normals
from geomforge.core import Coordinate


SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]


def _xy(line):
    return np.array([c.xy for c in line])


class TestClipLine:
    """Tests for clip_line()."""

    def test_crossing_segment(self):
        result = clip_line([(-1, 2), (5, 2)], SQUARE)
        assert len(result) == 1
        np.testing.assert_array_almost_equal(_xy(result[0]), [[0, 2], [4, 2]])

    def test_segment_outside(self):
        result = clip_line([(-5, -5), (-1, -1)], SQUARE)
        assert result.is_empty
        assert result.lines == ((),)
        assert result.visible == ()

    def test_segment_inside_unchanged(self):
        result = clip_line([(1, 1), (3, 2)], SQUARE)
        assert [c.xy for c in result[0]] == [(1.0, 1.0), (3.0, 2.0)]

    def test_diagonal_segment(self):
        result = clip_line([(-2, -2), (6, 6)], SQUARE)
        np.testing.assert_array_almost_equal(_xy(result[0]), [[0, 0], [4, 4]])

    def test_parallel_outside(self):
        """Test that a segment parallel to an edge and outside it is rejected."""
        result = clip_line([(-1, 5), (5, 5)], SQUARE)
        assert result.is_empty

    def test_segment_on_edge(self):
        result = clip_line([(0, 0), (4, 0)], SQUARE)
        assert [c.xy for c in result[0]] == [(0.0, 0.0), (4.0, 0.0)]

    def test_segment_touching_corner(self):
        result = clip_line([(-1, 1), (1, -1)], SQUARE)
        np.testing.assert_array_almost_equal(_xy(result[0]), [[0, 0], [0, 0]])

    def test_polyline_stitched(self):
        """Test that consecutive visible pieces sharing an end point are joined."""
        result = clip_line([(-1, 2), (2, 2), (2, 6)], SQUARE)
        assert len(result) == 1
        np.testing.assert_array_almost_equal(_xy(result[0]), [[0, 2], [2, 2], [2, 4]])

    def test_polyline_leaving_at_vertex_on_edge(self):
        """Test that a vertex on the window edge is not repeated when the line leaves."""
        result = clip_line([(2, 2), (4, 2), (6, 2)], SQUARE)
        assert len(result) == 1
        assert [c.xy for c in result[0]] == [(2.0, 2.0), (4.0, 2.0)]

    def test_polyline_entering_at_vertex_on_edge(self):
        """Test that a touching point grows into the piece entering from it."""
        result = clip_line([(-2, 2), (0, 2), (2, 2)], SQUARE)
        assert len(result) == 1
        assert [c.xy for c in result[0]] == [(0.0, 2.0), (2.0, 2.0)]

    def test_no_consecutive_duplicates(self):
        lines = [
            [(2, 2), (4, 2), (6, 2)],
            [(-2, 2), (0, 2), (2, 2)],
            [(-2, 1), (0, 1), (2, 1), (4, 1), (6, 1)],
        ]
        for line in clip_lines(lines, SQUARE):
            assert all(a != b for a, b in zip(line, line[1:]))

    def test_polyline_split(self):
        """Test that a polyline leaving and re-entering the window is split."""
        result = clip_line([(1, 1), (5, 1), (5, 3), (1, 3)], SQUARE)
        assert len(result) == 2
        np.testing.assert_array_almost_equal(_xy(result[0]), [[1, 1], [4, 1]])
        np.testing.assert_array_almost_equal(_xy(result[1]), [[4, 3], [1, 3]])

    def test_shapely_line(self):
        result = clip_line(LineString([(-1, 2), (5, 2)]), box(0, 0, 4, 4))
        assert result.to_shapely().length == pytest.approx(4.0)

    def test_none_line(self):
        with pytest.raises(NullArgumentError, match="source"):
            clip_line(None, SQUARE)


class TestClipWindow:
    """Tests for clip window handling."""

    def test_envelope_window(self):
        result = clip_line([(-1, 2), (5, 2)], Envelope(0, 0, 4, 4))
        np.testing.assert_array_almost_equal(_xy(result[0]), [[0, 2], [4, 2]])

    def test_clockwise_window(self):
        clockwise = list(reversed(SQUARE))
        result = clip_line([(2, -1), (2, 5)], clockwise)
        np.testing.assert_array_almost_equal(_xy(result[0]), [[2, 0], [2, 4]])

    def test_triangle_window(self):
        result = clip_line([(-1, 1), (5, 1)], [(0, 0), (4, 0), (0, 4)])
        np.testing.assert_array_almost_equal(_xy(result[0]), [[0, 1], [3, 1]])

    def test_open_and_closed_window_agree(self):
        open_window = window_coordinates(SQUARE[:-1])
        closed_window = window_coordinates(SQUARE)
        assert open_window == closed_window
        assert len(open_window) == 4

    def test_normals_point_outward(self):
        for window in (SQUARE, list(reversed(SQUARE)), Envelope(0, 0, 4, 4)):
            vertices = window_coordinates(window)
            center = Coordinate.centroid(vertices)
            for vertex, normal in zip(vertices, window_normals(vertices)):
                assert (center - vertex).dot(normal) < 0
                assert normal.length == pytest.approx(1.0)

    def test_degenerate_window(self):
        with pytest.raises(ShapePreconditionError, match="at least 3 different"):
            clip_line([(0, 0), (1, 1)], [(0, 0), (1, 1), (1, 1), (0, 0)])

    def test_non_convex_window(self):
        window = [(0, 0), (4, 0), (4, 4), (2, 1), (0, 4), (0, 0)]
        with pytest.raises(ShapePreconditionError, match="not convex"):
            clip_line([(0, 0), (1, 1)], window)

    def test_collinear_window(self):
        with pytest.raises(ShapePreconditionError):
            clip_line([(0, 0), (1, 1)], [(0, 0), (1, 0), (2, 0)])

    def test_none_window(self):
        with pytest.raises(NullArgumentError, match="clipping window is null"):
            clip_line([(0, 0), (1, 1)], None)


class TestClipSegment:
    """Tests for clip_segment()."""

    def test_unclipped_end_points_are_exact(self):
        window = window_coordinates(SQUARE)
        normals = window_normals(window)
        first, second = Coordinate(0.1, 0.3), Coordinate(3.7, 2.9)
        assert clip_segment(first, second, window, normals) == (first, second)

    def test_rejected_segment(self):
        window = window_coordinates(SQUARE)
        normals = window_normals(window)
        assert clip_segment(Coordinate(5, 5), Coordinate(6, 7), window, normals) is None


class TestSegmentClipper:
    """Tests for SegmentClipper and clip_lines()."""

    def test_one_entry_per_missed_line(self):
        result = clip_lines([[(-5, -5), (-1, -1)], [(1, 1), (2, 2)]], SQUARE)
        assert len(result) == 2
        assert result[0] == ()
        assert len(result.visible) == 1

    def test_result_is_cached(self):
        clipper = SegmentClipper([[(-1, 2), (5, 2)]], SQUARE)
        assert clipper.result is clipper.result
        assert isinstance(clipper.result, ClipResult)

    def test_window_validated_eagerly(self):
        with pytest.raises(ShapePreconditionError):
            SegmentClipper([], [(0, 0), (1, 0), (0, 0)])

    def test_properties(self):
        clipper = SegmentClipper([[(0, 0), (1, 1)]], Envelope(0, 0, 4, 4))
        assert len(clipper.window) == 4
        assert clipper.source == ((Coordinate(0, 0), Coordinate(1, 1)),)


class TestClipPolygon:
    """Tests for clip_polygon() and clip_polygons()."""

    def test_polygon_partially_inside(self):
        polygon = Polygon([(2, 2), (6, 2), (6, 6), (2, 6)])
        result = clip_polygon(polygon, SQUARE)
        assert result.to_shapely().length == pytest.approx(4.0)

    def test_polygon_with_hole(self):
        """Test that the shell and holes are clipped as separate lines."""
        polygon = Polygon(
            [(-1, -1), (5, -1), (5, 5), (-1, 5)],
            holes=[[(1, 1), (3, 1), (3, 3), (1, 3)]],
        )
        result = clip_polygon(polygon, Envelope(0, 0, 4, 4))
        assert len(result) == 2
        assert result[0] == ()
        assert len(result[1]) == 5
        assert result[1][0] == result[1][-1]

    def test_explicit_holes(self):
        shell = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]
        hole = [(1, 1), (2, 1), (2, 2), (1, 2), (1, 1)]
        result = clip_polygon(shell, SQUARE, holes=[hole])
        assert len(result.visible) == 3

    def test_many_polygons(self):
        polygons = [
            box(1, 1, 2, 2),
            None,
            ([(10, 10), (11, 10), (11, 11), (10, 10)], []),
        ]
        result = clip_polygons(polygons, Envelope(0, 0, 4, 4))
        assert len(result) == 2
        assert result.to_shapely().length == pytest.approx(4.0)

    def test_none_polygons(self):
        with pytest.raises(NullArgumentError):
            clip_polygons(None, SQUARE)
