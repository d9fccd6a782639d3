"""Tests for winding-number point containment."""

import numpy as np
import pytest
from shapely.geometry import MultiPoint, Point, Polygon

from geomforge import (
    BoundaryStatus,
    ContainmentResult,
    Location,
    NullArgumentError,
    PointContainmentTester,
    PrecisionModel,
    ShapePreconditionError,
    is_inside_polygon,
    locate,
    winding_number,
)


SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]

# U shape opening upwards, the notch spans 2 < x < 4, y > 2
NOTCHED = [(0, 0), (6, 0), (6, 6), (4, 6), (4, 2), (2, 2), (2, 6), (0, 6), (0, 0)]

FRAME = Polygon(
    [(0, 0), (10, 0), (10, 10), (0, 10)],
    holes=[[(4, 4), (6, 4), (6, 6), (4, 6)]],
)


class TestWindingNumber:
    """Tests for winding_number()."""

    def test_inside_square(self):
        assert winding_number(SQUARE, (2, 2)) != 0

    def test_outside_square(self):
        assert winding_number(SQUARE, (5, 5)) == 0

    def test_clockwise_ring_winds_negative(self):
        assert winding_number(list(reversed(SQUARE)), (2, 2)) == -1

    def test_counter_clockwise_ring_winds_positive(self):
        assert winding_number(SQUARE, (2, 2)) == 1

    def test_concave_ring(self):
        assert winding_number(NOTCHED, (3, 4)) == 0
        assert winding_number(NOTCHED, (1, 4)) == 1
        assert winding_number(NOTCHED, (3, 1)) == 1

    def test_point_level_with_vertex(self):
        """Test that a horizontal ray through a vertex is counted once."""
        diamond = [(2, 0), (4, 2), (2, 4), (0, 2), (2, 0)]
        assert winding_number(diamond, (1, 2)) == 1
        assert winding_number(diamond, (5, 2)) == 0

    def test_shapely_polygon_shell(self):
        assert winding_number(Polygon(SQUARE), (1, 1)) == 1


class TestPointContainmentTester:
    """Tests for PointContainmentTester."""

    def test_boundary_found_by_crossing(self):
        """Test that a collinear crossing flags the boundary without verification."""
        result = PointContainmentTester(SQUARE, (0, 2)).result
        assert result.boundary is BoundaryStatus.ON_BOUNDARY
        assert result.location is Location.ON_BOUNDARY

    def test_boundary_verification(self):
        """Test that a point on a horizontal edge needs the boundary scan."""
        tester = PointContainmentTester(SQUARE, (2, 4))
        assert tester.result.boundary is BoundaryStatus.UNKNOWN

        tester.verify_boundary = True
        assert tester.result.boundary is BoundaryStatus.ON_BOUNDARY

    def test_off_boundary(self):
        result = PointContainmentTester(SQUARE, (2, 2), verify_boundary=True).result
        assert result.boundary is BoundaryStatus.OFF_BOUNDARY
        assert result.is_inside
        assert result.location is Location.INSIDE

    def test_unknown_boundary_without_verification(self):
        result = PointContainmentTester(SQUARE, (2, 2)).result
        assert result.boundary is BoundaryStatus.UNKNOWN
        assert result.location is Location.INSIDE

    def test_coordinate_setter_invalidates(self):
        tester = PointContainmentTester(SQUARE, (2, 2))
        first = tester.result
        assert first.winding_number == 1

        tester.coordinate = (5, 5)
        assert tester.result.winding_number == 0
        assert tester.result is not first

    def test_same_coordinate_keeps_cache(self):
        tester = PointContainmentTester(SQUARE, (2, 2))
        first = tester.result
        tester.coordinate = (2.0, 2.0)
        assert tester.result is first

    def test_result_is_cached(self):
        tester = PointContainmentTester(SQUARE, (2, 2))
        assert tester.result is tester.result

    def test_vertex_is_boundary(self):
        result = PointContainmentTester(SQUARE, (4, 4), verify_boundary=True).result
        assert result.is_on_boundary

    def test_fixed_precision(self):
        """Test that a coordinate snapped onto an edge is on the boundary."""
        tester = PointContainmentTester(SQUARE, (0.3, 2), True, PrecisionModel.fixed(1.0))
        assert tester.result.is_on_boundary

    def test_short_ring(self):
        with pytest.raises(ShapePreconditionError, match="at least 3 different"):
            PointContainmentTester([(0, 0), (1, 0), (0, 0)], (0, 0))

    def test_open_ring(self):
        with pytest.raises(ShapePreconditionError, match="must be equal"):
            PointContainmentTester([(0, 0), (4, 0), (4, 4), (0, 4)], (1, 1))

    def test_none_arguments(self):
        with pytest.raises(NullArgumentError, match="shell"):
            PointContainmentTester(None, (1, 1))
        with pytest.raises(NullArgumentError, match="coordinate"):
            PointContainmentTester(SQUARE, None)

    def test_none_coordinate_setter(self):
        tester = PointContainmentTester(SQUARE, (1, 1))
        with pytest.raises(NullArgumentError):
            tester.coordinate = None


class TestPolygonContainment:
    """Tests for is_inside_polygon() and locate()."""

    def test_inside_frame(self):
        assert is_inside_polygon(FRAME, (1, 1))

    def test_inside_hole(self):
        assert not is_inside_polygon(FRAME, (5, 5))

    def test_outside_shell(self):
        assert not is_inside_polygon(FRAME, (11, 5))

    def test_explicit_holes(self):
        shell = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]
        hole = [(4, 4), (6, 4), (6, 6), (4, 6), (4, 4)]
        assert is_inside_polygon(shell, (1, 1), holes=[hole])
        assert not is_inside_polygon(shell, (5, 5), holes=[hole])

    def test_locate(self):
        assert locate(FRAME, (1, 1)) is Location.INSIDE
        assert locate(FRAME, (5, 5)) is Location.OUTSIDE
        assert locate(FRAME, (20, 5)) is Location.OUTSIDE
        assert locate(FRAME, (0, 5)) is Location.ON_BOUNDARY
        assert locate(FRAME, (5, 10)) is Location.ON_BOUNDARY

    def test_locate_on_hole_boundary(self):
        assert locate(FRAME, (4, 5)) is Location.ON_BOUNDARY
        assert locate(FRAME, (5, 4)) is Location.ON_BOUNDARY

    def test_invalid_hole_fails_eagerly(self):
        """Test that an invalid hole is reported even for a point outside the shell."""
        with pytest.raises(ShapePreconditionError, match="hole"):
            is_inside_polygon(SQUARE, (20, 20), holes=[[(1, 1), (2, 1), (2, 2)]])

    def test_matches_shapely(self):
        """Test agreement with Shapely away from the boundary."""
        rng = np.random.default_rng(3)
        polygon = MultiPoint([tuple(p) for p in rng.uniform(0, 10, size=(30, 2))]).convex_hull
        for x, y in rng.uniform(-2, 12, size=(300, 2)):
            point = Point(x, y)
            if polygon.exterior.distance(point) < 1e-6:
                continue
            assert is_inside_polygon(polygon, (x, y)) == polygon.contains(point)


class TestContainmentResult:
    """Tests for ContainmentResult."""

    def test_location_from_winding(self):
        assert ContainmentResult(0).location is Location.OUTSIDE
        assert ContainmentResult(2).location is Location.INSIDE
        assert ContainmentResult(1, BoundaryStatus.ON_BOUNDARY).location is Location.ON_BOUNDARY

    def test_boundary_point_not_inside(self):
        assert not ContainmentResult(1, BoundaryStatus.ON_BOUNDARY).is_inside
