"""Tests for the control point set in bce.curve_point"""

import numpy as np
import pytest

from bce.curve_point import BcCurvePoint, BcCurvePointSet


@pytest.fixture(name="three_points")
def fixture_three_points():
    """Point set with points at x = 0, 500 and 1000"""
    point_set = BcCurvePointSet()
    point_set.add_point(0.0, 1000.0)
    point_set.add_point(1000.0, 0.0)
    point_set.add_point(500.0, 500.0)
    return point_set


class TestBcCurvePoint:
    """Test cases for BcCurvePoint"""

    def test_coincides_with(self):
        """Points closer than the tolerance coincide"""
        point = BcCurvePoint(100.0, 5.0)
        assert point.coincides_with(100.05)
        assert point.coincides_with(99.95)
        assert not point.coincides_with(100.2)
        assert not point.coincides_with(100.5, tolerance=0.2)

    def test_identity_not_value_equality(self):
        """Two points at the same position are different points"""
        assert BcCurvePoint(1.0, 2.0) != BcCurvePoint(1.0, 2.0)

    def test_defaults(self):
        """A new point is inactive and has no handle"""
        point = BcCurvePoint(1, 2)
        assert point.position == (1.0, 2.0)
        assert point.handle is None
        assert not point.active


class TestBcCurvePointSetAdd:
    """Test cases for adding points"""

    def test_default_anchors(self):
        """The default set holds the two anchors"""
        point_set = BcCurvePointSet.with_default_anchors()
        assert [p.position for p in point_set] == [(0.0, 1000.0), (1000.0, 0.0)]

    def test_sorted_after_adds_and_removes(self):
        """The set stays strictly ascending by x"""
        point_set = BcCurvePointSet.with_default_anchors()
        added = [point_set.add_point(x, 10.0) for x in (700.0, 20.0, 350.0, 999.0, 1.5)]
        assert point_set.is_sorted()

        point_set.remove_point(added[2])
        point_set.remove_point(added[0])
        point_set.add_point(123.0, 4.0)

        assert point_set.is_sorted()
        assert [p.x for p in point_set] == [0.0, 1.5, 20.0, 123.0, 999.0, 1000.0]

    def test_coincident_add_returns_existing(self):
        """Adding at a coinciding x returns the existing point with unchanged y"""
        point_set = BcCurvePointSet()
        first = point_set.add_point(300.0, 10.0)
        second = point_set.add_point(300.05, 99.0)

        assert second is first
        assert first.y == 10.0
        assert first.x == 300.0
        assert len(point_set) == 1

    def test_add_outside_domain_accepted(self):
        """x is not checked against the domain bounds when adding"""
        point_set = BcCurvePointSet.with_default_anchors()
        point = point_set.add_point(-50.0, 3.0)
        assert point_set[0] is point
        assert point_set.get_min_value(point) == 0.0


class TestBcCurvePointSetRemove:
    """Test cases for removing points"""

    def test_remove(self, three_points):
        """Removing a point drops it from the set"""
        middle = three_points[1]
        three_points.remove_point(middle)
        assert middle not in three_points
        assert len(three_points) == 2

    def test_remove_unknown_point_is_noop(self, three_points):
        """Removing a point that is not part of the set does nothing"""
        three_points.remove_point(BcCurvePoint(500.0, 500.0))
        assert len(three_points) == 3

    def test_remove_by_identity(self):
        """Only the given object is removed"""
        point_set = BcCurvePointSet()
        point = point_set.add_point(10.0, 0.0)
        stranger = BcCurvePoint(10.0, 0.0)
        point_set.remove_point(stranger)
        assert point in point_set


class TestBcCurvePointSetBounds:
    """Test cases for the movement bounds"""

    def test_middle_point_bounds(self, three_points):
        """Inner points are bounded by their neighbors"""
        middle = three_points[1]
        assert three_points.get_bounds(middle) == (0.0, 1000.0)

    def test_bounds_after_insert(self, three_points):
        """Bounds follow the current neighbors"""
        middle = three_points[1]
        three_points.add_point(250.0, 0.0)
        assert three_points.get_min_value(middle) == 250.0
        assert three_points.get_max_value(middle) == 1000.0

    def test_end_points_use_domain_bounds(self):
        """The first and last point are bounded by min_value and max_value"""
        point_set = BcCurvePointSet(min_value=-10.0, max_value=20.0)
        first = point_set.add_point(0.0, 0.0)
        last = point_set.add_point(5.0, 0.0)
        assert point_set.get_bounds(first) == (-10.0, 5.0)
        assert point_set.get_bounds(last) == (0.0, 20.0)

    def test_bounds_of_removed_point_fail(self, three_points):
        """Asking for the bounds of a stale point is an error"""
        middle = three_points[1]
        three_points.remove_point(middle)
        with pytest.raises(ValueError):
            three_points.get_bounds(middle)
        with pytest.raises(ValueError):
            three_points.index_of(middle)


class TestBcCurvePointSetMove:
    """Test cases for moving points"""

    @pytest.mark.parametrize(
        "new_x, expected_x",
        [
            (250.0, 200.0 - 0.0001),
            (200.0, 200.0 - 0.0001),
            (50.0, 100.0 + 0.0001),
            (100.0, 100.0),
            (150.0, 150.0),
        ],
    )
    def test_clamp(self, new_x, expected_x):
        """x is clamped into the given bounds, y is taken as is"""
        point_set = BcCurvePointSet()
        point = point_set.add_point(150.0, 0.0)

        point_set.move_point(point, new_x, -42.0, 100.0, 200.0)

        assert point.x == expected_x
        assert point.y == -42.0

    def test_move_keeps_order(self, three_points):
        """Moving within the snapshot bounds never reorders the points"""
        middle = three_points[1]
        min_value, max_value = three_points.get_bounds(middle)
        for x in (-100.0, 1500.0, 999.99999, 0.5):
            three_points.move_point(middle, x, 1.0, min_value, max_value)
            assert three_points[1] is middle
            assert three_points.is_sorted()

    def test_to_array(self, three_points):
        """The control polygon is an (n, 2) array"""
        points = three_points.to_array()
        assert points.shape == (3, 2)
        assert np.array_equal(points[:, 0], [0.0, 500.0, 1000.0])

    def test_to_array_empty(self):
        """An empty set gives an empty (0, 2) array"""
        assert BcCurvePointSet().to_array().shape == (0, 2)
