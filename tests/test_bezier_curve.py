"""Test module for BezierCurve class in bce.bezier

The tests are run using pytest.
These tests ensure that the evaluation of Bezier curves of arbitrary degree
keeps working after changes and refactoring.
"""

import numpy as np
import pytest

from bce.bezier import BezierCurve

###############################################################################
# Point Evaluation Tests
###############################################################################


class TestBezierEvaluatePoint:
    """Test evaluation of single curve points."""

    def test_single_control_point(self):
        """A single control point is returned for every t."""
        assert BezierCurve.evaluate_point(0.3, [(4.0, 5.0)]) == (4.0, 5.0)

    def test_linear_curve_midpoint(self):
        """A two point curve is a straight line."""
        x, y = BezierCurve.evaluate_point(0.5, [(0.0, 1000.0), (1000.0, 0.0)])
        assert x == pytest.approx(500.0)
        assert y == pytest.approx(500.0)

    def test_quadratic_curve_matches_formula(self):
        """Three control points give a quadratic curve."""
        points = [(0.0, 0.0), (50.0, 200.0), (200.0, 0.0)]
        t = 0.3
        omt = 1.0 - t
        expected_x = omt**2 * 0.0 + 2 * omt * t * 50.0 + t**2 * 200.0
        expected_y = omt**2 * 0.0 + 2 * omt * t * 200.0 + t**2 * 0.0

        x, y = BezierCurve.evaluate_point(t, points)

        assert x == pytest.approx(expected_x)
        assert y == pytest.approx(expected_y)

    def test_cubic_curve_matches_formula(self):
        """Four control points give a cubic curve."""
        points = [(0.0, 0.0), (5.0, 20.0), (15.0, 20.0), (20.0, 0.0)]
        t = 0.75
        omt = 1.0 - t
        basis = [omt**3, 3 * omt**2 * t, 3 * omt * t**2, t**3]
        expected = np.sum(np.array(points) * np.array(basis)[:, np.newaxis], axis=0)

        assert np.allclose(BezierCurve.evaluate_point(t, points), expected)

    def test_many_control_points(self):
        """High degrees are evaluated without exponential cost."""
        points = [(float(i), float(i % 2)) for i in range(40)]
        x, _ = BezierCurve.evaluate_point(0.5, points)
        # x-coordinates are equally spaced, so the curve is linear in x
        assert x == pytest.approx(19.5)

    def test_no_control_points(self):
        """An empty control polygon is rejected."""
        with pytest.raises(ValueError):
            BezierCurve.evaluate_point(0.5, [])


###############################################################################
# Polygonization Tests
###############################################################################


class TestBezierPolygonize:
    """Test polygonization of whole curves."""

    @pytest.mark.parametrize("steps", [1, 7, 256])
    def test_endpoints_are_exact(self, steps):
        """The first and last samples are the end control points."""
        result = BezierCurve.polygonize_curve([(0.0, 1000.0), (1000.0, 0.0)], steps)

        assert result.shape == (steps + 1, 2)
        assert tuple(result[0]) == (0.0, 1000.0)
        assert tuple(result[-1]) == (1000.0, 0.0)

    def test_endpoints_exact_for_higher_degree(self):
        """Inner control points do not move the end samples."""
        points = [(0.0, 1000.0), (250.0, 17.3), (600.0, 812.1), (1000.0, 0.0)]
        for method in (BezierCurve.polygonize_curve_python, BezierCurve.polygonize_curve_numpy):
            result = method(points, 256)
            assert tuple(result[0]) == (0.0, 1000.0)
            assert tuple(result[-1]) == (1000.0, 0.0)

    def test_samples_use_parameter_i_over_steps(self):
        """Sample i is the curve point at t = i / steps."""
        points = [(0.0, 0.0), (50.0, 200.0), (200.0, 0.0)]
        result = BezierCurve.polygonize_curve(points, 10)
        for i in (0, 3, 10):
            assert np.allclose(result[i], BezierCurve.evaluate_point(i / 10, points))

    def test_deterministic(self):
        """Evaluating twice with the same input gives identical output."""
        points = [(0.0, 1000.0), (300.0, 900.0), (700.0, 100.0), (1000.0, 0.0)]
        first = BezierCurve.polygonize_curve(points, 256)
        second = BezierCurve.polygonize_curve(points, 256)
        assert np.array_equal(first, second)

    def test_input_not_modified(self):
        """The control points are not changed by the evaluation."""
        points = np.array([[0.0, 1000.0], [500.0, 500.0], [1000.0, 0.0]])
        copy = points.copy()
        BezierCurve.polygonize_curve_numpy(points, 16)
        BezierCurve.polygonize_curve_python(points, 16)
        assert np.array_equal(points, copy)

    @pytest.mark.parametrize("count", [1, 2, 3, 5, 12])
    def test_python_and_numpy_agree(self, count):
        """Both implementations compute the same curve."""
        rng = np.random.default_rng(count)
        points = rng.uniform(0.0, 1000.0, size=(count, 2))

        result_python = BezierCurve.polygonize_curve_python(points, 64)
        result_numpy = BezierCurve.polygonize_curve_numpy(points, 64)

        assert np.allclose(result_python, result_numpy, rtol=0.0, atol=1e-9)

    def test_large_input_uses_numpy_result(self):
        """Dispatching to NumPy for large problems gives the same curve."""
        points = [(float(x), float(x % 3)) for x in range(0, 1000, 50)]
        result = BezierCurve.polygonize_curve(points, 256)
        assert result.shape == (257, 2)
        assert result.dtype == np.float64
        assert np.allclose(result, BezierCurve.polygonize_curve_numpy(points, 256))

    def test_invalid_steps(self):
        """At least one step is required."""
        with pytest.raises(ValueError):
            BezierCurve.polygonize_curve([(0.0, 0.0), (1.0, 1.0)], 0)

    def test_invalid_point_format(self):
        """Points must be (x, y)."""
        with pytest.raises(ValueError):
            BezierCurve.polygonize_curve([(0.0, 0.0, 0.0), (1.0, 1.0, 0.0)], 4)

    def test_empty_control_polygon(self):
        """An empty control polygon is rejected."""
        with pytest.raises(ValueError):
            BezierCurve.polygonize_curve(np.empty((0, 2)), 4)
