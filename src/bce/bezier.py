"""Bezier curve evaluation of arbitrary degree by recursive linear interpolation."""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from bce.common import ControlPolygon, as_control_array

# Work (samples * control points^2) up to which the pure Python variant is used
_PYTHON_WORK_LIMIT: int = 20_000


class BezierCurve:
    """Class to evaluate a Bezier curve defined by its whole control polygon.

    The degree of the curve is the number of control points minus one, so
    every added control point raises the degree of the curve.
    Provides a pure Python and a NumPy implementation of the same recursion.
    """

    @classmethod
    def evaluate_point(cls, t: float, control_points: ControlPolygon) -> Tuple[float, float]:
        """
        Evaluate the Bezier curve at parameter t (de Casteljau).

        B(index, 1)     = P[index]
        B(index, count) = (1-t) * B(index, count-1) + t * B(index+1, count-1)

        x and y are blended independently. Intermediate results are cached
        per call, which keeps the evaluation at O(n^2) for n control points.

        Args:
            t (float): Curve parameter, usually in [0, 1]
            control_points: Control points as sequence of (x, y) or array

        Returns:
            Tuple[float, float]: The point (x, y) of the curve at t

        Raises:
            ValueError: If there are no control points or they are not (x, y) formatted
        """
        points = [(float(x), float(y)) for x, y in as_control_array(control_points)]
        if not points:
            raise ValueError("At least one control point is required to evaluate a Bezier curve.")

        omt = 1.0 - t

        @lru_cache(maxsize=None)
        def bezier_point(index: int, count: int) -> Tuple[float, float]:
            if count == 1:
                return points[index]
            p0x, p0y = bezier_point(index, count - 1)
            p1x, p1y = bezier_point(index + 1, count - 1)
            return (omt * p0x + t * p1x, omt * p0y + t * p1y)

        return bezier_point(0, len(points))

    @classmethod
    def polygonize_curve_python(cls, control_points: ControlPolygon, steps: int) -> NDArray[np.float64]:
        """
        Polygonize the Bezier curve using pure Python, one recursion per sample.

        Args:
            control_points: Control points as sequence of (x, y) or array
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2) with the sampled points (x, y)
        """
        points_array = cls._check_input(control_points, steps)
        result = np.empty((steps + 1, 2), dtype=np.float64)
        for i in range(steps + 1):
            result[i] = cls.evaluate_point(i / steps, points_array)
        return result

    @classmethod
    def polygonize_curve_numpy(cls, control_points: ControlPolygon, steps: int) -> NDArray[np.float64]:
        """
        Polygonize the Bezier curve using NumPy for all samples at once.

        Runs the recursion of evaluate_point bottom-up: level k holds B(index, k)
        for every index and every sample, so the arithmetic is the same.

        Args:
            control_points: Control points as sequence of (x, y) or array
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2) with the sampled points (x, y)
        """
        points_array = cls._check_input(control_points, steps)

        t = (np.arange(steps + 1, dtype=np.float64) / steps)[np.newaxis, :, np.newaxis]
        omt = 1.0 - t

        # level shape: (number of sub-polygons, samples, 2)
        level = np.broadcast_to(points_array[:, np.newaxis, :], (len(points_array), steps + 1, 2))
        while level.shape[0] > 1:
            level = omt * level[:-1] + t * level[1:]

        return np.array(level[0], dtype=np.float64)

    @classmethod
    def polygonize_curve(cls, control_points: ControlPolygon, steps: int) -> NDArray[np.float64]:
        """
        Polygonize the Bezier curve into steps line segments.
        Uses pure Python for small problems, NumPy for larger ones.

        Args:
            control_points: Control points as sequence of (x, y) or array
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2) with the sampled points (x, y)
        """
        points_array = cls._check_input(control_points, steps)
        if (steps + 1) * len(points_array) ** 2 <= _PYTHON_WORK_LIMIT:
            return cls.polygonize_curve_python(points_array, steps)
        return cls.polygonize_curve_numpy(points_array, steps)

    @classmethod
    def _check_input(cls, control_points: ControlPolygon, steps: int) -> NDArray[np.float64]:
        if steps < 1:
            raise ValueError(f"Number of steps must be at least 1, got {steps}")
        points_array = as_control_array(control_points)
        if len(points_array) == 0:
            raise ValueError("At least one control point is required to polygonize a Bezier curve.")
        return points_array
