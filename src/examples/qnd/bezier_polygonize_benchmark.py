# bezier_polygonize_benchmark.py
# Run with: python bezier_polygonize_benchmark.py

import timeit

import numpy as np

from bce.bezier import BezierCurve

STEPS = 256
POINT_COUNTS = [2, 3, 4, 6, 8, 12, 16, 24, 32]


def control_points(count: int) -> np.ndarray:
    """count control points spread over the domain [0, 1000] on a zigzag"""
    x = np.linspace(0.0, 1000.0, count)
    y = np.where(np.arange(count) % 2 == 0, 1000.0, 0.0)
    return np.column_stack((x, y))


def main(repeat: int = 5):
    print(f"{'points':>6} {'python [ms]':>12} {'numpy [ms]':>12} {'max diff':>10}")
    for count in POINT_COUNTS:
        points = control_points(count)
        t_python = timeit.timeit(lambda: BezierCurve.polygonize_curve_python(points, STEPS), number=repeat)
        t_numpy = timeit.timeit(lambda: BezierCurve.polygonize_curve_numpy(points, STEPS), number=repeat)
        diff = np.max(
            np.abs(BezierCurve.polygonize_curve_python(points, STEPS) - BezierCurve.polygonize_curve_numpy(points, STEPS))
        )
        print(f"{count:>6} {1000 * t_python / repeat:>12.3f} {1000 * t_numpy / repeat:>12.3f} {diff:>10.2e}")


if __name__ == "__main__":
    main()
