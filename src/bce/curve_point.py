"""Control points of the curve and the ordered set holding them."""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from bce.common import Point2D
from bce.consts import CLAMP_EPSILON, COINCIDENCE_TOLERANCE, END_Y, MAX_VALUE, MIN_VALUE, START_Y

logger = logging.getLogger(__name__)


###############################################################################
# BcCurvePoint
###############################################################################
class BcCurvePoint:
    """
    A control point of the curve in curve-domain coordinates.

    Points are compared by identity. Two points at nearly the same x are
    still two objects; the point set prevents them from coexisting.

    Attributes:
        x (float): The x-coordinate.
        y (float): The y-coordinate.
        handle (Any): Opaque slot for the renderer's visual of this point.
        active (bool): True while the point is captured by a drag gesture.
    """

    __slots__ = ("x", "y", "handle", "active")

    def __init__(self, x: float, y: float, handle: Optional[Any] = None):
        self.x: float = float(x)
        self.y: float = float(y)
        self.handle: Optional[Any] = handle
        self.active: bool = False

    @property
    def position(self) -> Point2D:
        """Point2D: The point as (x, y)."""
        return self.x, self.y

    def coincides_with(self, x: float, tolerance: float = COINCIDENCE_TOLERANCE) -> bool:
        """True if the given x-coordinate is closer than tolerance to the point's x."""
        return abs(self.x - x) < tolerance

    def __repr__(self):
        return f"BcCurvePoint(x={self.x}, y={self.y}, active={self.active})"


###############################################################################
# BcCurvePointSet
###############################################################################
class BcCurvePointSet:
    """
    Ordered collection of control points, sorted ascending by x.

    No two points of the set coincide (see BcCurvePoint.coincides_with).
    Every point may move within the open interval spanned by its neighbors,
    the first and last point are bounded by min_value and max_value.
    """

    def __init__(
        self,
        min_value: float = MIN_VALUE,
        max_value: float = MAX_VALUE,
        coincidence_tolerance: float = COINCIDENCE_TOLERANCE,
        clamp_epsilon: float = CLAMP_EPSILON,
    ):
        """
        Initialize an empty point set.

        Args:
            min_value (float, optional): Lower bound of the first point. Defaults to 0.
            max_value (float, optional): Upper bound of the last point. Defaults to 1000.
            coincidence_tolerance (float, optional): Points closer than this in x coincide. Defaults to 0.1.
            clamp_epsilon (float, optional): Margin kept to the bounds when moving. Defaults to 0.0001.
        """
        self.min_value: float = min_value
        self.max_value: float = max_value
        self.coincidence_tolerance: float = coincidence_tolerance
        self.clamp_epsilon: float = clamp_epsilon
        self._points: List[BcCurvePoint] = []

    @classmethod
    def with_default_anchors(
        cls,
        min_value: float = MIN_VALUE,
        max_value: float = MAX_VALUE,
        start_y: float = START_Y,
        end_y: float = END_Y,
        **kwargs,
    ) -> BcCurvePointSet:
        """
        Create a point set holding the two anchors (min_value, start_y) and (max_value, end_y).

        Returns:
            BcCurvePointSet: The new point set
        """
        point_set = cls(min_value, max_value, **kwargs)
        point_set.add_point(min_value, start_y)
        point_set.add_point(max_value, end_y)
        return point_set

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[BcCurvePoint]:
        return iter(self._points)

    def __getitem__(self, index: int) -> BcCurvePoint:
        return self._points[index]

    def __contains__(self, point: object) -> bool:
        return any(p is point for p in self._points)

    def find_point(self, x: float) -> Optional[BcCurvePoint]:
        """Return the first point coinciding with x or None."""
        for point in self._points:
            if point.coincides_with(x, self.coincidence_tolerance):
                return point
        return None

    def add_point(self, x: float, y: float) -> BcCurvePoint:
        """
        Add a point unless a coinciding point already exists.

        Adding is idempotent: if a point coincides with x, that existing point
        is returned unchanged and y is ignored. The x-coordinate is not checked
        against min_value and max_value.

        Args:
            x (float): The x-coordinate of the new point
            y (float): The y-coordinate of the new point

        Returns:
            BcCurvePoint: The inserted point or the existing coinciding point
        """
        candidate = BcCurvePoint(x, y)
        other = self.find_point(candidate.x)
        if other is not None:
            logger.debug("Point at x=%s coincides with %r, keep existing point", candidate.x, other)
            return other

        self._points.append(candidate)
        self._points.sort(key=lambda point: point.x)
        logger.debug("Added %r, %d points", candidate, len(self._points))
        return candidate

    def remove_point(self, point: BcCurvePoint) -> None:
        """Remove the given point (by identity). Does nothing if it is not in the set."""
        for index, other in enumerate(self._points):
            if other is point:
                del self._points[index]
                logger.debug("Removed %r, %d points", point, len(self._points))
                return

    def index_of(self, point: BcCurvePoint) -> int:
        """
        Index of the given point (by identity) in the sorted sequence.

        Raises:
            ValueError: If the point is not part of the set (e.g. a stale point after removal)
        """
        for index, other in enumerate(self._points):
            if other is point:
                return index
        raise ValueError(f"{point!r} is not part of the point set")

    def get_min_value(self, point: BcCurvePoint) -> float:
        """x-coordinate of the previous point, or min_value for the first point."""
        index = self.index_of(point)
        if index > 0:
            return self._points[index - 1].x
        return self.min_value

    def get_max_value(self, point: BcCurvePoint) -> float:
        """x-coordinate of the next point, or max_value for the last point."""
        index = self.index_of(point)
        if index < len(self._points) - 1:
            return self._points[index + 1].x
        return self.max_value

    def get_bounds(self, point: BcCurvePoint) -> Tuple[float, float]:
        """
        Snapshot of the x-range the point may occupy.

        The bounds are meant to be taken once at the start of a drag gesture
        and passed to every move_point() call of that gesture.

        Returns:
            Tuple[float, float]: (min, max)
        """
        return self.get_min_value(point), self.get_max_value(point)

    def move_point(self, point: BcCurvePoint, new_x: float, new_y: float, min_value: float, max_value: float) -> None:
        """
        Move a point, clamping x into the given bounds.

        x at or beyond max_value becomes max_value - clamp_epsilon, x below
        min_value becomes min_value + clamp_epsilon, y is taken as is.
        The order of the points is kept, so no re-sort happens.

        Args:
            point (BcCurvePoint): The point to move
            new_x (float): The requested x-coordinate
            new_y (float): The new y-coordinate
            min_value (float): Lower bound, usually from get_bounds()
            max_value (float): Upper bound, usually from get_bounds()
        """
        if new_x >= max_value:
            new_x = max_value - self.clamp_epsilon
        elif new_x < min_value:
            new_x = min_value + self.clamp_epsilon
        point.x = float(new_x)
        point.y = float(new_y)

    def is_sorted(self) -> bool:
        """True if the points are strictly ascending by x."""
        return all(p0.x < p1.x for p0, p1 in zip(self._points, self._points[1:]))

    def to_array(self) -> NDArray[np.float64]:
        """The control polygon as array of shape (n, 2)."""
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([point.position for point in self._points], dtype=np.float64)
