"""Curve editor: the point set, the evaluated curve and change notification."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from bce.bezier import BezierCurve
from bce.consts import BcEditorConfig
from bce.curve_point import BcCurvePoint, BcCurvePointSet
from bce.projector import BcCursorProjector

logger = logging.getLogger(__name__)

CurveListener = Callable[[NDArray[np.float64]], None]


class BcCurveEditor:
    """
    Core of a Bezier curve editor.

    The editor owns the control points and the last evaluated curve. Every
    mutation re-evaluates the curve in full and passes it to the registered
    listeners (usually the renderer). Gesture state such as the point being
    dragged is kept by the caller, see BcInteractionController.
    """

    def __init__(self, config: Optional[BcEditorConfig] = None):
        """
        Initialize the editor with the two anchor points of the configuration.

        Args:
            config (BcEditorConfig, optional): Editor configuration. Defaults to BcEditorConfig().
        """
        self.config: BcEditorConfig = (config if config is not None else BcEditorConfig()).validate()
        self._points = BcCurvePointSet.with_default_anchors(
            min_value=self.config.min_value,
            max_value=self.config.max_value,
            start_y=self.config.start_y,
            end_y=self.config.end_y,
            coincidence_tolerance=self.config.coincidence_tolerance,
            clamp_epsilon=self.config.clamp_epsilon,
        )
        self._projector = BcCursorProjector(self.config.probe_y_min, self.config.probe_y_max)
        self._listeners: List[CurveListener] = []
        self._curve: Optional[NDArray[np.float64]] = None

    @property
    def control_points(self) -> BcCurvePointSet:
        """BcCurvePointSet: The control points, sorted ascending by x."""
        return self._points

    @property
    def curve(self) -> Optional[NDArray[np.float64]]:
        """The last evaluated curve or None if nothing was evaluated yet."""
        return self._curve

    def add_listener(self, listener: CurveListener) -> None:
        """Register a callable that receives the curve after every change."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: CurveListener) -> None:
        """Unregister a listener. Does nothing if it is not registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def add_point(self, x: float, y: float) -> BcCurvePoint:
        """Add a control point, returning an existing one if it coincides in x."""
        point = self._points.add_point(x, y)
        self._changed()
        return point

    def begin_move(self, point: BcCurvePoint) -> Tuple[float, float]:
        """
        Start moving a point.

        Returns:
            Tuple[float, float]: The bounds (min, max) to use for the whole gesture
        """
        bounds = self._points.get_bounds(point)
        logger.debug("Begin move of %r within %s", point, bounds)
        return bounds

    def move_point(self, point: BcCurvePoint, x: float, y: float, min_value: float, max_value: float) -> None:
        """Move a point within the bounds returned by begin_move()."""
        self._points.move_point(point, x, y, min_value, max_value)
        self._changed()

    def end_move(self, point: BcCurvePoint) -> None:
        """Finish moving a point."""
        logger.debug("End move of %r", point)

    def remove_point(self, point: BcCurvePoint) -> None:
        """Remove a control point."""
        self._points.remove_point(point)
        self._changed()

    def evaluate(self, sample_count: Optional[int] = None) -> NDArray[np.float64]:
        """
        Evaluate the curve of the current control points.

        Args:
            sample_count (int, optional): Number of segments. Defaults to config.sample_count.

        Returns:
            NDArray[np.float64]: The approximated curve, shape (sample_count+1, 2),
                or an empty curve of shape (0, 2) if all points were removed
        """
        if sample_count is None:
            sample_count = self.config.sample_count
        if len(self._points) == 0:
            self._curve = np.empty((0, 2), dtype=np.float64)
        else:
            self._curve = BezierCurve.polygonize_curve(self._points.to_array(), sample_count)
        return self._curve

    def project_y(self, cursor_x: float) -> Optional[float]:
        """Height of the last evaluated curve at cursor_x or None if the cursor does not hit it."""
        if self._curve is None:
            self.evaluate()
        return self._projector.project_y(self._curve, cursor_x)

    def _changed(self) -> None:
        curve = self.evaluate()
        for listener in list(self._listeners):
            listener(curve)
