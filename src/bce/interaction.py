"""Pointer gesture handling on top of a BcCurveEditor."""

from __future__ import annotations

import logging
from typing import Optional

from bce.common import Point2D, PointerButton
from bce.curve_point import BcCurvePoint
from bce.editor import BcCurveEditor

logger = logging.getLogger(__name__)


class BcInteractionController:
    """
    Translates raw pointer events into editor operations.

    Holds the gesture state: at most one active point (the point captured by
    the running drag) together with the bounds taken when it was captured,
    and the ghost point that previews the curve height under the cursor.

    Pointer events:
        - press(x, y, button): primary over a dot captures that point,
          primary elsewhere adds a point and captures it,
          secondary over a dot removes that point
        - drag(x, y): moves the active point, or updates the ghost point
        - release(): releases the active point
        - enter() / leave(): pointer enters or leaves the editor area
    """

    def __init__(self, editor: BcCurveEditor):
        self.editor: BcCurveEditor = editor
        self.active_point: Optional[BcCurvePoint] = None
        self.active_min: float = editor.config.min_value
        self.active_max: float = editor.config.max_value
        self.pointer_x: Optional[float] = None
        self.ghost_point: Optional[Point2D] = None
        self.ghost_visible: bool = False

    def hit_test(self, x: float, y: float) -> Optional[BcCurvePoint]:
        """The control point whose dot contains (x, y), or None."""
        radius_sq = self.editor.config.dot_radius**2
        for point in self.editor.control_points:
            if (point.x - x) ** 2 + (point.y - y) ** 2 <= radius_sq:
                return point
        return None

    def press(self, x: float, y: float, button: PointerButton = PointerButton.PRIMARY) -> Optional[BcCurvePoint]:
        """
        Pointer button pressed at (x, y).

        Returns:
            Optional[BcCurvePoint]: The captured point, or None if nothing was captured
        """
        self.pointer_x = x
        hit = self.hit_test(x, y)

        if button is PointerButton.SECONDARY:
            if hit is not None:
                if hit is self.active_point:
                    self._release_active()
                self.editor.remove_point(hit)
                self._update_ghost()
            return None

        if hit is not None:
            self._capture(hit)
            return hit

        if self.active_point is not None:
            return None

        self.ghost_visible = False
        self._capture(self.editor.add_point(x, y))
        return self.active_point

    def drag(self, x: float, y: float) -> None:
        """Pointer moved to (x, y)."""
        self.pointer_x = x
        if self.active_point is not None:
            self.editor.move_point(self.active_point, x, y, self.active_min, self.active_max)
            return
        self._update_ghost()

    def release(self) -> None:
        """Pointer button released."""
        self._release_active()
        self.ghost_visible = True
        self._update_ghost()

    def enter(self) -> None:
        """Pointer entered the editor area."""
        self.ghost_visible = True
        self._update_ghost()

    def leave(self) -> None:
        """Pointer left the editor area."""
        self._release_active()
        self.ghost_visible = False

    def _update_ghost(self) -> None:
        # ghost height always taken from the current curve
        ghost_y = None if self.pointer_x is None else self.editor.project_y(self.pointer_x)
        self.ghost_point = None if ghost_y is None else (self.pointer_x, ghost_y)

    def _capture(self, point: BcCurvePoint) -> None:
        if self.active_point is not None and self.active_point is not point:
            self._release_active()
        self.active_point = point
        point.active = True
        self.active_min, self.active_max = self.editor.begin_move(point)
        logger.debug("Captured %r", point)

    def _release_active(self) -> None:
        if self.active_point is None:
            return
        point = self.active_point
        self.active_point = None
        point.active = False
        self.editor.end_move(point)
        logger.debug("Released %r", point)
