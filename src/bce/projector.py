"""Projection of a cursor x-coordinate onto the approximated curve."""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from bce.common import ControlPolygon, as_control_array
from bce.consts import PROBE_Y_MAX, PROBE_Y_MIN
from bce.geom import BcBox


class BcCursorProjector:
    """Intersects a vertical probe line with the approximated curve (a polyline)."""

    def __init__(self, probe_y_min: float = PROBE_Y_MIN, probe_y_max: float = PROBE_Y_MAX):
        """
        Args:
            probe_y_min (float, optional): Lower end of the vertical probe line. Defaults to 0.
            probe_y_max (float, optional): Upper end of the vertical probe line. Defaults to 1000.
        """
        self.probe_y_min = probe_y_min
        self.probe_y_max = probe_y_max

    def crossing_box(self, curve: ControlPolygon, cursor_x: float) -> Optional[BcBox]:
        """
        Region where the probe line at cursor_x crosses the curve.

        Segments are checked in curve order and the first segment whose closed
        x-range contains cursor_x is used. For a non-vertical segment the region
        is a single point, for a vertical segment it is the segment's part
        inside the probe. If the curve doubles back in x, later crossings are
        ignored.

        Args:
            curve: Sampled curve points (x, y) in curve order
            cursor_x (float): x-coordinate of the probe line

        Returns:
            Optional[BcBox]: The degenerated box of the crossing or None
        """
        curve_array: NDArray[np.float64] = as_control_array(curve)
        if len(curve_array) < 2:
            return None

        probe = BcBox(cursor_x, self.probe_y_min, cursor_x, self.probe_y_max)

        x0 = curve_array[:-1, 0]
        x1 = curve_array[1:, 0]
        candidates = np.flatnonzero((np.minimum(x0, x1) <= cursor_x) & (cursor_x <= np.maximum(x0, x1)))

        for index in candidates:
            (p0x, p0y), (p1x, p1y) = curve_array[index], curve_array[index + 1]
            if p0x == p1x:
                span = BcBox(cursor_x, p0y, cursor_x, p1y)
            else:
                t = (cursor_x - p0x) / (p1x - p0x)
                y = (1.0 - t) * p0y + t * p1y
                span = BcBox(cursor_x, y, cursor_x, y)
            crossing = span.intersection(probe)
            if crossing is not None:
                return crossing
        return None

    def project_y(self, curve: ControlPolygon, cursor_x: float) -> Optional[float]:
        """
        Height of the curve at cursor_x.

        Args:
            curve: Sampled curve points (x, y) in curve order
            cursor_x (float): x-coordinate of the cursor

        Returns:
            Optional[float]: The vertical midpoint of the first crossing, or None
                if the probe line does not cross the curve
        """
        crossing = self.crossing_box(curve, cursor_x)
        if crossing is None:
            return None
        return crossing.centroid[1]
