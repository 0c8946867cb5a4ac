"""Handling geometries"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from bce.common import ControlPolygon, as_control_array


###############################################################################
# BcBox
###############################################################################
@dataclass(frozen=True)
class BcBox:
    """
    Axis-aligned box in curve-domain coordinates, possibly degenerated to a
    line or a point. Corners given in any order are sorted on creation.
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self):
        x0, x1 = sorted((float(self.xmin), float(self.xmax)))
        y0, y1 = sorted((float(self.ymin), float(self.ymax)))
        object.__setattr__(self, "xmin", x0)
        object.__setattr__(self, "xmax", x1)
        object.__setattr__(self, "ymin", y0)
        object.__setattr__(self, "ymax", y1)

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def centroid(self) -> Tuple[float, float]:
        """Tuple[float, float]: The center of the box as (x, y)."""
        return (self.xmin + self.xmax) / 2, (self.ymin + self.ymax) / 2

    def intersection(self, other: BcBox) -> Optional[BcBox]:
        """
        The region covered by both boxes.

        Boxes touching at an edge or corner share a degenerated box.

        Returns:
            Optional[BcBox]: The shared region or None for disjoint boxes
        """
        xmin, xmax = max(self.xmin, other.xmin), min(self.xmax, other.xmax)
        ymin, ymax = max(self.ymin, other.ymin), min(self.ymax, other.ymax)
        if xmin > xmax or ymin > ymax:
            return None
        return BcBox(xmin, ymin, xmax, ymax)

    @classmethod
    def from_points(cls, points: ControlPolygon) -> BcBox:
        """Bounding box of (x, y) points.

        Raises:
            ValueError: If no points are given
        """
        points_array = as_control_array(points)
        if len(points_array) == 0:
            raise ValueError("Cannot create a bounding box of zero points.")
        (xmin, ymin), (xmax, ymax) = points_array.min(axis=0), points_array.max(axis=0)
        return cls(xmin, ymin, xmax, ymax)
