"""Central module containing shared types and enums of the curve editor."""

from __future__ import annotations

from enum import Enum, auto
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

###############################################################################
# Types
###############################################################################

Point2D = Tuple[float, float]  # (x, y) in curve-domain coordinates

ControlPolygon = Union[Sequence[Sequence[float]], NDArray[np.float64]]  # ordered control points (x, y)


###############################################################################
# Enums
###############################################################################


class PointerButton(Enum):
    """Enum to define the pointer buttons the editor reacts on."""

    PRIMARY = auto()  # add / capture a point
    SECONDARY = auto()  # remove a point


###############################################################################
# Functions
###############################################################################


def as_control_array(points: ControlPolygon) -> NDArray[np.float64]:
    """Convert a sequence of (x, y) points into an array of shape (n, 2).

    Args:
        points: Control points as sequence of (x, y) or array

    Returns:
        NDArray[np.float64]: The points as float64 array of shape (n, 2)

    Raises:
        ValueError: If the points are not formatted as (x, y)
    """
    points_array = np.asarray(points, dtype=np.float64)
    if points_array.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if points_array.ndim != 2 or points_array.shape[1] != 2:
        raise ValueError(f"Control points must be formatted as (x, y), got shape {points_array.shape}")
    return points_array
