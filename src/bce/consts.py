"""Central module containing constants and the editor configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass

###############################################################################
# Consts
###############################################################################

MIN_VALUE: float = 0.0  # lower bound of the horizontal domain
MAX_VALUE: float = 1000.0  # upper bound of the horizontal domain
START_Y: float = 1000.0  # y of the anchor at MIN_VALUE
END_Y: float = 0.0  # y of the anchor at MAX_VALUE

SAMPLE_COUNT: int = 256  # number of line segments of the approximated curve
COINCIDENCE_TOLERANCE: float = 0.1  # points closer than this in x are the same point
CLAMP_EPSILON: float = 0.0001  # margin kept between a moved point and its neighbors

PROBE_Y_MIN: float = 0.0  # vertical extent of the cursor probe line
PROBE_Y_MAX: float = 1000.0

DOT_RADIUS: float = 10.0  # radius of a control point dot (hit target)
ACTIVE_COLOR: str = "blue"
INACTIVE_COLOR: str = "red"
GHOST_COLOR: str = "gray"
CURVE_COLOR: str = "black"


###############################################################################
# BcEditorConfig
###############################################################################
@dataclass
class BcEditorConfig:
    """
    Configuration of a curve editor.

    Attributes:
        min_value (float): Lower bound for the x-coordinate of the first point.
        max_value (float): Upper bound for the x-coordinate of the last point.
        start_y (float): y-coordinate of the anchor placed at min_value.
        end_y (float): y-coordinate of the anchor placed at max_value.
        sample_count (int): Number of segments used to approximate the curve.
        coincidence_tolerance (float): x-distance below which two points coincide.
        clamp_epsilon (float): Margin between a moved point and its bounds.
        probe_y_min (float): Lower end of the vertical cursor probe.
        probe_y_max (float): Upper end of the vertical cursor probe.
        dot_radius (float): Radius of a control point dot.
    """

    min_value: float = MIN_VALUE
    max_value: float = MAX_VALUE
    start_y: float = START_Y
    end_y: float = END_Y
    sample_count: int = SAMPLE_COUNT
    coincidence_tolerance: float = COINCIDENCE_TOLERANCE
    clamp_epsilon: float = CLAMP_EPSILON
    probe_y_min: float = PROBE_Y_MIN
    probe_y_max: float = PROBE_Y_MAX
    dot_radius: float = DOT_RADIUS

    def validate(self) -> BcEditorConfig:
        """Check the configuration values.

        Returns:
            BcEditorConfig: self, to allow chaining

        Raises:
            ValueError: If a value is out of its valid range
        """
        if self.min_value >= self.max_value:
            raise ValueError(f"min_value ({self.min_value}) must be less than max_value ({self.max_value})")
        if self.sample_count < 1:
            raise ValueError(f"sample_count must be at least 1, got {self.sample_count}")
        if self.coincidence_tolerance <= 0.0:
            raise ValueError(f"coincidence_tolerance must be positive, got {self.coincidence_tolerance}")
        if self.clamp_epsilon <= 0.0:
            raise ValueError(f"clamp_epsilon must be positive, got {self.clamp_epsilon}")
        if self.probe_y_min > self.probe_y_max:
            raise ValueError(f"probe_y_min ({self.probe_y_min}) must not exceed probe_y_max ({self.probe_y_max})")
        if self.dot_radius < 0.0:
            raise ValueError(f"dot_radius must not be negative, got {self.dot_radius}")
        return self

    @classmethod
    def from_dict(cls, data: dict) -> BcEditorConfig:
        """Create a BcEditorConfig from a dictionary, missing keys use the defaults."""
        return cls(
            min_value=float(data.get("min_value", MIN_VALUE)),
            max_value=float(data.get("max_value", MAX_VALUE)),
            start_y=float(data.get("start_y", START_Y)),
            end_y=float(data.get("end_y", END_Y)),
            sample_count=int(data.get("sample_count", SAMPLE_COUNT)),
            coincidence_tolerance=float(data.get("coincidence_tolerance", COINCIDENCE_TOLERANCE)),
            clamp_epsilon=float(data.get("clamp_epsilon", CLAMP_EPSILON)),
            probe_y_min=float(data.get("probe_y_min", PROBE_Y_MIN)),
            probe_y_max=float(data.get("probe_y_max", PROBE_Y_MAX)),
            dot_radius=float(data.get("dot_radius", DOT_RADIUS)),
        ).validate()

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary."""
        return asdict(self)
