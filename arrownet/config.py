"""
Tunable parameters for scheduling and layout.

The defaults reproduce the arrow diagram's built-in behaviour; callers pass
their own instances to ``ArrowNetworkEngine`` to change them.
"""

import math

# Float noise guard for total/free float
CRITICAL_EPSILON = 1e-4


class ConfigError(Exception):
    """Exception raised for invalid configuration values."""

    pass


def _check_positive(name, value, allow_zero=False):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name} must be a number")
    if not math.isfinite(value):
        raise ConfigError(f"{name} must be finite")
    if value < 0 or (value == 0 and not allow_zero):
        raise ConfigError(f"{name} must be {'>= 0' if allow_zero else '> 0'}")
    return value


class ScheduleConfig:
    """Options for the scheduler."""

    def __init__(
        self,
        strict: bool = True,
        epsilon: float = CRITICAL_EPSILON,
        max_critical_paths=1,
    ):
        """
        Args:
            strict: Raise UnknownNodeError for activities that reference a
                node id that was not supplied. When False such ids become
                implicit zero-state nodes.
            epsilon: Floats with an absolute value below this are clamped
                to exactly 0.
            max_critical_paths: How many critical paths to report. 1 uses
                a linear-time walk; larger values (or None for all)
                enumerate paths, which can take exponential time.
        """
        self.strict = bool(strict)
        self.epsilon = _check_positive("epsilon", epsilon)
        if max_critical_paths is not None and (
            isinstance(max_critical_paths, bool)
            or not isinstance(max_critical_paths, int)
            or max_critical_paths < 1
        ):
            raise ConfigError("max_critical_paths must be a positive integer or None")
        self.max_critical_paths = max_critical_paths

    def __repr__(self) -> str:
        return (
            f"ScheduleConfig(strict={self.strict}, epsilon={self.epsilon}, "
            f"max_critical_paths={self.max_critical_paths})"
        )


class LayoutConfig:
    """Pixel constants used by the layout engine."""

    def __init__(
        self,
        char_width: float = 8,
        label_padding: float = 40,
        min_scale: float = 24,
        max_scale: float = 120,
        padding: float = 100,
        y_step: float = 180,
        root_y: float = 300,
        root_spacing: float = 1.5,
        default_y: float = 300,
    ):
        """
        Args:
            char_width: Estimated rendered width of one label character
            label_padding: Extra width added to every label estimate
            min_scale: Lower bound for pixels per time unit
            max_scale: Upper bound for pixels per time unit
            padding: Left margin before time zero
            y_step: Vertical distance between sibling lanes
            root_y: y of the first start node
            root_spacing: Multiple of y_step between start nodes
            default_y: y for nodes the lane traversal never reaches

        Raises:
            ConfigError: If any value is invalid
        """
        self.char_width = _check_positive("char_width", char_width, allow_zero=True)
        self.label_padding = _check_positive(
            "label_padding", label_padding, allow_zero=True
        )
        self.min_scale = _check_positive("min_scale", min_scale)
        self.max_scale = _check_positive("max_scale", max_scale)
        if self.min_scale > self.max_scale:
            raise ConfigError("min_scale cannot be greater than max_scale")
        self.padding = _check_positive("padding", padding, allow_zero=True)
        self.y_step = _check_positive("y_step", y_step)
        self.root_y = root_y
        self.root_spacing = _check_positive("root_spacing", root_spacing)
        self.default_y = default_y

    def __repr__(self) -> str:
        return (
            f"LayoutConfig(scale={self.min_scale}..{self.max_scale}, "
            f"padding={self.padding}, y_step={self.y_step})"
        )
