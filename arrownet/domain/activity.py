import math
from typing import Any, Dict, Optional


class ActivityError(Exception):
    """Exception raised for errors in the Activity class."""

    pass


class Activity:
    """
    Represents an activity (arrow) between two events of the network.

    A dummy activity has zero duration and only expresses a logical
    dependency. The float and criticality fields stay None until the
    scheduler has run.
    """

    def __init__(
        self,
        source: str,
        target: str,
        duration: float = 0,
        label: str = "",
        is_dummy: bool = False,
    ):
        """
        Initialize a new Activity.

        Args:
            source: ID of the node the activity leaves
            target: ID of the node the activity enters
            duration: Non-negative duration in time units
            label: Display label
            is_dummy: Whether this is a zero-duration logical dependency

        Raises:
            ActivityError: If any input validation fails
        """
        if source is None or str(source).strip() == "":
            raise ActivityError("Activity source cannot be None or empty")
        if target is None or str(target).strip() == "":
            raise ActivityError("Activity target cannot be None or empty")
        self.source = str(source)
        self.target = str(target)

        if isinstance(duration, bool) or not isinstance(duration, (int, float)):
            raise ActivityError("Activity duration must be a number")
        if not math.isfinite(duration) or duration < 0:
            raise ActivityError(
                f"Activity duration must be a finite number >= 0, got {duration}"
            )
        self.duration = duration

        self.label = label or ""
        self.is_dummy = bool(is_dummy)

        # Schedule attributes
        self.earliest_finish = None
        self.latest_finish = None
        self.total_float = None
        self.free_float = None
        self.is_critical = None

    @property
    def key(self) -> tuple:
        """(source, target) pair identifying the arrow."""
        return (self.source, self.target)

    def reset_schedule(self) -> "Activity":
        """Clear all computed fields."""
        self.earliest_finish = None
        self.latest_finish = None
        self.total_float = None
        self.free_float = None
        self.is_critical = None
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert activity to the dictionary form consumed by renderers.

        Returns:
            dict: Dictionary representation of the activity
        """
        return {
            "source": self.source,
            "target": self.target,
            "duration": self.duration,
            "label": self.label,
            "isDummy": self.is_dummy,
            "earliestFinish": self.earliest_finish,
            "latestFinish": self.latest_finish,
            "totalFloat": self.total_float,
            "freeFloat": self.free_float,
            "isCritical": self.is_critical,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Activity":
        """
        Create an activity from a dictionary representation.

        Accepts both the camelCase keys produced by ``to_dict`` and their
        snake_case equivalents.

        Args:
            data: Dictionary representation of the activity

        Returns:
            Activity: New activity instance
        """
        try:
            source = data["source"]
            target = data["target"]
        except KeyError as e:
            raise ActivityError(f"Activity dictionary is missing {e}") from e

        activity = cls(
            source=source,
            target=target,
            duration=data.get("duration", 0),
            label=data.get("label", ""),
            is_dummy=data.get("isDummy", data.get("is_dummy", False)),
        )

        for key, attr in [
            ("earliestFinish", "earliest_finish"),
            ("latestFinish", "latest_finish"),
            ("totalFloat", "total_float"),
            ("freeFloat", "free_float"),
            ("isCritical", "is_critical"),
        ]:
            value = data.get(key, data.get(attr))
            if value is not None:
                setattr(activity, attr, value)

        return activity

    def copy(self) -> "Activity":
        """
        Create a copy of this activity.

        Returns:
            Activity: New activity instance with the same properties
        """
        return self.from_dict(self.to_dict())

    def __repr__(self) -> str:
        kind = "..>" if self.is_dummy else "->"
        crit = ", critical" if self.is_critical else ""
        return (
            f"Activity({self.source}{kind}{self.target}, "
            f"duration={self.duration}, label={self.label!r}{crit})"
        )
