from typing import Any, Dict, Optional


class NodeError(Exception):
    """Exception raised for errors in the Node class."""

    pass


class Node:
    """
    Represents an event (milestone) in an activity-on-arrow network.

    Activities run between nodes. A node carries the earliest and latest
    times at which the activities leaving it may start, plus the drawing
    position assigned by the layout engine.
    """

    def __init__(self, id: str, label: Optional[str] = None, implicit: bool = False):
        """
        Initialize a new Node.

        Args:
            id: Unique identifier for the node
            label: Display label, defaults to the id
            implicit: True when the node was created for a dangling
                activity endpoint rather than supplied by the caller

        Raises:
            NodeError: If any input validation fails
        """
        if id is None or str(id).strip() == "":
            raise NodeError("Node ID cannot be None or empty")
        self.id = str(id)

        if label is None or label == "":
            label = self.id
        if not isinstance(label, str):
            raise NodeError("Node label must be a string")
        self.label = label

        self.implicit = implicit

        # Schedule attributes
        self.earliest_start = 0.0
        self.latest_start = None
        self.rank = None

        # Layout attributes
        self.x = None
        self.y = None

    @property
    def slack(self) -> Optional[float]:
        """Event slack (LS - ES), or None before scheduling."""
        if self.latest_start is None:
            return None
        return self.latest_start - self.earliest_start

    def reset_schedule(self) -> "Node":
        """Clear all computed fields so the node can be scheduled afresh."""
        self.earliest_start = 0.0
        self.latest_start = None
        self.rank = None
        self.x = None
        self.y = None
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert node to the dictionary form consumed by renderers.

        Returns:
            dict: Dictionary representation of the node
        """
        return {
            "id": self.id,
            "label": self.label,
            "implicit": self.implicit,
            "earliestStart": self.earliest_start,
            "latestStart": self.latest_start,
            "rank": self.rank,
            "x": self.x,
            "y": self.y,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        """
        Create a node from a dictionary representation.

        Only ``id`` is required. Computed fields present in the dictionary
        are restored, so the output of ``to_dict`` can be fed back in.

        Args:
            data: Dictionary representation of the node

        Returns:
            Node: New node instance
        """
        if "id" not in data:
            raise NodeError("Node dictionary must contain an 'id'")

        node = cls(
            id=data["id"],
            label=data.get("label"),
            implicit=data.get("implicit", False),
        )

        for key, attr in [
            ("earliestStart", "earliest_start"),
            ("latestStart", "latest_start"),
            ("rank", "rank"),
            ("x", "x"),
            ("y", "y"),
        ]:
            value = data.get(key, data.get(attr))
            if value is not None:
                setattr(node, attr, value)

        return node

    def copy(self) -> "Node":
        """
        Create a copy of this node.

        Returns:
            Node: New node instance with the same properties
        """
        return self.from_dict(self.to_dict())

    def __repr__(self) -> str:
        ls_str = f", ls={self.latest_start}" if self.latest_start is not None else ""
        return f"Node(id={self.id}, label={self.label}, es={self.earliest_start}{ls_str})"
