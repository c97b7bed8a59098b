from typing import Any, Dict, List, Optional

from .activity import Activity
from .node import Node


class NetworkError(Exception):
    """Exception raised for errors in the structure of a network."""

    pass


class CycleError(NetworkError):
    """Raised when the activities do not form a directed acyclic graph."""

    def __init__(self, cycle: List[tuple], unresolved: List[str]):
        self.cycle = list(cycle)
        self.unresolved = list(unresolved)
        if self.cycle:
            path = " -> ".join([self.cycle[0][0]] + [v for _, v in self.cycle])
            message = f"Network contains a cycle, cannot schedule: {path}"
        else:
            message = (
                "Network contains a cycle, cannot schedule: "
                f"unresolved nodes {self.unresolved}"
            )
        super().__init__(message)


class UnknownNodeError(NetworkError):
    """Raised when an activity references a node id that was not supplied."""

    def __init__(self, node_id: str, activity: Activity):
        self.node_id = node_id
        self.activity = activity
        super().__init__(
            f"Activity {activity.source}->{activity.target} references "
            f"unknown node '{node_id}'"
        )


class Network:
    """
    A scheduled (and optionally laid out) activity-on-arrow network.

    This is the snapshot handed to renderers: the annotated nodes and
    activities, the project duration, the critical paths and, once laid
    out, the time scale used for the x axis.
    """

    def __init__(
        self,
        nodes: List[Node],
        activities: List[Activity],
        project_duration: float = 0,
        critical_paths: Optional[List[List[str]]] = None,
        pixels_per_time_unit: Optional[float] = None,
    ):
        self.nodes = list(nodes)
        self.activities = list(activities)
        self.project_duration = project_duration
        self.critical_paths = [list(p) for p in critical_paths or []]
        self.pixels_per_time_unit = pixels_per_time_unit

    def get_node(self, node_id: str) -> Node:
        """Return the node with the given id."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        raise KeyError(node_id)

    def get_activity(self, source: str, target: str) -> Activity:
        """Return the first activity running from source to target."""
        for activity in self.activities:
            if activity.source == source and activity.target == target:
                return activity
        raise KeyError((source, target))

    @property
    def critical_activities(self) -> List[Activity]:
        return [a for a in self.activities if a.is_critical]

    @property
    def sinks(self) -> List[Node]:
        """Nodes without outgoing activities."""
        sources = {a.source for a in self.activities}
        return [n for n in self.nodes if n.id not in sources]

    @property
    def is_laid_out(self) -> bool:
        return self.pixels_per_time_unit is not None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the network to the dictionary form consumed by renderers.

        Returns:
            dict: Dictionary representation of the network
        """
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "activities": [a.to_dict() for a in self.activities],
            "projectDuration": self.project_duration,
            "criticalPaths": [list(p) for p in self.critical_paths],
            "pixelsPerTimeUnit": self.pixels_per_time_unit,
        }

    def __repr__(self) -> str:
        return (
            f"Network(nodes={len(self.nodes)}, activities={len(self.activities)}, "
            f"duration={self.project_duration})"
        )
