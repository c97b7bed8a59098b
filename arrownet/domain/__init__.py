"""Value types for activity-on-arrow networks."""

from arrownet.domain.node import Node, NodeError
from arrownet.domain.activity import Activity, ActivityError
from arrownet.domain.network import (
    Network,
    NetworkError,
    CycleError,
    UnknownNodeError,
)

__all__ = [
    "Node",
    "NodeError",
    "Activity",
    "ActivityError",
    "Network",
    "NetworkError",
    "CycleError",
    "UnknownNodeError",
]
