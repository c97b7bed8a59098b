"""
arrownet
========

Critical Path Method scheduling and layout for activity-on-arrow networks.

Available modules:
- domain: Node, Activity and Network value types and their errors
- utils.graph: adjacency model built from node and activity lists
- services.scheduler: topological order, forward/backward pass, critical paths
- services.layout: time-scaled x positions and lane-based y positions
- services.engine: the ArrowNetworkEngine facade
"""

from arrownet.config import CRITICAL_EPSILON, ConfigError, LayoutConfig, ScheduleConfig
from arrownet.domain import (
    Activity,
    ActivityError,
    CycleError,
    Network,
    NetworkError,
    Node,
    NodeError,
    UnknownNodeError,
)
from arrownet.services.engine import (
    ArrowNetworkEngine,
    compute_schedule,
    layout,
    run_network,
)

__all__ = [
    "CRITICAL_EPSILON",
    "ConfigError",
    "LayoutConfig",
    "ScheduleConfig",
    "Activity",
    "ActivityError",
    "CycleError",
    "Network",
    "NetworkError",
    "Node",
    "NodeError",
    "UnknownNodeError",
    "ArrowNetworkEngine",
    "compute_schedule",
    "layout",
    "run_network",
]
