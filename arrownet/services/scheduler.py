import logging
from collections import deque

import networkx as nx

from ..config import CRITICAL_EPSILON
from ..domain.network import CycleError

logger = logging.getLogger(__name__)


def _clamp(value, epsilon):
    """Snap float noise around zero to exactly 0."""
    if abs(value) < epsilon:
        return 0
    return value


def topological_order(graph):
    """
    Order the nodes with Kahn's algorithm.

    The queue is seeded with every zero in-degree node in node order and
    served first in, first out, so the order is deterministic for a fixed
    input.

    Args:
        graph: The adjacency model

    Returns:
        list: Node ids in topological order

    Raises:
        CycleError: If the activities contain a directed cycle
    """
    in_degree = {node_id: len(graph.predecessors[node_id]) for node_id in graph.nodes}
    queue = deque(node_id for node_id, degree in in_degree.items() if degree == 0)

    order = []
    while queue:
        node_id = queue.popleft()
        order.append(node_id)
        for activity in graph.successors[node_id]:
            in_degree[activity.target] -= 1
            if in_degree[activity.target] == 0:
                queue.append(activity.target)

    if len(order) < len(graph.nodes):
        ordered = set(order)
        unresolved = [node_id for node_id in graph.nodes if node_id not in ordered]
        G = graph.to_networkx().subgraph(unresolved)
        try:
            cycle = [(u, v) for u, v, *_ in nx.find_cycle(G)]
        except nx.NetworkXNoCycle:
            cycle = []
        raise CycleError(cycle, unresolved)

    return order


def forward_pass(graph, order):
    """
    Calculate earliest start of every node and earliest finish of every
    activity. Also assigns each node its topological rank.
    """
    for node in graph.nodes.values():
        node.reset_schedule()
        node.rank = 0
    for activity in graph.activities:
        activity.reset_schedule()

    for node_id in order:
        node = graph.nodes[node_id]
        for activity in graph.successors[node_id]:
            activity.earliest_finish = node.earliest_start + activity.duration
            target = graph.nodes[activity.target]
            if activity.earliest_finish > target.earliest_start:
                target.earliest_start = activity.earliest_finish
            target.rank = max(target.rank, node.rank + 1)

    return graph


def project_duration(graph):
    """Project duration is the largest earliest start of any node."""
    return max((node.earliest_start for node in graph.nodes.values()), default=0)


def backward_pass(graph, order, epsilon=CRITICAL_EPSILON):
    """
    Calculate latest start of every node and the finish times, floats and
    criticality of every activity.

    Sinks are bound to their own earliest start, not to the project
    duration, so a network with several end events keeps each of them
    tight.
    """
    for node_id in reversed(order):
        node = graph.nodes[node_id]

        if graph.is_sink(node_id):
            node.latest_start = node.earliest_start
            continue

        min_latest_start = None
        for activity in graph.successors[node_id]:
            target = graph.nodes[activity.target]
            latest = target.latest_start - activity.duration
            if min_latest_start is None or latest < min_latest_start:
                min_latest_start = latest

            activity.latest_finish = target.latest_start
            activity.earliest_finish = node.earliest_start + activity.duration
            activity.total_float = _clamp(
                target.latest_start - activity.duration - node.earliest_start,
                epsilon,
            )
            activity.free_float = _clamp(
                target.earliest_start - activity.earliest_finish, epsilon
            )
            activity.is_critical = activity.total_float == 0

        if abs(min_latest_start - node.earliest_start) < epsilon:
            min_latest_start = node.earliest_start
        node.latest_start = min_latest_start

    return graph


def _start_events(graph, epsilon):
    return [
        node_id
        for node_id, node in graph.nodes.items()
        if graph.is_source(node_id) and abs(node.earliest_start) < epsilon
    ]


def _end_events(graph, duration, epsilon):
    return [
        node_id
        for node_id, node in graph.nodes.items()
        if graph.is_sink(node_id) and abs(node.earliest_start - duration) < epsilon
    ]


def find_critical_path(graph, order=None, duration=None, epsilon=CRITICAL_EPSILON):
    """
    Find one chain of critical activities from a start event to an end
    event whose earliest start equals the project duration.

    A single sweep in reverse topological order records, for each node,
    the first critical activity that leads on to such an end event; the
    path is then read off from the first start event. Runs in O(V + E).

    Args:
        graph: A scheduled adjacency model
        order: Topological order, computed if not given
        duration: Project duration, computed if not given
        epsilon: Tolerance for comparing times

    Returns:
        list: Node ids along the path, empty if the network has no activities
    """
    if order is None:
        order = topological_order(graph)
    if duration is None:
        duration = project_duration(graph)

    ends = set(_end_events(graph, duration, epsilon))
    next_activity = {}
    for node_id in reversed(order):
        if node_id in ends:
            next_activity[node_id] = None
            continue
        for activity in graph.successors[node_id]:
            if activity.is_critical and activity.target in next_activity:
                next_activity[node_id] = activity
                break

    for start in _start_events(graph, epsilon):
        # An isolated event is both start and end but has no path
        if next_activity.get(start) is None:
            continue
        path = [start]
        activity = next_activity[start]
        while activity is not None:
            path.append(activity.target)
            activity = next_activity[activity.target]
        return path

    return []


def find_critical_paths(graph, duration=None, epsilon=CRITICAL_EPSILON, max_paths=None):
    """
    Enumerate chains of critical activities from start events (no incoming
    activity) to end events (no outgoing activity) at the project duration.

    The number of such chains can grow exponentially with the size of the
    network, so callers that only need one should use
    ``find_critical_path``.

    Args:
        graph: A scheduled adjacency model
        duration: Project duration, computed if not given
        epsilon: Tolerance for comparing times
        max_paths: Stop after this many paths; None for all of them

    Returns:
        list: Paths as lists of node ids, start events in node order
    """
    if duration is None:
        duration = project_duration(graph)

    critical = [a for a in graph.activities if a.is_critical]
    if not critical:
        return []

    G = graph.to_networkx(critical)
    starts = _start_events(graph, epsilon)
    ends = _end_events(graph, duration, epsilon)

    paths = []
    seen = set()
    for start in starts:
        for end in ends:
            if start == end:
                continue
            # Parallel critical activities give the same node path twice
            for path in nx.all_simple_paths(G, start, end):
                if tuple(path) in seen:
                    continue
                seen.add(tuple(path))
                paths.append(path)
                if max_paths is not None and len(paths) >= max_paths:
                    return paths

    return paths


def schedule_network(graph, epsilon=CRITICAL_EPSILON):
    """
    Run the full CPM calculation on a graph in place.

    Args:
        graph: The adjacency model
        epsilon: Float noise guard

    Returns:
        tuple: (topological order, project duration)

    Raises:
        CycleError: If the network is not a DAG
    """
    order = topological_order(graph)
    logger.debug(f"Topological order: {order}")

    forward_pass(graph, order)
    duration = project_duration(graph)
    backward_pass(graph, order, epsilon)

    logger.debug(
        f"Scheduled {len(graph.nodes)} nodes, project duration {duration}"
    )
    return order, duration
