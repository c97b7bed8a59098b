"""
Layout engine for scheduled arrow networks.

x is proportional to a node's earliest start, so time flows left to right
on a common axis. y comes from a lane heuristic that keeps the critical
path straight and fans other successors out around their parent.
"""

import logging

from ..config import LayoutConfig

logger = logging.getLogger(__name__)


def estimate_label_width(label, config=None):
    """Approximate rendered width of an activity label in pixels."""
    config = config or LayoutConfig()
    return len(label or "") * config.char_width + config.label_padding


def calculate_time_scale(activities, config=None):
    """
    Pick the number of pixels per time unit.

    Short activities with long labels need a wider scale so their labels
    fit between the two events; the result is clamped to
    [min_scale, max_scale].

    Args:
        activities: Iterable of activities
        config: LayoutConfig, defaults used when omitted

    Returns:
        float: Pixels per time unit
    """
    config = config or LayoutConfig()

    max_ratio = 0
    for activity in activities:
        if activity.duration > 0:
            ratio = estimate_label_width(activity.label, config) / activity.duration
            if ratio > max_ratio:
                max_ratio = ratio

    scale = max(config.min_scale, max_ratio)
    if scale > config.max_scale:
        scale = config.max_scale
    return scale


def assign_x(nodes, pixels_per_time_unit, config=None):
    """Place every node on the time axis."""
    config = config or LayoutConfig()
    for node in nodes:
        node.x = config.padding + node.earliest_start * pixels_per_time_unit
    return nodes


def _ordered_children(graph, node_id, assigned):
    # Critical successors first; sort is stable so input order breaks ties
    out_activities = sorted(
        graph.successors[node_id], key=lambda a: not a.is_critical
    )
    children = []
    for activity in out_activities:
        if activity.target not in assigned and activity.target not in children:
            children.append(activity.target)
    return children


def assign_lanes(graph, config=None):
    """
    Assign a y coordinate to every node.

    Start events (ES 0) each get their own band. From each of them an
    explicit depth-first worklist of (node id, proposed y) spreads the
    not-yet-placed successors symmetrically around their parent. A node
    reachable along several paths keeps the first y it is given. Nodes
    the traversal never reaches fall back to ``config.default_y``.

    Args:
        graph: A scheduled adjacency model
        config: LayoutConfig, defaults used when omitted

    Returns:
        list: Node ids in the order they were placed
    """
    config = config or LayoutConfig()

    for node in graph.nodes.values():
        node.y = None

    starts = [
        node_id for node_id, node in graph.nodes.items() if node.earliest_start == 0
    ]

    assigned = set()
    visit_order = []
    for index, root in enumerate(starts):
        stack = [(root, config.root_y + index * config.y_step * config.root_spacing)]
        while stack:
            node_id, y = stack.pop()
            if node_id in assigned:
                continue

            graph.nodes[node_id].y = y
            assigned.add(node_id)
            visit_order.append(node_id)

            children = _ordered_children(graph, node_id, assigned)
            if not children:
                continue

            first_y = y - (len(children) - 1) * config.y_step / 2
            # Reversed so the first child is popped, and laid out, first
            for child_index in reversed(range(len(children))):
                stack.append(
                    (children[child_index], first_y + child_index * config.y_step)
                )

    for node_id, node in graph.nodes.items():
        if node_id not in assigned:
            logger.debug(f"Node '{node_id}' not reached by lane assignment")
            node.y = config.default_y

    return visit_order


def layout_network(graph, config=None):
    """
    Lay out a scheduled graph in place.

    Returns:
        float: Pixels per time unit used for the x axis
    """
    config = config or LayoutConfig()

    scale = calculate_time_scale(graph.activities, config)
    assign_x(graph.nodes.values(), scale, config)
    assign_lanes(graph, config)

    logger.debug(f"Laid out {len(graph.nodes)} nodes at {scale} px per time unit")
    return scale


def compute_bounds(nodes, node_radius=30, title_space=30):
    """
    Bounding box of laid-out nodes, padded for node circles and a title.

    Args:
        nodes: Iterable of laid-out nodes
        node_radius: Radius the renderer draws nodes with
        title_space: Extra room reserved above the diagram

    Returns:
        dict: min_x, max_x, min_y, max_y, width, height, center_x, center_y
    """
    nodes = list(nodes)
    if not nodes:
        return {
            "min_x": 0,
            "max_x": 800,
            "min_y": 0,
            "max_y": 600,
            "width": 800,
            "height": 600,
            "center_x": 400,
            "center_y": 300,
        }

    xs = [node.x or 0 for node in nodes]
    ys = [node.y or 0 for node in nodes]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    padding = node_radius * 3
    return {
        "min_x": min_x - padding,
        "max_x": max_x + padding,
        "min_y": min_y - padding - title_space,
        "max_y": max_y + padding,
        "width": (max_x - min_x) + padding * 2,
        "height": (max_y - min_y) + padding * 2 + title_space,
        "center_x": (min_x + max_x) / 2,
        "center_y": (min_y + max_y) / 2 - title_space / 2,
    }
