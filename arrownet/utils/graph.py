import logging

import networkx as nx

from ..domain.activity import Activity
from ..domain.network import UnknownNodeError
from ..domain.node import Node

logger = logging.getLogger(__name__)


class Graph:
    """
    Node index plus forward and reverse adjacency for one scheduling request.

    ``successors[id]`` lists the activities leaving a node and
    ``predecessors[id]`` the activities entering it, both in activity
    input order.
    """

    def __init__(self, nodes, activities):
        self.nodes = nodes  # Ordered dict of id -> Node
        self.activities = activities
        self.successors = {node_id: [] for node_id in nodes}
        self.predecessors = {node_id: [] for node_id in nodes}

        for activity in activities:
            self.successors[activity.source].append(activity)
            self.predecessors[activity.target].append(activity)

    def __len__(self):
        return len(self.nodes)

    def is_source(self, node_id):
        return not self.predecessors[node_id]

    def is_sink(self, node_id):
        return not self.successors[node_id]

    def to_networkx(self, activities=None):
        """
        Build a networkx view of the network.

        Args:
            activities: Optional subset of activities to include as edges;
                defaults to all of them. Every node is always included.

        Returns:
            nx.MultiDiGraph keyed by the activity's index in the input list
        """
        G = nx.MultiDiGraph()
        for node_id, node in self.nodes.items():
            G.add_node(node_id, node=node)

        index = {id(a): i for i, a in enumerate(self.activities)}
        for activity in self.activities if activities is None else activities:
            G.add_edge(
                activity.source,
                activity.target,
                key=index[id(activity)],
                activity=activity,
            )
        return G


def _as_node(item):
    if isinstance(item, Node):
        return item.copy()
    return Node.from_dict(item)


def _as_activity(item):
    if isinstance(item, Activity):
        return item.copy()
    return Activity.from_dict(item)


def build_graph(nodes, activities, strict=True):
    """
    Build the adjacency model for a network.

    The caller's nodes and activities are copied, never mutated. Items may
    be Node/Activity instances or their dictionary forms.

    Args:
        nodes: Iterable of nodes
        activities: Iterable of activities
        strict: Raise UnknownNodeError for activities referencing an id
            missing from ``nodes``; otherwise create an implicit node

    Returns:
        Graph: The adjacency model

    Raises:
        UnknownNodeError: If strict and an activity has a dangling endpoint
    """
    node_index = {}
    for item in nodes:
        node = _as_node(item)
        if node.id in node_index:
            logger.warning(f"Duplicate node id '{node.id}', keeping the last one")
        node_index[node.id] = node

    activity_list = [_as_activity(item) for item in activities]

    for activity in activity_list:
        for node_id in (activity.source, activity.target):
            if node_id in node_index:
                continue
            if strict:
                raise UnknownNodeError(node_id, activity)
            logger.warning(
                f"Activity {activity.source}->{activity.target} references "
                f"unknown node '{node_id}', creating an implicit node"
            )
            node_index[node_id] = Node(node_id, implicit=True)

    graph = Graph(node_index, activity_list)
    logger.debug(
        f"Built graph: {len(graph.nodes)} nodes, {len(graph.activities)} activities"
    )
    return graph
