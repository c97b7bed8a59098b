import logging

from ..config import LayoutConfig, ScheduleConfig
from ..domain.network import Network, NetworkError
from ..utils.graph import build_graph
from .layout import layout_network
from .scheduler import find_critical_path, find_critical_paths, schedule_network

logger = logging.getLogger(__name__)


class ArrowNetworkEngine:
    """
    Single entry point for scheduling and laying out an arrow network.

    The engine keeps nothing between calls except its configuration. Every
    call copies the nodes and activities it is given and returns new,
    annotated objects, so one engine can serve concurrent callers.
    """

    def __init__(self, schedule_config=None, layout_config=None):
        self.schedule_config = schedule_config or ScheduleConfig()
        self.layout_config = layout_config or LayoutConfig()

    def _build(self, nodes, activities):
        return build_graph(nodes, activities, strict=self.schedule_config.strict)

    def _schedule(self, graph, with_paths=True):
        try:
            order, duration = schedule_network(graph, self.schedule_config.epsilon)
        except NetworkError as e:
            logger.error(f"Scheduling failed: {e}")
            raise
        if not with_paths:
            return duration, []

        epsilon = self.schedule_config.epsilon
        limit = self.schedule_config.max_critical_paths
        if limit == 1:
            path = find_critical_path(graph, order, duration, epsilon)
            paths = [path] if path else []
        else:
            paths = find_critical_paths(graph, duration, epsilon, max_paths=limit)
        return duration, paths

    def compute_schedule(self, nodes, activities):
        """
        Calculate the CPM schedule of a network.

        Args:
            nodes: List of Node objects or node dictionaries
            activities: List of Activity objects or activity dictionaries

        Returns:
            dict: "nodes", "activities", "project_duration" and
            "critical_paths"

        Raises:
            CycleError: If the network is not a DAG
            UnknownNodeError: If strict and an activity has a dangling endpoint
        """
        try:
            graph = self._build(nodes, activities)
        except NetworkError as e:
            logger.error(f"Invalid network: {e}")
            raise

        duration, paths = self._schedule(graph)

        logger.info(
            f"Scheduled network: {len(graph.nodes)} nodes, "
            f"{len(graph.activities)} activities, duration {duration}"
        )
        if paths:
            logger.info(f"Critical path: {' -> '.join(paths[0])}")

        return {
            "nodes": list(graph.nodes.values()),
            "activities": graph.activities,
            "project_duration": duration,
            "critical_paths": paths,
        }

    def layout(self, nodes, activities):
        """
        Assign drawing coordinates to a network.

        Accepts either raw input or the output of ``compute_schedule``. Any
        times already carried by the input are discarded and the network is
        rescheduled, so edits made since the last schedule are honoured.

        Returns:
            dict: "nodes" and "pixels_per_time_unit"
        """
        try:
            graph = self._build(nodes, activities)
        except NetworkError as e:
            logger.error(f"Invalid network: {e}")
            raise

        self._schedule(graph, with_paths=False)

        scale = layout_network(graph, self.layout_config)
        return {"nodes": list(graph.nodes.values()), "pixels_per_time_unit": scale}

    def run(self, nodes, activities):
        """
        Schedule and lay out a network in one pass.

        Returns:
            Network: The fully annotated network
        """
        try:
            graph = self._build(nodes, activities)
        except NetworkError as e:
            logger.error(f"Invalid network: {e}")
            raise

        duration, paths = self._schedule(graph)
        scale = layout_network(graph, self.layout_config)

        logger.info(
            f"Network ready: {len(graph.nodes)} nodes, duration {duration}, "
            f"{len(paths)} critical path(s), {scale} px per time unit"
        )
        return Network(
            list(graph.nodes.values()),
            graph.activities,
            project_duration=duration,
            critical_paths=paths,
            pixels_per_time_unit=scale,
        )


_default_engine = ArrowNetworkEngine()


def compute_schedule(nodes, activities, strict=True):
    """Schedule a network with default settings."""
    engine = _default_engine if strict else ArrowNetworkEngine(ScheduleConfig(strict=False))
    return engine.compute_schedule(nodes, activities)


def layout(nodes, activities, strict=True):
    """Lay out a network with default settings."""
    engine = _default_engine if strict else ArrowNetworkEngine(ScheduleConfig(strict=False))
    return engine.layout(nodes, activities)


def run_network(nodes, activities, strict=True):
    """Schedule and lay out a network with default settings."""
    engine = _default_engine if strict else ArrowNetworkEngine(ScheduleConfig(strict=False))
    return engine.run(nodes, activities)
