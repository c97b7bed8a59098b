import unittest

from arrownet.config import LayoutConfig
from arrownet.domain.activity import Activity
from arrownet.domain.node import Node
from arrownet.services.layout import (
    assign_lanes,
    assign_x,
    calculate_time_scale,
    compute_bounds,
    estimate_label_width,
    layout_network,
)
from arrownet.services.scheduler import schedule_network
from arrownet.utils.graph import build_graph


class TimeScaleTestCase(unittest.TestCase):
    def test_label_width(self):
        self.assertEqual(estimate_label_width(""), 40)
        self.assertEqual(estimate_label_width("Roof"), 72)
        self.assertEqual(estimate_label_width(None), 40)

    def test_minimum_scale(self):
        activities = [Activity("1", "2", 10, "Dig"), Activity("2", "3", 20)]
        # 64 / 10 = 6.4 is below the floor
        self.assertEqual(calculate_time_scale(activities), 24)

    def test_label_driven_scale(self):
        activities = [Activity("1", "2", 2, "Walls"), Activity("2", "3", 10, "Roof")]
        # (5 * 8 + 40) / 2 = 40
        self.assertEqual(calculate_time_scale(activities), 40)

    def test_maximum_scale(self):
        activities = [Activity("1", "2", 1, "A very long label")]
        self.assertEqual(calculate_time_scale(activities), 120)

    def test_zero_duration_activities_are_skipped(self):
        activities = [Activity("1", "2", 0, "A very long dummy label", is_dummy=True)]
        self.assertEqual(calculate_time_scale(activities), 24)
        self.assertEqual(calculate_time_scale([]), 24)

    def test_custom_config(self):
        config = LayoutConfig(char_width=10, label_padding=0, min_scale=5, max_scale=50)
        activities = [Activity("1", "2", 4, "abcd")]
        self.assertEqual(calculate_time_scale(activities, config), 10)

    def test_assign_x(self):
        nodes = [Node("1"), Node("2")]
        nodes[1].earliest_start = 5
        assign_x(nodes, 40)
        self.assertEqual(nodes[0].x, 100)
        self.assertEqual(nodes[1].x, 300)


class LaneAssignmentTestCase(unittest.TestCase):
    def setUp(self):
        self.graph = build_graph(
            [Node("1"), Node("2"), Node("3"), Node("4")],
            [
                Activity("1", "2", 5),
                Activity("1", "3", 8),
                Activity("2", "4", 2),
                Activity("3", "4", 1),
            ],
        )
        schedule_network(self.graph)

    def test_critical_successor_first(self):
        visit_order = assign_lanes(self.graph)
        y = {k: n.y for k, n in self.graph.nodes.items()}

        self.assertEqual(visit_order, ["1", "3", "4", "2"])
        # 1->3 is critical so node 3 takes the first (upper) lane
        self.assertEqual(y, {"1": 300, "3": 210, "4": 210, "2": 390})

    def test_layout_network(self):
        scale = layout_network(self.graph)
        x = {k: n.x for k, n in self.graph.nodes.items()}

        self.assertEqual(scale, 40)
        self.assertEqual(x, {"1": 100, "2": 300, "3": 420, "4": 460})

    def test_multiple_start_nodes(self):
        graph = build_graph(
            [Node("a"), Node("b"), Node("c"), Node("lonely")],
            [Activity("a", "c", 2), Activity("b", "c", 1)],
        )
        schedule_network(graph)
        assign_lanes(graph)

        self.assertEqual(graph.nodes["a"].y, 300)
        self.assertEqual(graph.nodes["c"].y, 300)
        self.assertEqual(graph.nodes["b"].y, 570)
        self.assertEqual(graph.nodes["lonely"].y, 840)

    def test_three_children_spread_symmetrically(self):
        graph = build_graph(
            [Node("1"), Node("2"), Node("3"), Node("4")],
            [Activity("1", "2", 1), Activity("1", "3", 1), Activity("1", "4", 1)],
        )
        schedule_network(graph)
        assign_lanes(graph)
        self.assertEqual(
            [graph.nodes[k].y for k in ("2", "3", "4")], [120, 300, 480]
        )

    def test_shared_node_keeps_first_position(self):
        graph = build_graph(
            [Node("1"), Node("2"), Node("3"), Node("4")],
            [
                Activity("1", "2", 3),
                Activity("1", "3", 3),
                Activity("2", "4", 1),
                Activity("3", "4", 1),
            ],
        )
        schedule_network(graph)
        visit_order = assign_lanes(graph)

        self.assertEqual(visit_order, ["1", "2", "4", "3"])
        self.assertEqual(graph.nodes["4"].y, graph.nodes["2"].y)
        self.assertEqual(graph.nodes["2"].y, 210)
        self.assertEqual(graph.nodes["3"].y, 390)

    def test_unreached_nodes_get_default(self):
        graph = build_graph([Node("1"), Node("2")], [Activity("1", "2", 1)])
        # Hand-set times so that no node qualifies as a start event
        graph.nodes["1"].earliest_start = 2
        graph.nodes["2"].earliest_start = 3
        config = LayoutConfig(default_y=42)

        self.assertEqual(assign_lanes(graph, config), [])
        self.assertEqual(graph.nodes["1"].y, 42)
        self.assertEqual(graph.nodes["2"].y, 42)

    def test_deterministic(self):
        first = [(n.x, n.y) for n in self._laid_out().nodes.values()]
        second = [(n.x, n.y) for n in self._laid_out().nodes.values()]
        self.assertEqual(first, second)

    def _laid_out(self):
        graph = build_graph(
            [Node(str(i)) for i in range(1, 7)],
            [
                Activity("1", "2", 2, "Design"),
                Activity("1", "3", 4),
                Activity("2", "4", 3),
                Activity("3", "4", 0, is_dummy=True),
                Activity("3", "5", 6),
                Activity("4", "6", 1),
                Activity("5", "6", 1),
            ],
        )
        schedule_network(graph)
        layout_network(graph)
        return graph

    def test_connected_nodes_never_overlap(self):
        graph = self._laid_out()
        for activity in graph.activities:
            if activity.duration > 0:
                source = graph.nodes[activity.source]
                target = graph.nodes[activity.target]
                self.assertNotEqual((source.x, source.y), (target.x, target.y))


class BoundsTestCase(unittest.TestCase):
    def test_empty(self):
        bounds = compute_bounds([])
        self.assertEqual(bounds["width"], 800)
        self.assertEqual(bounds["height"], 600)
        self.assertEqual(bounds["center_x"], 400)

    def test_padded_box(self):
        a, b = Node("a"), Node("b")
        a.x, a.y = 100, 300
        b.x, b.y = 420, 210

        bounds = compute_bounds([a, b])
        self.assertEqual(
            bounds,
            {
                "min_x": 10,
                "max_x": 510,
                "min_y": 90,
                "max_y": 390,
                "width": 500,
                "height": 300,
                "center_x": 260,
                "center_y": 240,
            },
        )


if __name__ == "__main__":
    unittest.main()
