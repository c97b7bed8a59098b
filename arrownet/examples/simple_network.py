from arrownet.domain.activity import Activity
from arrownet.domain.node import Node
from arrownet.services.engine import ArrowNetworkEngine


def create_sample_network():
    """Build the sample house-building network as nodes and activities."""
    nodes = [
        Node("1", "Start"),
        Node("2"),
        Node("3"),
        Node("4"),
        Node("5"),
        Node("6", "Handover"),
    ]

    activities = [
        Activity("1", "2", 5, "Foundations"),
        Activity("2", "3", 10, "Walls"),
        Activity("2", "4", 4, "Plumbing"),
        Activity("3", "4", 0, is_dummy=True),
        Activity("3", "5", 6, "Roof"),
        Activity("4", "5", 3, "Electrics"),
        Activity("5", "6", 2, "Finishing"),
    ]

    return nodes, activities


def run_sample_network(engine=None):
    engine = engine or ArrowNetworkEngine()
    nodes, activities = create_sample_network()
    network = engine.run(nodes, activities)

    # Print report
    print("Arrow Network Schedule Report")
    print("=============================")
    print(f"Project duration: {network.project_duration}")
    print(f"Time scale: {network.pixels_per_time_unit} px per time unit")
    print("\nEvents:")
    for node in network.nodes:
        print(
            f"  {node.id:>4} {node.label:<10} ES={node.earliest_start:<6} "
            f"LS={node.latest_start:<6} slack={node.slack:<4} x={node.x:<7} y={node.y}"
        )

    print("\nActivities:")
    for activity in network.activities:
        name = activity.label or ("dummy" if activity.is_dummy else "")
        marker = "*" if activity.is_critical else " "
        print(
            f" {marker}{activity.source}->{activity.target} {name:<12} "
            f"d={activity.duration:<4} TF={activity.total_float:<4} "
            f"FF={activity.free_float}"
        )

    for path in network.critical_paths:
        print(f"\nCritical path: {' -> '.join(path)}")

    return network


if __name__ == "__main__":
    run_sample_network()
