"""
arrownet
========

Schedule and lay out the bundled sample arrow network.
"""

import argparse
import sys

from .config import ScheduleConfig
from .examples.simple_network import run_sample_network
from .services.engine import ArrowNetworkEngine
from .utils.logger import configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Critical Path Method scheduling for arrow networks"
    )
    parser.add_argument(
        "--example", action="store_true", help="Run the example network"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        default=True,
        help="Reject activities that reference unknown events (default)",
    )
    mode.add_argument(
        "--permissive",
        dest="strict",
        action="store_false",
        help="Create implicit events for unknown activity endpoints",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (defaults to ARROWNET_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args(argv)

    if args.example:
        configure_logging("arrownet", args.log_level)
        engine = ArrowNetworkEngine(ScheduleConfig(strict=args.strict))
        run_sample_network(engine)
        return 0
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
