from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from airports import AirportNetwork, GraphDataError, load_network, sample_network
from astar import euclidean_heuristic, find_astar_path
from dijkstra import PathResult, find_shortest_path


logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_logging(level: str = "WARNING") -> None:
    """Send log records to stderr; stdout is reserved for the JSON result."""
    log_level = level.upper() if level.upper() in LOG_LEVELS else "WARNING"

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the shortest route between two airports."
    )
    parser.add_argument("source", help="Departure airport id, e.g. JFK.")
    parser.add_argument("target", help="Arrival airport id, e.g. DFW.")
    parser.add_argument(
        "graph_file",
        nargs="?",
        type=Path,
        help="YAML or JSON file with airports and routes (defaults to a built-in sample).",
    )
    parser.add_argument(
        "--algorithm",
        choices=("dijkstra", "astar"),
        default="dijkstra",
        help="Search algorithm; astar uses airport positions as a heuristic.",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Include search steps and visited airports in the output.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print the JSON output with the given indent.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Show the network with the route highlighted.",
    )
    parser.add_argument(
        "--plot-out",
        type=Path,
        help="Save the route plot to this file instead of showing it.",
    )
    return parser


def run_query(
    network: AirportNetwork, source: str, target: str, algorithm: str = "dijkstra"
) -> PathResult:
    if algorithm == "astar":
        return find_astar_path(
            network.graph, source, target, euclidean_heuristic(network.positions)
        )
    return find_shortest_path(network.graph, source, target)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.graph_file is None:
            network = sample_network()
        else:
            network = load_network(args.graph_file)
    except (GraphDataError, OSError) as exc:
        logger.error("Unable to load airport data: %s", exc)
        return 1

    logger.info(
        "Loaded %d airports; searching %s -> %s with %s",
        len(network.graph),
        args.source,
        args.target,
        args.algorithm,
    )
    result = run_query(network, args.source, args.target, args.algorithm)

    print(json.dumps(result.to_dict(include_metrics=args.metrics), indent=args.indent))

    if args.plot or args.plot_out:
        from visualize import draw_route

        draw_route(network, result, output=args.plot_out, show=args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
