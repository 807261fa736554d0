"""Tests for the A* path finder."""

from pathlib import Path

import pytest

from airports import load_network
from astar import euclidean_heuristic, find_astar_path
from dijkstra import PathStatus, find_shortest_path
from graph import Graph


SAMPLE_FILE = Path(__file__).resolve().parent.parent / "airports.yaml"


def test_zero_heuristic_matches_dijkstra() -> None:
    graph = Graph(routes=[("A", "B", 10), ("B", "C", 10), ("A", "C", 5)])

    result = find_astar_path(graph, "A", "C")

    assert result.path == ["A", "C"]
    assert result.total_distance == 5
    assert result.status is PathStatus.FOUND


def test_grid_with_positions() -> None:
    positions = {"A": (0.0, 0.0), "B": (1.0, 0.0), "C": (2.0, 0.0), "D": (1.0, 5.0)}
    graph = Graph(
        routes=[("A", "B", 1), ("B", "C", 1), ("A", "D", 6), ("D", "C", 6)]
    )

    result = find_astar_path(graph, "A", "C", euclidean_heuristic(positions))

    assert result.path == ["A", "B", "C"]
    assert result.total_distance == 2
    assert "D" not in result.visited


def test_self_path_and_invalid_endpoint() -> None:
    graph = Graph(routes=[("A", "B", 1)])

    assert find_astar_path(graph, "A", "A").path == ["A"]
    missing = find_astar_path(graph, "A", "Z")
    assert missing.path == []
    assert missing.total_distance == 0
    assert missing.status is PathStatus.INVALID_ENDPOINT


def test_unreachable() -> None:
    graph = Graph(nodes=["HNL"], routes=[("A", "B", 1)])

    result = find_astar_path(graph, "A", "HNL", euclidean_heuristic({}))

    assert result.path == []
    assert result.status is PathStatus.UNREACHABLE


def test_heuristic_ignores_missing_positions() -> None:
    estimate = euclidean_heuristic({"A": (0.0, 0.0), "B": (3.0, 4.0)})

    assert estimate("A", "B") == pytest.approx(5.0)
    assert estimate("A", "C") == 0.0


def test_agrees_with_dijkstra_on_sample_network() -> None:
    network = load_network(SAMPLE_FILE)
    heuristic = euclidean_heuristic(network.positions)

    for source in sorted(network.graph.node_ids()):
        for target in sorted(network.graph.node_ids()):
            expected = find_shortest_path(network.graph, source, target)
            result = find_astar_path(network.graph, source, target, heuristic)
            assert result.status is expected.status
            assert result.total_distance == pytest.approx(expected.total_distance)
