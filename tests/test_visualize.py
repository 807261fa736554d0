"""Tests for the route plot."""

from pathlib import Path

import pytest

from airports import AirportNetwork, load_network
from dijkstra import PathResult, PathStatus, find_shortest_path
from graph import Graph
from visualize import build_networkx_graph, compute_layout, draw_route, route_edges


SAMPLE_FILE = Path(__file__).resolve().parent.parent / "airports.yaml"


def test_build_networkx_graph_keeps_cheapest_parallel_route() -> None:
    graph = Graph(nodes=["HNL"], routes=[("A", "B", 5), ("A", "B", 2), ("B", "C", 1)])

    g = build_networkx_graph(graph)

    assert set(g.nodes) == {"A", "B", "C", "HNL"}
    assert g["A"]["B"]["distance"] == 2
    assert g["B"]["C"]["distance"] == 1


def test_compute_layout_prefers_given_positions() -> None:
    g = build_networkx_graph(Graph(routes=[("A", "B", 1)]))

    assert compute_layout(g, {"A": (0.0, 0.0), "B": (1.0, 1.0)}) == {
        "A": (0.0, 0.0),
        "B": (1.0, 1.0),
    }
    spring = compute_layout(g, {})
    assert set(spring) == {"A", "B"}


def test_compute_layout_keeps_known_positions_fixed() -> None:
    network = load_network(SAMPLE_FILE)
    g = build_networkx_graph(network.graph)

    layout = compute_layout(g, network.positions)

    assert set(layout) == set(g.nodes)
    assert "HNL" not in network.positions
    for node, position in network.positions.items():
        assert tuple(layout[node]) == pytest.approx(position)


def test_route_edges() -> None:
    assert route_edges(["A", "B", "C"]) == [("A", "B"), ("B", "C")]
    assert route_edges(["A"]) == []


def test_draw_route_saves_figure(tmp_path: Path) -> None:
    network = load_network(SAMPLE_FILE)
    result = find_shortest_path(network.graph, "SEA", "MIA")
    output = tmp_path / "route.png"

    draw_route(network, result, output=output, show=False)

    assert output.stat().st_size > 0


def test_draw_route_without_path(tmp_path: Path) -> None:
    network = AirportNetwork(graph=Graph(nodes=["A", "B"]))
    output = tmp_path / "empty.png"

    draw_route(network, PathResult(status=PathStatus.UNREACHABLE), output=output, show=False)

    assert output.exists()
