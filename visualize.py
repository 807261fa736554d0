from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from airports import AirportNetwork
from dijkstra import PathResult
from graph import Graph


def build_networkx_graph(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(sorted(graph.node_ids()))
    for origin, target, distance in graph.routes():
        # nx.Graph keeps one edge per pair; show the cheapest parallel route.
        if g.has_edge(origin, target) and g[origin][target]["distance"] <= distance:
            continue
        g.add_edge(origin, target, distance=distance)
    return g


def compute_layout(
    graph: nx.Graph, positions: Mapping[str, Tuple[float, float]]
) -> Dict[str, Tuple[float, float]]:
    known = {node: positions[node] for node in graph.nodes if node in positions}
    if not known:
        return nx.spring_layout(graph, seed=42)
    if len(known) == graph.number_of_nodes():
        return known
    # Airports without coordinates are placed around the fixed ones.
    return nx.spring_layout(graph, pos=known, fixed=list(known), seed=42)


def route_edges(path: Sequence[str]) -> List[Tuple[str, str]]:
    return list(zip(path[:-1], path[1:]))


def draw_route(
    network: AirportNetwork,
    result: PathResult,
    output: Path | None = None,
    show: bool = True,
) -> None:
    """Plot every route in grey and highlight the path found by a query."""
    graph_nx = build_networkx_graph(network.graph)
    layout = compute_layout(graph_nx, network.positions)

    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    path_edges = route_edges(result.path)
    if path_edges:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=path_edges,
            edge_color="#d62728",
            width=2.5,
            ax=ax,
        )

    on_path = set(result.path)
    node_colors = [
        "#d62728" if node in on_path else "#1f77b4" for node in graph_nx.nodes
    ]
    nx.draw_networkx_nodes(
        graph_nx, layout, node_color=node_colors, node_size=600, ax=ax
    )
    nx.draw_networkx_labels(graph_nx, layout, font_size=9, font_color="white", ax=ax)

    edge_labels = {
        (u, v): f"{data['distance']:g}" for u, v, data in graph_nx.edges(data=True)
    }
    nx.draw_networkx_edge_labels(
        graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax
    )

    if result.found:
        summary_lines = [
            f"Path: {' -> '.join(result.path)}",
            f"Total distance: {result.total_distance:g}",
            f"Nodes settled: {len(result.visited)}",
        ]
    else:
        summary_lines = [f"No path ({result.status.value})"]
    ax.text(
        1.02,
        0.5,
        "\n".join(summary_lines),
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title("Shortest Route")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)
