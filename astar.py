from __future__ import annotations

import logging
import math
from heapq import heappop, heappush
from typing import Callable, Dict, List, Mapping, Optional, Set, Tuple

from dijkstra import PathResult, PathStatus, check_endpoints, reconstruct_path
from graph import Graph


logger = logging.getLogger(__name__)

Heuristic = Callable[[str, str], float]
Position = Tuple[float, float]


def euclidean_heuristic(positions: Mapping[str, Position]) -> Heuristic:
    """Straight-line distance between airport positions.

    Airports without a position estimate 0. The estimate only keeps A* optimal
    when no route is shorter than the straight line between its endpoints.
    """

    def estimate(node: str, target: str) -> float:
        a = positions.get(node)
        b = positions.get(target)
        if a is None or b is None:
            return 0.0
        return math.hypot(a[0] - b[0], a[1] - b[1])

    return estimate


def _zero(node: str, target: str) -> float:
    return 0.0


def find_astar_path(
    graph: Graph,
    source: str,
    target: str,
    heuristic: Optional[Heuristic] = None,
) -> PathResult:
    """Heuristic-guided variant of find_shortest_path with the same result contract."""
    invalid = check_endpoints(graph, source, target)
    if invalid is not None:
        return invalid

    h = heuristic or _zero
    g_scores: Dict[str, float] = {node: math.inf for node in graph.node_ids()}
    predecessors: Dict[str, Optional[str]] = {node: None for node in g_scores}
    g_scores[source] = 0.0

    # Entries are (f, g, node) with f = g + h.
    queue: List[Tuple[float, float, str]] = [(h(source, target), 0.0, source)]
    visited: Set[str] = set()
    steps = 0

    while queue:
        _f, g, u = heappop(queue)
        steps += 1
        if g > g_scores[u]:
            continue

        visited.add(u)
        if u == target:
            break

        for edge in graph.neighbors(u):
            tentative = g + edge.distance
            if tentative < g_scores[edge.target]:
                g_scores[edge.target] = tentative
                predecessors[edge.target] = u
                heappush(queue, (tentative + h(edge.target, target), tentative, edge.target))

    logger.debug(
        "A* %s -> %s: %d steps, %d nodes expanded", source, target, steps, len(visited)
    )

    if math.isinf(g_scores[target]):
        logger.info("No route from %s to %s", source, target)
        return PathResult(status=PathStatus.UNREACHABLE, steps=steps, visited=visited)

    return PathResult(
        path=reconstruct_path(predecessors, source, target),
        total_distance=g_scores[target],
        status=PathStatus.FOUND,
        steps=steps,
        visited=visited,
    )
