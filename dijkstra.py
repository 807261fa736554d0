from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from heapq import heappop, heappush
from typing import Dict, List, Optional, Set, Tuple

from graph import Graph


logger = logging.getLogger(__name__)


class PathStatus(Enum):
    FOUND = "found"
    UNREACHABLE = "unreachable"
    INVALID_ENDPOINT = "invalid_endpoint"


@dataclass
class PathResult:
    path: List[str] = field(default_factory=list)
    total_distance: float = 0.0
    status: PathStatus = PathStatus.UNREACHABLE
    steps: int = 0
    visited: Set[str] = field(default_factory=set)

    @property
    def found(self) -> bool:
        return self.status is PathStatus.FOUND

    def to_dict(self, include_metrics: bool = False) -> Dict:
        data: Dict = {
            "path": list(self.path),
            "totalDistance": self.total_distance,
            "status": self.status.value,
        }
        if include_metrics:
            data["steps"] = self.steps
            data["visited"] = sorted(self.visited)
        return data


def check_endpoints(graph: Graph, source: str, target: str) -> Optional[PathResult]:
    """Return the degenerate result for unknown endpoints, or None when both exist."""
    missing = [node for node in (source, target) if not graph.has_node(node)]
    if not missing:
        return None
    logger.warning(
        "NodeNotFound: %s not in graph (query %s -> %s)",
        ", ".join(missing),
        source,
        target,
    )
    return PathResult(status=PathStatus.INVALID_ENDPOINT)


def reconstruct_path(
    predecessors: Dict[str, Optional[str]], source: str, target: str
) -> List[str]:
    path: List[str] = [target]
    while path[-1] != source:
        previous = predecessors.get(path[-1])
        if previous is None:
            return []
        path.append(previous)
    path.reverse()
    return path


def find_shortest_path(graph: Graph, source: str, target: str) -> PathResult:
    """Compute the cheapest route from source to target using Dijkstra.

    distances[v] stores the best-known distance from source to v, and
    predecessors[v] remembers the previous node along that path. Weights must
    be non-negative. Unknown endpoints and unreachable targets yield an empty
    path with zero distance; ``status`` tells them apart.
    """
    invalid = check_endpoints(graph, source, target)
    if invalid is not None:
        return invalid

    distances: Dict[str, float] = {node: math.inf for node in graph.node_ids()}
    predecessors: Dict[str, Optional[str]] = {node: None for node in distances}
    distances[source] = 0.0

    queue: List[Tuple[float, str]] = [(0.0, source)]
    visited: Set[str] = set()
    steps = 0

    while queue:
        distance_u, u = heappop(queue)
        steps += 1
        # Lazy deletion: a cheaper entry for u was already pushed.
        if distance_u > distances[u]:
            continue

        visited.add(u)
        if u == target:
            break

        for edge in graph.neighbors(u):
            candidate = distance_u + edge.distance
            if candidate < distances[edge.target]:
                distances[edge.target] = candidate
                predecessors[edge.target] = u
                heappush(queue, (candidate, edge.target))

    logger.debug(
        "Dijkstra %s -> %s: %d steps, %d nodes settled", source, target, steps, len(visited)
    )

    if math.isinf(distances[target]):
        logger.info("No route from %s to %s", source, target)
        return PathResult(status=PathStatus.UNREACHABLE, steps=steps, visited=visited)

    return PathResult(
        path=reconstruct_path(predecessors, source, target),
        total_distance=distances[target],
        status=PathStatus.FOUND,
        steps=steps,
        visited=visited,
    )
