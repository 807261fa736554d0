from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Set, Tuple


@dataclass(frozen=True)
class Edge:
    target: str
    distance: float


class Graph:
    """Undirected weighted graph stored as two directed adjacency entries per route.

    Routes may reference airports that were never added explicitly; they are
    created on first use.
    """

    def __init__(
        self,
        nodes: Iterable[str] = (),
        routes: Iterable[Tuple[str, str, float]] = (),
    ) -> None:
        self._adjacency: Dict[str, List[Edge]] = {}

        for node in nodes:
            self.add_node(node)
        for origin, target, distance in routes:
            self.add_route(origin, target, float(distance))

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_node(self, node: str) -> None:
        self._adjacency.setdefault(node, [])

    def add_route(self, origin: str, target: str, distance: float) -> None:
        # Parallel routes are kept; the search simply prefers the cheaper one.
        self._adjacency.setdefault(origin, []).append(Edge(target, distance))
        self._adjacency.setdefault(target, []).append(Edge(origin, distance))

    def has_node(self, node: str) -> bool:
        return node in self._adjacency

    def neighbors(self, node: str) -> List[Edge]:
        return list(self._adjacency.get(node, ()))

    def node_ids(self) -> Set[str]:
        return set(self._adjacency)

    def routes(self) -> List[Tuple[str, str, float]]:
        """Return every undirected route once, keyed on whichever endpoint was added first."""
        # Each route appears once per endpoint; pair the copies up by count.
        pending: Dict[Tuple[str, str, float], int] = {}
        result: List[Tuple[str, str, float]] = []
        for origin, edges in self._adjacency.items():
            for edge in edges:
                key = (edge.target, origin, edge.distance)
                if pending.get(key, 0) > 0:
                    pending[key] -= 1
                    continue
                result.append((origin, edge.target, edge.distance))
                mirror = (origin, edge.target, edge.distance)
                pending[mirror] = pending.get(mirror, 0) + 1
        return result

    def path_cost(self, path: Sequence[str]) -> float:
        """Return the total cost of walking along the given node sequence."""
        if len(path) < 2:
            return 0.0

        total_cost = 0.0
        for u, v in zip(path[:-1], path[1:]):
            costs = [edge.distance for edge in self._adjacency.get(u, ()) if edge.target == v]
            if not costs:
                raise ValueError(f"Route {u}-{v} not present in graph.")
            total_cost += min(costs)
        return total_cost
