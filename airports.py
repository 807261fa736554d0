from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

import yaml

from graph import Graph


Position = Tuple[float, float]


class GraphDataError(ValueError):
    """Raised when an airport data file is missing fields or holds invalid values."""


@dataclass
class AirportNetwork:
    graph: Graph
    positions: Dict[str, Position] = field(default_factory=dict)


SAMPLE_CONFIG: Dict = {
    "airports": [{"id": "JFK"}, {"id": "DFW"}, {"id": "ORD"}],
    "routes": [
        {"source": "JFK", "target": "ORD", "distance": 800},
        {"source": "ORD", "target": "DFW", "distance": 1650},
    ],
}


def load_config(path: Path) -> Dict:
    # JSON is a subset of YAML for the files we accept, so one loader covers both.
    try:
        with path.open("r", encoding="utf-8") as handle:
            config = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise GraphDataError(f"Cannot parse {path}: {exc}") from exc

    if not isinstance(config, dict):
        raise GraphDataError(f"{path} must contain a mapping with 'airports' and 'routes'.")
    return config


def _parse_distance(raw: object, source: str, target: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise GraphDataError(f"Route {source}-{target} has non-numeric distance {raw!r}.")
    distance = float(raw)
    if not math.isfinite(distance) or distance < 0:
        raise GraphDataError(
            f"Route {source}-{target} needs a finite, non-negative distance, got {raw!r}."
        )
    return distance


def _parse_position(raw: object, airport_id: str) -> Position:
    try:
        x, y = float(raw["x"]), float(raw["y"])  # type: ignore[index]
    except (KeyError, TypeError, ValueError) as exc:
        raise GraphDataError(
            f"Airport {airport_id} has an invalid position {raw!r}; expected x and y."
        ) from exc
    if not (math.isfinite(x) and math.isfinite(y)):
        raise GraphDataError(
            f"Airport {airport_id} has an invalid position {raw!r}; x and y must be finite."
        )
    return x, y


def build_network(config: Dict) -> AirportNetwork:
    """Validate a parsed airport file and turn it into a routable network."""
    airports = config.get("airports")
    routes = config.get("routes", [])
    if not isinstance(airports, list):
        raise GraphDataError("'airports' must be a list.")
    if not isinstance(routes, list):
        raise GraphDataError("'routes' must be a list.")

    graph = Graph()
    positions: Dict[str, Position] = {}

    for entry in airports:
        airport_id = entry.get("id") if isinstance(entry, dict) else entry
        if not isinstance(airport_id, str) or not airport_id:
            raise GraphDataError(f"Airport entry {entry!r} needs a non-empty string id.")
        graph.add_node(airport_id)
        if isinstance(entry, dict) and entry.get("position") is not None:
            positions[airport_id] = _parse_position(entry["position"], airport_id)

    for entry in routes:
        if not isinstance(entry, dict):
            raise GraphDataError(f"Route entry {entry!r} must be a mapping.")
        try:
            source, target, raw_distance = entry["source"], entry["target"], entry["distance"]
        except KeyError as exc:
            raise GraphDataError(f"Route {entry!r} is missing {exc.args[0]!r}.") from exc

        unknown: List[str] = [
            str(node)
            for node in (source, target)
            if not isinstance(node, str) or not graph.has_node(node)
        ]
        if unknown:
            raise GraphDataError(
                f"Route {source}-{target} references unknown airport(s): {', '.join(unknown)}."
            )
        graph.add_route(source, target, _parse_distance(raw_distance, source, target))

    return AirportNetwork(graph=graph, positions=positions)


def load_network(path: Path) -> AirportNetwork:
    return build_network(load_config(path))


def sample_network() -> AirportNetwork:
    return build_network(SAMPLE_CONFIG)
