"""
bookingmx/graph/city_graph.py

City adjacency graph - undirected weighted edges between city names,
dataset validation and the direct-neighbour "nearby cities" query.

Only single-hop lookups are supported: a nearby city is one edge away from
the destination.
"""
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from bookingmx.exceptions import ValidationError

DEFAULT_MAX_DISTANCE_KM = 250


@dataclass(frozen=True)
class Neighbor:
    """Directed half-edge as seen from one endpoint"""
    to: str
    distance: float


@dataclass(frozen=True)
class NearbyCity:
    """Nearby-cities query result"""
    city: str
    distance: float

    def to_dict(self) -> Dict[str, Any]:
        return {"city": self.city, "distance": self.distance}


@dataclass(frozen=True)
class GraphValidation:
    """Outcome of validate_graph_data; reason holds the first failed check"""
    ok: bool
    reason: Optional[str] = None


def _is_valid_distance(value: Any) -> bool:
    """Finite, non-negative, and a real number (bool does not count)"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value) and value >= 0
    except OverflowError:
        # int too large for a float
        return False


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class CityGraph:
    """
    Undirected weighted graph over city names

    Each undirected edge is stored as two half-edges, one in each endpoint's
    adjacency list, so queries never have to infer symmetry.
    """

    def __init__(self):
        self._adjacency: Dict[str, List[Neighbor]] = {}

    @property
    def cities(self) -> List[str]:
        """City names in insertion order"""
        return list(self._adjacency)

    def has_city(self, name: Any) -> bool:
        return isinstance(name, str) and name in self._adjacency

    def add_city(self, name: str) -> None:
        """
        Add a city; adding an existing city does nothing.

        Raises:
            ValidationError: name is empty or not a string
        """
        if not name or not isinstance(name, str):
            raise ValidationError("Invalid city name")
        if name not in self._adjacency:
            self._adjacency[name] = []

    def add_edge(self, source: str, target: str, distance: float) -> None:
        """
        Connect two known cities in both directions.

        Args:
            source: one endpoint
            target: the other endpoint
            distance: distance in km, finite and >= 0

        Raises:
            ValidationError: unknown endpoint or invalid distance
        """
        if not self.has_city(source) or not self.has_city(target):
            raise ValidationError("Unknown city")
        if not _is_valid_distance(distance):
            raise ValidationError("Invalid distance")
        self._adjacency[source].append(Neighbor(to=target, distance=distance))
        self._adjacency[target].append(Neighbor(to=source, distance=distance))

    def neighbors(self, city: str) -> List[Neighbor]:
        """
        Copy of the city's adjacency list.

        Raises:
            ValidationError: unknown city
        """
        if not self.has_city(city):
            raise ValidationError("Unknown city")
        return list(self._adjacency[city])

    def __len__(self) -> int:
        return len(self._adjacency)


def validate_graph_data(data: Any) -> GraphValidation:
    """
    Check a raw {cities, edges} dataset without building anything.

    Checks run in order and stop at the first failure:
    1. cities and edges are both arrays
    2. no duplicate cities
    3. every city is a non-blank string
    4. every edge joins two listed cities, then has a valid distance
    """
    if not isinstance(data, Mapping):
        return GraphValidation(ok=False, reason="cities/edges must be arrays")
    cities = data.get("cities")
    edges = data.get("edges")
    if not _is_sequence(cities) or not _is_sequence(edges):
        return GraphValidation(ok=False, reason="cities/edges must be arrays")

    seen = set()
    for city in cities:
        # True and 1 are different entries; 1 and 1.0 are the same number
        key = (isinstance(city, bool), city)
        try:
            if key in seen:
                return GraphValidation(ok=False, reason="duplicate cities")
            seen.add(key)
        except TypeError:
            # unhashable entries can't collide; step 3 rejects them
            continue

    for city in cities:
        if not isinstance(city, str) or not city.strip():
            return GraphValidation(ok=False, reason="invalid city entry")

    city_set = set(cities)
    for edge in edges:
        if not isinstance(edge, Mapping):
            edge = {}
        source, target = edge.get("from"), edge.get("to")
        if not (isinstance(source, str) and source in city_set
                and isinstance(target, str) and target in city_set):
            return GraphValidation(ok=False, reason="edge references unknown city")
        if not _is_valid_distance(edge.get("distance")):
            return GraphValidation(ok=False, reason="invalid distance")

    return GraphValidation(ok=True)


def build_graph(cities: Iterable[str], edges: Iterable[Mapping]) -> CityGraph:
    """Build a graph from a dataset that already passed validate_graph_data"""
    graph = CityGraph()
    for city in cities:
        graph.add_city(city)
    for edge in edges:
        graph.add_edge(edge["from"], edge["to"], edge["distance"])
    return graph


def get_nearby_cities(graph: CityGraph, destination: Any,
                      max_distance_km: float = DEFAULT_MAX_DISTANCE_KM) -> List[NearbyCity]:
    """
    Direct neighbours of destination within max_distance_km (inclusive),
    closest first. Unknown or non-string destinations give an empty list.

    Raises:
        ValidationError: graph is not a CityGraph
    """
    if not isinstance(graph, CityGraph):
        raise ValidationError("graph must be CityGraph")
    if not graph.has_city(destination):
        return []

    within = [n for n in graph.neighbors(destination) if n.distance <= max_distance_km]
    within.sort(key=lambda n: n.distance)
    return [NearbyCity(city=n.to, distance=n.distance) for n in within]
