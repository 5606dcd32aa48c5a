# city_astar/domain/graph.py
import logging
from collections.abc import Iterator
from math import isfinite

import numpy as np

from city_astar.domain.entities.city import City
from city_astar.errors import (
    EmptySlot,
    InvalidArgument,
    InvalidNodeId,
    NodeExists,
    ResourceExhausted,
)

log = logging.getLogger(__name__)


class CityGraph:
    """
    Fixed-size store of city slots indexed by integer id.

    Slots start empty and are filled once with add_node; edges are undirected and
    deduplicated. Coordinates are mirrored into a (num_nodes, 2) float array
    (columns: lat, lon) so vectorized distance queries stay cheap. Empty slots hold NaN.
    """

    def __init__(self, num_nodes: int):
        if isinstance(num_nodes, bool) or not isinstance(num_nodes, (int, np.integer)):
            raise InvalidArgument(f"num_nodes must be an int, got {type(num_nodes).__name__}")
        if num_nodes < 0:
            raise InvalidArgument(f"num_nodes must be >= 0, got {num_nodes}")
        try:
            self._coords = np.full((int(num_nodes), 2), np.nan, dtype=float)
            self._nodes: list[City | None] = [None] * int(num_nodes)
        except MemoryError as exc:
            raise ResourceExhausted(f"cannot allocate {num_nodes} city slots") from exc

    @classmethod
    def create(cls, num_nodes: int) -> "CityGraph":
        return cls(num_nodes)

    # ------------------- construction -----------------------

    def add_node(self, node_id: int, label: str, lat: float, lon: float) -> City:
        self._check_id(node_id)
        if self._nodes[node_id] is not None:
            raise NodeExists(node_id)
        if not (isfinite(lat) and isfinite(lon)):
            raise InvalidArgument(f"city {node_id} has non-finite coordinates ({lat}, {lon})")
        city = City(int(node_id), label, float(lat), float(lon))
        self._nodes[node_id] = city
        self._coords[node_id] = (city.lat, city.lon)
        return city

    def add_edge(self, id1: int, id2: int) -> bool:
        """Connect two cities both ways. Returns False if the edge already existed."""
        a, b = self.node(id1), self.node(id2)
        if id2 in a.neighbors:
            log.debug("duplicate edge %d-%d ignored", id1, id2)
            return False
        a.neighbors.append(b.id)
        if a is not b:
            b.neighbors.append(a.id)
        return True

    def destroy(self) -> None:
        for city in self._nodes:
            if city is not None:
                city.neighbors.clear()
        self._nodes = []
        self._coords = np.empty((0, 2), dtype=float)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.destroy()

    # ------------------- queries ----------------------------

    @property
    def num_nodes(self) -> int:
        return len(self._nodes)

    @property
    def coordinates(self) -> np.ndarray:
        return self._coords

    def has_node(self, node_id: int) -> bool:
        return 0 <= node_id < len(self._nodes) and self._nodes[node_id] is not None

    def node(self, node_id: int) -> City:
        self._check_id(node_id)
        city = self._nodes[node_id]
        if city is None:
            raise EmptySlot(node_id)
        return city

    def neighbors(self, node_id: int) -> list[int]:
        return self.node(node_id).neighbors

    def coords(self, node_id: int) -> tuple[float, float]:
        c = self.node(node_id)
        return c.lat, c.lon

    def iter_edges(self) -> Iterator[tuple[int, int]]:
        """Yield each undirected edge once as (low_id, high_id)."""
        for city in self._nodes:
            if city is None:
                continue
            for n in city.neighbors:
                if city.id <= n:
                    yield city.id, n

    def __len__(self) -> int:
        return sum(1 for c in self._nodes if c is not None)

    def __contains__(self, node_id) -> bool:
        return isinstance(node_id, (int, np.integer)) and self.has_node(int(node_id))

    def __iter__(self) -> Iterator[City]:
        return (c for c in self._nodes if c is not None)

    def _check_id(self, node_id) -> None:
        if (
            isinstance(node_id, bool)
            or not isinstance(node_id, (int, np.integer))
            or not 0 <= node_id < len(self._nodes)
        ):
            raise InvalidNodeId(node_id, len(self._nodes))
