# search/closed_sets.py
import numpy as np

from city_astar.search.protocols import ClosedSet


class HashClosedSet(ClosedSet):
    def __init__(self):
        self._s: set[int] = set()

    def add(self, node: int) -> None:
        self._s.add(node)

    def contains(self, node: int) -> bool:
        return node in self._s

    def __len__(self) -> int:
        return len(self._s)


class BitmapClosedSet(ClosedSet):
    """One flag per graph slot; sized to the graph at creation."""

    def __init__(self, num_nodes: int):
        self._bits = np.zeros(num_nodes, dtype=bool)
        self._n = 0

    def add(self, node: int) -> None:
        if not self._bits[node]:
            self._bits[node] = True
            self._n += 1

    def contains(self, node: int) -> bool:
        return bool(self._bits[node])

    def __len__(self) -> int:
        return self._n
