# search/open_sets.py
import heapq
from itertools import count

from city_astar.search.protocols import OpenSet


class HeapOpenSet(OpenSet):
    """
    Binary heap of (priority, seq, node) entries.
    change_priority pushes a fresh entry and marks the old one stale; stale entries
    are discarded lazily on pop. seq keeps ties FIFO.
    """

    def __init__(self):
        self._q: list[list] = []
        self._entries: dict[int, list] = {}
        self._seq = count()

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, node: int, priority: float) -> None:
        if node in self._entries:
            raise ValueError(f"node {node} already in open set")
        self._push(node, priority)

    def contains(self, node: int) -> bool:
        return node in self._entries

    def change_priority(self, node: int, priority: float) -> None:
        entry = self._entries.pop(node)  # KeyError if absent
        entry[-1] = None
        self._push(node, priority)

    def remove_min(self) -> int:
        while self._q:
            *_, node = heapq.heappop(self._q)
            if node is not None:
                del self._entries[node]
                return node
        raise KeyError("remove_min from an empty open set")

    def _push(self, node: int, priority: float) -> None:
        entry = [priority, next(self._seq), node]
        self._entries[node] = entry
        heapq.heappush(self._q, entry)


class ArrayOpenSet(OpenSet):
    """Unsorted node -> priority map; remove_min is a linear scan."""

    def __init__(self):
        self._prio: dict[int, float] = {}

    def is_empty(self) -> bool:
        return not self._prio

    def __len__(self) -> int:
        return len(self._prio)

    def add(self, node: int, priority: float) -> None:
        if node in self._prio:
            raise ValueError(f"node {node} already in open set")
        self._prio[node] = priority

    def contains(self, node: int) -> bool:
        return node in self._prio

    def change_priority(self, node: int, priority: float) -> None:
        if node not in self._prio:
            raise KeyError(node)
        self._prio[node] = priority

    def remove_min(self) -> int:
        if not self._prio:
            raise KeyError("remove_min from an empty open set")
        # min() keeps the first of equal priorities, i.e. insertion order
        node = min(self._prio, key=self._prio.__getitem__)
        del self._prio[node]
        return node
