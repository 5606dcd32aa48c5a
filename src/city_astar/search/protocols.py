from typing import Protocol, runtime_checkable


@runtime_checkable
class OpenSet(Protocol):
    """
    Frontier of discovered-but-not-finalized node ids, ordered by priority (f-cost).
    Responsibilities:
      • Pop the lowest-priority id (ties broken in insertion order).
      • Answer membership and lower an existing entry's priority.
    """

    def is_empty(self) -> bool: ...
    def add(self, node: int, priority: float) -> None: ...
    def remove_min(self) -> int: ...
    def contains(self, node: int) -> bool: ...
    def change_priority(self, node: int, priority: float) -> None: ...
    def __len__(self) -> int: ...


@runtime_checkable
class ClosedSet(Protocol):
    """Ids whose shortest-path cost is finalized. Grow-only."""

    def add(self, node: int) -> None: ...
    def contains(self, node: int) -> bool: ...
    def __len__(self) -> int: ...


class SearchHooks(Protocol):
    def search_start(self, *, start, end, num_nodes): ...
    def expand(self, node: int, *, f_cost, open_size, closed_size): ...
    def relax(self, node: int, *, parent, g_cost, f_cost, improved): ...
    def search_end(self, *, status, distance, expansions, ms): ...
    def error(self, *, reason: str, **kw): ...
