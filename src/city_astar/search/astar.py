# search/astar.py
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from city_astar.domain.costs import CostTable, cost_of, set_f, set_h, tentative_g
from city_astar.domain.graph import CityGraph
from city_astar.errors import CityGraphError
from city_astar.search.closed_sets import HashClosedSet
from city_astar.search.hooks import NoopHooks
from city_astar.search.open_sets import HeapOpenSet
from city_astar.search.protocols import ClosedSet, OpenSet, SearchHooks

UNREACHABLE = -1.0

OpenSetFactory = Callable[[], OpenSet]
ClosedSetFactory = Callable[[int], ClosedSet]  # num_nodes -> set


class SearchStatus(str, Enum):
    INITIALIZED = "initialized"
    EXPANDING = "expanding"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class SearchResult:
    start: int
    end: int
    status: SearchStatus
    distance: float
    expansions: int
    costs: CostTable = field(default_factory=dict)

    @property
    def reached(self) -> bool:
        return self.status is SearchStatus.FOUND


class AStar:
    """
    A* over a CityGraph with a straight-line heuristic.

    Every run allocates its own cost table, open set and closed set, so the graph is
    never written to and repeated runs are independent. A node popped into the closed
    set is never re-opened; with heuristic_weight > 1 that can cost optimality.
    """

    def __init__(
        self,
        graph: CityGraph,
        *,
        open_set_factory: OpenSetFactory = HeapOpenSet,
        closed_set_factory: ClosedSetFactory = lambda n: HashClosedSet(),
        heuristic_weight: float = 1.0,
        hooks: SearchHooks | None = None,
    ):
        self.graph = graph
        self.open_set_factory = open_set_factory
        self.closed_set_factory = closed_set_factory
        self.heuristic_weight = heuristic_weight
        self._hooks = hooks or NoopHooks()

    def run(self, start: int, end: int) -> SearchResult:
        G, w = self.graph, self.heuristic_weight
        try:
            start, end = G.node(start).id, G.node(end).id  # plain ints from here on
        except CityGraphError as exc:
            self._hooks.error(reason="bad_endpoint", start=start, end=end, error=str(exc))
            raise

        t0 = time.perf_counter()
        self._hooks.search_start(start=start, end=end, num_nodes=G.num_nodes)

        costs: CostTable = {}
        open_set = self.open_set_factory()
        closed = self.closed_set_factory(G.num_nodes)

        s = cost_of(costs, start)
        s.reached = True
        set_h(G, costs, start, end, w)
        open_set.add(start, set_f(costs, start))

        status, expansions = SearchStatus.INITIALIZED, 0
        while not open_set.is_empty():
            status = SearchStatus.EXPANDING
            curr = open_set.remove_min()
            expansions += 1
            self._hooks.expand(
                curr,
                f_cost=costs[curr].f_cost,
                open_size=len(open_set),
                closed_size=len(closed),
            )
            if curr == end:
                status = SearchStatus.FOUND
                break

            for nb in G.neighbors(curr):
                if nb == curr:  # self-loop
                    continue
                set_h(G, costs, nb, end, w)
                potential_g = tentative_g(G, costs, curr, nb)
                nc = costs[nb]

                if open_set.contains(nb) and nc.g_cost <= potential_g:
                    continue
                if closed.contains(nb):
                    continue

                nc.g_cost, nc.parent, nc.reached = potential_g, curr, True
                f = set_f(costs, nb)
                if open_set.contains(nb):
                    open_set.change_priority(nb, f)
                    self._hooks.relax(nb, parent=curr, g_cost=potential_g, f_cost=f, improved=True)
                else:
                    open_set.add(nb, f)
                    self._hooks.relax(nb, parent=curr, g_cost=potential_g, f_cost=f, improved=False)
            closed.add(curr)
        else:
            status = SearchStatus.EXHAUSTED

        # h(end) == 0, so f(end) is the path length
        distance = costs[end].f_cost if status is SearchStatus.FOUND else UNREACHABLE
        self._hooks.search_end(
            status=status.value,
            distance=distance,
            expansions=expansions,
            ms=(time.perf_counter() - t0) * 1000,
        )
        return SearchResult(start, end, status, distance, expansions, costs)


def a_star(graph: CityGraph, start: int, end: int, **kw) -> float:
    """Shortest-path distance from start to end, or UNREACHABLE (-1.0)."""
    return AStar(graph, **kw).run(start, end).distance
