import heapq

import numpy as np
import pytest

from city_astar.domain.costs import distance
from city_astar.domain.graph import CityGraph


def make_graph(points, edges, labels=None) -> CityGraph:
    """points are (lat, lon) pairs; node ids follow list order."""
    g = CityGraph(len(points))
    for i, (lat, lon) in enumerate(points):
        g.add_node(i, labels[i] if labels else f"c{i}", lat, lon)
    for u, v in edges:
        g.add_edge(u, v)
    return g


def dijkstra_from(graph: CityGraph, source: int) -> dict[int, float]:
    dist = {source: 0.0}
    q = [(0.0, source)]
    while q:
        d, u = heapq.heappop(q)
        if d > dist.get(u, float("inf")):
            continue
        for v in graph.neighbors(u):
            nd = d + distance(graph, u, v)
            if nd < dist.get(v, float("inf")):
                dist[v] = nd
                heapq.heappush(q, (nd, v))
    return dist


def random_city_graph(n: int, k: int, seed: int) -> CityGraph:
    """n cities uniform in a 100x100 square, each joined to its k nearest others."""
    rng = np.random.default_rng(seed)
    pts = rng.uniform(0.0, 100.0, size=(n, 2))
    d = np.hypot(pts[:, None, 0] - pts[None, :, 0], pts[:, None, 1] - pts[None, :, 1])
    edges = []
    for i in range(n):
        for j in np.argsort(d[i])[1 : k + 1]:
            edges.append((i, int(j)))
    return make_graph([tuple(p) for p in pts], edges)


@pytest.fixture
def triangle() -> CityGraph:
    # sides 3, 4, 5
    return make_graph([(0.0, 0.0), (3.0, 0.0), (0.0, 4.0)], [(0, 1), (0, 2), (1, 2)])


@pytest.fixture
def collinear() -> CityGraph:
    return make_graph([(0.0, 0.0), (1.0, 0.0), (3.0, 0.0)], [(0, 1), (1, 2)])


@pytest.fixture
def disconnected() -> CityGraph:
    return make_graph([(0.0, 0.0), (5.0, 5.0)], [])


@pytest.fixture
def detour() -> CityGraph:
    """
    S reaches X two ways: through D (long, but D sits close to the goal) or through
    Q (short, but Q points away from it). The goal G hangs off X via a sideways hop
    to Y, so with an inflated heuristic X is closed via D before Q is expanded.

    ids: S=0, D=1, Q=2, X=3, Y=4, G=5; points given as (lat, lon) = (y, x)
    """
    pts = [(0.0, 0.0), (8.0, 5.0), (-5.0, 5.0), (0.0, 10.0), (0.0, 20.0), (10.0, 10.0)]
    edges = [(0, 1), (1, 3), (0, 2), (2, 3), (3, 4), (4, 5)]
    return make_graph(pts, edges, labels=["S", "D", "Q", "X", "Y", "G"])


@pytest.fixture(params=[7, 11, 23])
def random_graph(request) -> CityGraph:
    return random_city_graph(40, 3, seed=request.param)
