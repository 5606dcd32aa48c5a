import math

import numpy as np
import pytest

from city_astar.domain.costs import (
    NodeCost,
    cost_of,
    distance,
    heuristic_to,
    set_f,
    set_h,
    tentative_g,
)
from city_astar.domain.graph import CityGraph
from conftest import dijkstra_from


def test_distance_is_planar_euclidean(triangle):
    assert distance(triangle, 0, 1) == 3.0
    assert distance(triangle, 0, 2) == 4.0
    assert distance(triangle, 1, 2) == 5.0


def test_distance_to_self_is_zero(random_graph):
    for city in random_graph:
        assert distance(random_graph, city.id, city.id) == 0.0


def test_distance_is_symmetric(random_graph):
    ids = [c.id for c in random_graph]
    for a in ids[:10]:
        for b in ids:
            assert distance(random_graph, a, b) == distance(random_graph, b, a)


def test_cost_setters_write_into_table(triangle):
    costs = {}
    assert set_h(triangle, costs, 1, 2) == 5.0
    costs[1].g_cost = 2.0
    assert set_f(costs, 1) == 7.0
    assert costs[1] == NodeCost(g_cost=2.0, h_cost=5.0, f_cost=7.0)
    assert tentative_g(triangle, costs, 1, 0) == 5.0


def test_set_h_weight_scales_estimate(triangle):
    costs = {}
    assert set_h(triangle, costs, 1, 2, weight=2.0) == 10.0


def test_cost_of_defaults_to_unreached():
    costs = {}
    c = cost_of(costs, 4)
    assert c.reached is False and c.parent is None and c.g_cost == 0.0
    assert cost_of(costs, 4) is c


def test_heuristic_to_matches_scalar_distance(random_graph):
    h = heuristic_to(random_graph, 0)
    for city in random_graph:
        assert h[city.id] == pytest.approx(distance(random_graph, city.id, 0))


def test_heuristic_to_marks_empty_slots():
    g = CityGraph(3)
    g.add_node(0, "A", 0.0, 0.0)
    g.add_node(2, "C", 3.0, 4.0)
    h = heuristic_to(g, 0)
    assert h[2] == 5.0
    assert math.isnan(h[1])


def test_heuristic_is_admissible(random_graph):
    goal = 0
    true_d = dijkstra_from(random_graph, goal)  # undirected: d(u, goal) == d(goal, u)
    h = heuristic_to(random_graph, goal)
    for u, d in true_d.items():
        assert h[u] <= d + 1e-9


def test_heuristic_is_consistent(random_graph):
    h = heuristic_to(random_graph, 5)
    for a, b in random_graph.iter_edges():
        assert abs(h[a] - h[b]) <= distance(random_graph, a, b) + 1e-9
    assert np.nanmin(h) == 0.0
