# city_astar/domain/costs.py
import math
from dataclasses import dataclass

import numpy as np

from city_astar.domain.graph import CityGraph


@dataclass
class NodeCost:
    """Search-state record for one node, owned by a single search run."""

    g_cost: float = 0.0
    h_cost: float = 0.0
    f_cost: float = 0.0
    parent: int | None = None
    reached: bool = False


CostTable = dict[int, NodeCost]


def distance(graph: CityGraph, a: int, b: int) -> float:
    # lat/lon treated as planar coordinates
    lat_a, lon_a = graph.coords(a)
    lat_b, lon_b = graph.coords(b)
    return math.hypot(lon_a - lon_b, lat_a - lat_b)


def cost_of(costs: CostTable, node: int) -> NodeCost:
    c = costs.get(node)
    if c is None:
        c = costs[node] = NodeCost()
    return c


def tentative_g(graph: CityGraph, costs: CostTable, current: int, neighbor: int) -> float:
    return cost_of(costs, current).g_cost + distance(graph, current, neighbor)


def set_h(
    graph: CityGraph, costs: CostTable, node: int, goal: int, weight: float = 1.0
) -> float:
    c = cost_of(costs, node)
    c.h_cost = weight * distance(graph, node, goal)
    return c.h_cost


def set_f(costs: CostTable, node: int) -> float:
    c = cost_of(costs, node)
    c.f_cost = c.g_cost + c.h_cost
    return c.f_cost


def heuristic_to(graph: CityGraph, goal: int) -> np.ndarray:
    """Straight-line distance from every slot to goal; NaN where the slot is empty."""
    lat_g, lon_g = graph.coords(goal)
    xy = graph.coordinates
    return np.hypot(xy[:, 1] - lon_g, xy[:, 0] - lat_g)
