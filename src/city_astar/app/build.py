# city_astar/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass
from functools import partial

from city_astar.config.models import GraphModel, ScenarioModel
from city_astar.domain.graph import CityGraph
from city_astar.io.search_logging import SearchLogging  # JSON logs
from city_astar.runtime.registries import make_closed_set, make_open_set
from city_astar.search.astar import AStar
from city_astar.search.hooks import NoopHooks
from city_astar.search.protocols import SearchHooks


@dataclass
class App:
    graph: CityGraph
    search: AStar
    hooks: SearchHooks


def build_graph(cfg: GraphModel | Mapping) -> CityGraph:
    model = cfg if isinstance(cfg, GraphModel) else GraphModel.model_validate(cfg)
    graph = CityGraph(model.num_nodes)
    for c in model.cities:
        graph.add_node(c.id, c.label, c.lat, c.lon)
    for u, v in model.edges:
        graph.add_edge(u, v)
    return graph


def build(cfg: ScenarioModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Graph
    graph = build_graph(model.graph)

    # 2) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Search, with collaborators built fresh per run
    search = AStar(
        graph,
        open_set_factory=partial(make_open_set, model.search.open_set),
        closed_set_factory=lambda n: make_closed_set(model.search.closed_set, num_nodes=n),
        heuristic_weight=model.search.heuristic_weight,
        hooks=hooks,
    )
    return App(graph, search, hooks)
