# runtime/registries.py
from collections.abc import Callable

from city_astar.config.models import (
    ClosedSetBitmapModel,
    ClosedSetHashModel,
    ClosedSetUnion,
    OpenSetArrayModel,
    OpenSetHeapModel,
    OpenSetUnion,
)
from city_astar.search.closed_sets import BitmapClosedSet, HashClosedSet
from city_astar.search.open_sets import ArrayOpenSet, HeapOpenSet
from city_astar.search.protocols import ClosedSet, OpenSet

OpenSetFactory = Callable[[OpenSetUnion, dict], OpenSet]
ClosedSetFactory = Callable[[ClosedSetUnion, dict], ClosedSet]

_open_set_registry: dict[str, OpenSetFactory] = {}
_closed_set_registry: dict[str, ClosedSetFactory] = {}


# ------------------- Open set registries ---------------------------


def register_open_set(kind: str):
    def deco(fn: OpenSetFactory):
        _open_set_registry[kind] = fn
        return fn

    return deco


def make_open_set(cfg: OpenSetUnion) -> OpenSet:
    try:
        factory = _open_set_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown open set kind {cfg.kind!r}") from None
    return factory(cfg, {})


@register_open_set("heap")
def _make_heap(cfg: OpenSetHeapModel, deps):
    return HeapOpenSet()


@register_open_set("array")
def _make_array(cfg: OpenSetArrayModel, deps):
    return ArrayOpenSet()


# ------------------- Closed set registries ---------------------------


def register_closed_set(kind: str):
    def deco(fn: ClosedSetFactory):
        _closed_set_registry[kind] = fn
        return fn

    return deco


def make_closed_set(cfg: ClosedSetUnion, *, num_nodes: int) -> ClosedSet:
    try:
        factory = _closed_set_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown closed set kind {cfg.kind!r}") from None
    return factory(cfg, {"num_nodes": num_nodes})


@register_closed_set("hash")
def _make_hash(cfg: ClosedSetHashModel, deps):
    return HashClosedSet()


@register_closed_set("bitmap")
def _make_bitmap(cfg: ClosedSetBitmapModel, deps):
    return BitmapClosedSet(deps["num_nodes"])
