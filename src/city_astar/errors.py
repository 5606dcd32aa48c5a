# city_astar/errors.py


class CityGraphError(Exception):
    """Base class for graph store and search failures."""


class InvalidArgument(CityGraphError, ValueError):
    pass


class InvalidNodeId(InvalidArgument, IndexError):
    def __init__(self, node_id, num_nodes: int):
        super().__init__(f"node id {node_id!r} outside [0, {num_nodes})")
        self.node_id, self.num_nodes = node_id, num_nodes


class NodeExists(InvalidArgument):
    def __init__(self, node_id: int):
        super().__init__(f"slot {node_id} already holds a city")
        self.node_id = node_id


class EmptySlot(CityGraphError, LookupError):
    def __init__(self, node_id: int):
        super().__init__(f"slot {node_id} holds no city")
        self.node_id = node_id


class ResourceExhausted(CityGraphError, MemoryError):
    pass
