from dataclasses import dataclass, field


@dataclass(frozen=True)
class City:
    id: int
    label: str
    lat: float  # planar y
    lon: float  # planar x
    neighbors: list[int] = field(default_factory=list)
