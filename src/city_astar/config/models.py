from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- OPEN / CLOSED SETS ---------------------


class OpenSetHeapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["heap"] = "heap"


class OpenSetArrayModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["array"] = "array"


OpenSetUnion = Annotated[OpenSetHeapModel | OpenSetArrayModel, Field(discriminator="kind")]


class ClosedSetHashModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["hash"] = "hash"


class ClosedSetBitmapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bitmap"] = "bitmap"


ClosedSetUnion = Annotated[
    ClosedSetHashModel | ClosedSetBitmapModel, Field(discriminator="kind")
]


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    open_set: OpenSetUnion = Field(default_factory=OpenSetHeapModel)
    closed_set: ClosedSetUnion = Field(default_factory=ClosedSetHashModel)
    heuristic_weight: float = 1.0  # >1 trades optimality for fewer expansions

    @field_validator("heuristic_weight")
    @classmethod
    def _positive(cls, v: float) -> float:
        if not isfinite(v) or v <= 0:
            raise ValueError("heuristic_weight must be finite and > 0")
        return v


# ----------------- GRAPH ---------------------


class CityModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int = Field(ge=0)
    label: str = ""
    lat: float
    lon: float

    @field_validator("lat", "lon")
    def _finite(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v):
            raise ValueError(f"{info.field_name} must be finite")
        return v


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    num_nodes: int = Field(ge=0)
    cities: list[CityModel] = Field(default_factory=list)
    edges: list[tuple[int, int]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_ids(self):
        n = self.num_nodes
        seen: set[int] = set()
        for c in self.cities:
            if c.id >= n:
                raise ValueError(f"city id {c.id} outside [0, {n})")
            if c.id in seen:
                raise ValueError(f"duplicate city id {c.id}")
            seen.add(c.id)
        for u, v in self.edges:
            if u not in seen or v not in seen:
                raise ValueError(f"edge ({u}, {v}) references a missing city")
        return self


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    graph: GraphModel
    search: SearchModel = Field(default_factory=SearchModel)
    log: LogModel = LogModel()
