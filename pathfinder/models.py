import math
from typing import List, Dict, Optional
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from pathfinder.config import DEFAULT_EDGE_WEIGHT, MAX_EDGE_WEIGHT

# -----------------------------
# Domain Models (Pydantic)
# -----------------------------

class Algorithm(str, Enum):
    WEIGHTED = "weighted"
    UNWEIGHTED = "unweighted"

    @classmethod
    def _missing_(cls, value):
        # selector names used by the original UI
        aliases = {"dijkstra": cls.WEIGHTED, "bfs": cls.UNWEIGHTED}
        if isinstance(value, str):
            return aliases.get(value.lower())
        return None

class SearchStatus(str, Enum):
    COMPLETED = "completed"
    UNREACHABLE = "unreachable"

class Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    x: float = 0.0
    y: float = 0.0
    label: str

class Edge(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: int = Field(alias="from")
    to: int
    weight: int = DEFAULT_EDGE_WEIGHT

class Graph(BaseModel):
    nodes: List[Node]
    edges: List[Edge]
    directed: bool = False

class SearchState(BaseModel):
    """
    One frame of a search trace.

    - current_node is the node just settled (weighted) or dequeued (unweighted)
    - visited and distances are copies taken when the frame was recorded
    - path stays empty; the final path lives on SearchResult
    """
    model_config = ConfigDict(frozen=True)

    current_node: int
    visited: frozenset[int]
    distances: Dict[int, float]
    path: List[int] = Field(default_factory=list)

    @field_serializer("distances", when_used="json")
    def serialize_distances(self, distances: Dict[int, float]) -> Dict[str, Optional[float]]:
        # JSON has no infinity; unreached nodes go out as null
        return {str(k): (None if math.isinf(v) else v) for k, v in distances.items()}

    def distance_to(self, node_id: int) -> float:
        return self.distances.get(node_id, math.inf)

class SearchResult(BaseModel):
    algorithm: Algorithm
    start: int
    end: int
    directed: bool
    trace: List[SearchState]
    path: List[int]
    cost: Optional[int] = None  # weighted runs only, None when unreachable
    status: SearchStatus

    @property
    def reachable(self) -> bool:
        return self.status == SearchStatus.COMPLETED

    @property
    def hops(self) -> Optional[int]:
        return len(self.path) - 1 if self.path else None

class GraphStats(BaseModel):
    nodes: int
    edges: int
    directed: bool
    path_length: Optional[int] = None  # edges on the last found path
    total_weight: Optional[int] = None

class Event(BaseModel):
    time: str
    type: str
    detail: dict

# -----------------------------
# API Schemas
# -----------------------------

class AddNodeRequest(BaseModel):
    x: float = 0.0
    y: float = 0.0
    label: Optional[str] = None

class AddEdgeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: int = Field(alias="from")
    to: int
    weight: int = Field(default=DEFAULT_EDGE_WEIGHT, ge=1, le=MAX_EDGE_WEIGHT)

class SetDirectedRequest(BaseModel):
    directed: bool

class RunRequest(BaseModel):
    start: int
    end: int
    algorithm: Algorithm = Algorithm.WEIGHTED

    @field_validator("algorithm", mode="before")
    @classmethod
    def accept_aliases(cls, v):
        return Algorithm(v) if isinstance(v, str) else v

class RunResponse(BaseModel):
    result: SearchResult
    # playback cadence for the UI
    step_interval_ms: int
    final_path_delay_ms: int
