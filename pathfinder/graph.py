import logging
from typing import Dict, List, Optional, Tuple

from pathfinder.config import DEFAULT_EDGE_WEIGHT
from pathfinder.errors import InvalidReference, InvalidWeight
from pathfinder.models import Edge, Graph, Node

logger = logging.getLogger(__name__)


def default_label(node_id: int) -> str:
    """A, B, ..., Z, AA, AB, ... for ids 0, 1, ..., 25, 26, 27, ..."""
    label = ""
    n = node_id + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        label = chr(65 + rem) + label
    return label


class GraphModel:
    """
    Mutable graph built up by the caller between searches.

    Nodes are append-only and get ids 0, 1, 2, ... in creation order.
    Edges are stored as (from, to) data regardless of the directed flag;
    the flag only changes how neighbors() and edge_weight() read them.
    Both adjacency queries follow edge insertion order, which the search
    algorithms rely on for deterministic tie-breaks.
    """

    def __init__(self, directed: bool = False):
        self.directed = directed
        self._nodes: Dict[int, Node] = {}
        self._edges: List[Edge] = []
        self._next_id = 0

    # -----------------------------
    # Building
    # -----------------------------

    def add_node(self, x: float = 0.0, y: float = 0.0, label: Optional[str] = None) -> int:
        node_id = self._next_id
        self._next_id += 1
        node = Node(id=node_id, x=x, y=y, label=label or default_label(node_id))
        self._nodes[node_id] = node
        logger.debug("added node %s (%s)", node_id, node.label)
        return node_id

    def add_edge(self, from_: int, to: int, weight: int = DEFAULT_EDGE_WEIGHT) -> Edge:
        if from_ not in self._nodes or to not in self._nodes:
            raise InvalidReference(from_, to)
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 1:
            raise InvalidWeight(weight)
        edge = Edge(from_=from_, to=to, weight=weight)
        self._edges.append(edge)
        logger.debug("added edge %s -> %s (weight %s)", from_, to, weight)
        return edge

    def set_directed(self, directed: bool) -> None:
        self.directed = directed

    def clear(self) -> None:
        self._nodes.clear()
        self._edges.clear()
        self._next_id = 0

    # -----------------------------
    # Queries
    # -----------------------------

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes.values())

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def has_node(self, node_id: int) -> bool:
        return node_id in self._nodes

    def node_ids(self) -> List[int]:
        return list(self._nodes)

    def label_of(self, node_id: int) -> str:
        return self._nodes[node_id].label

    def neighbors(self, node_id: int) -> List[Tuple[int, int]]:
        """(neighbor, weight) pairs reachable from node_id, in edge insertion order."""
        result = []
        for e in self._edges:
            if e.from_ == node_id:
                result.append((e.to, e.weight))
            elif not self.directed and e.to == node_id:
                result.append((e.from_, e.weight))
        return result

    def edge_weight(self, a: int, b: int) -> Optional[int]:
        """Weight of the lightest edge usable to step from a to b, None if there is none."""
        weights = [
            e.weight for e in self._edges
            if (e.from_ == a and e.to == b) or (not self.directed and e.from_ == b and e.to == a)
        ]
        return min(weights) if weights else None

    def snapshot(self) -> Graph:
        return Graph(nodes=list(self._nodes.values()), edges=list(self._edges), directed=self.directed)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"GraphModel({kind}, nodes={self.node_count}, edges={self.edge_count})"
