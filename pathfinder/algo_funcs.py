import logging
import math
from collections import deque
from typing import Dict, List, NamedTuple, Optional, Set

from pathfinder.graph import GraphModel
from pathfinder.models import SearchState

logger = logging.getLogger(__name__)


class Traversal(NamedTuple):
    trace: List[SearchState]
    distances: Dict[int, float]
    previous: Dict[int, Optional[int]]


def _snapshot(current: int, visited: Set[int], distances: Dict[int, float]) -> SearchState:
    # copy now so later mutation of the live maps can't reach recorded frames
    return SearchState(current_node=current, visited=frozenset(visited), distances=dict(distances))


# -----------------------------
# Weighted search
# -----------------------------

def dijkstra(graph: GraphModel, start: int, end: int) -> Traversal:
    """
    Label-correcting shortest path with linear-scan minimum selection, O(V^2).

    Ties on distance go to the node created first (strict < while scanning
    in insertion order). The loop stops right after settling `end`, without
    relaxing its neighbors, or when no unvisited node has a finite distance.
    Weights are assumed positive.
    """
    node_ids = graph.node_ids()
    distances: Dict[int, float] = {n: math.inf for n in node_ids}
    previous: Dict[int, Optional[int]] = {n: None for n in node_ids}
    distances[start] = 0
    visited: Set[int] = set()
    trace: List[SearchState] = []

    while len(visited) < len(node_ids):
        current = None
        best = math.inf
        for n in node_ids:
            if n not in visited and distances[n] < best:
                best = distances[n]
                current = n
        if current is None:
            break  # rest of the graph is unreachable

        visited.add(current)
        trace.append(_snapshot(current, visited, distances))
        logger.debug("settled %s at distance %s", current, best)

        if current == end:
            break

        for neighbor, weight in graph.neighbors(current):
            if neighbor in visited:
                continue
            candidate = distances[current] + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                previous[neighbor] = current

    return Traversal(trace, distances, previous)


# -----------------------------
# Unweighted search
# -----------------------------

def bfs(graph: GraphModel, start: int, end: int) -> Traversal:
    """Breadth-first search; neighbors are enqueued in edge insertion order."""
    distances: Dict[int, float] = {n: math.inf for n in graph.node_ids()}
    previous: Dict[int, Optional[int]] = {n: None for n in distances}
    distances[start] = 0
    visited: Set[int] = {start}
    queue = deque([start])
    trace: List[SearchState] = []

    while queue:
        current = queue.popleft()
        trace.append(_snapshot(current, visited, distances))
        logger.debug("dequeued %s at depth %s", current, distances[current])

        if current == end:
            break

        for neighbor, _ in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
                previous[neighbor] = current
                distances[neighbor] = distances[current] + 1

    return Traversal(trace, distances, previous)


# -----------------------------
# Path helpers
# -----------------------------

def reconstruct_path(previous: Dict[int, Optional[int]], start: int, end: int) -> List[int]:
    """Follow predecessors back from end. Empty list when end was never reached."""
    path = [end]
    node = end
    while node != start:
        node = previous.get(node)
        if node is None:
            return []
        path.append(node)
    path.reverse()
    return path


def path_cost(graph: GraphModel, path: List[int]) -> int:
    total = 0
    for a, b in zip(path, path[1:]):
        weight = graph.edge_weight(a, b)
        if weight is None:
            raise ValueError(f"no edge between {a} and {b}")
        total += weight
    return total
