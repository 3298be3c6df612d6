import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pathfinder.algo_funcs import bfs, dijkstra, path_cost, reconstruct_path
from pathfinder.config import MAX_EVENTS
from pathfinder.errors import EmptyGraph, NodeNotFound
from pathfinder.graph import GraphModel
from pathfinder.models import Algorithm, Event, GraphStats, SearchResult, SearchStatus

logger = logging.getLogger(__name__)

# -----------------------------
# In-memory State (resets on restart)
# -----------------------------

STATE: Dict[str, Any] = {
    "graph": GraphModel(),
    "last_result": None,
    "events": [],
}

# -----------------------------
# Search
# -----------------------------

def run_search(graph: GraphModel, start: int, end: int, algorithm: Algorithm = Algorithm.WEIGHTED) -> SearchResult:
    """
    Run one search and return its trace, path and cost.

    - raises EmptyGraph / NodeNotFound before doing any work
    - trace and path come from the same traversal
    - cost is only reported for weighted runs that reach `end`
    """
    if graph.node_count == 0:
        raise EmptyGraph()
    for node_id in (start, end):
        if not graph.has_node(node_id):
            raise NodeNotFound(node_id)

    algorithm = Algorithm(algorithm)
    search = dijkstra if algorithm == Algorithm.WEIGHTED else bfs
    traversal = search(graph, start, end)
    path = reconstruct_path(traversal.previous, start, end)

    cost = None
    if path and algorithm == Algorithm.WEIGHTED:
        cost = path_cost(graph, path)

    status = SearchStatus.COMPLETED if path else SearchStatus.UNREACHABLE
    logger.info(
        "%s search %s -> %s: %s after %d steps, path=%s cost=%s",
        algorithm.value, start, end, status.value, len(traversal.trace), path, cost,
    )
    return SearchResult(
        algorithm=algorithm,
        start=start,
        end=end,
        directed=graph.directed,
        trace=traversal.trace,
        path=path,
        cost=cost,
        status=status,
    )


def graph_stats(graph: GraphModel, result: Optional[SearchResult] = None) -> GraphStats:
    stats = GraphStats(nodes=graph.node_count, edges=graph.edge_count, directed=graph.directed)
    if result is not None and result.path:
        stats.path_length = result.hops
        if result.algorithm == Algorithm.WEIGHTED:
            stats.total_weight = result.cost
    return stats

# -----------------------------
# Event log
# -----------------------------

def log_event(type_: str, detail: dict) -> Event:
    time = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    event = Event(time=time, type=type_, detail=detail)
    STATE["events"].append(event)
    if len(STATE["events"]) > MAX_EVENTS:
        del STATE["events"][: len(STATE["events"]) - MAX_EVENTS]
    logger.debug("event %s %s", type_, detail)
    return event
