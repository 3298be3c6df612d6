from typing import List, Optional
from datetime import datetime
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pathfinder.config import (
    API_HOST,
    API_PORT,
    CORS_ORIGINS,
    FINAL_PATH_DELAY_MS,
    STEP_INTERVAL_MS,
    configure_logging,
)
from pathfinder.errors import InvalidReference, InvalidWeight, NodeNotFound
from pathfinder.models import *
from pathfinder.helpers import STATE, graph_stats, log_event, run_search
# -----------------------------
# App Setup
# -----------------------------

app = FastAPI(
    title="Shortest Path Visualizer API",
    version="0.1.0",
    description=(
        "Graph editing and path search backend for the shortest path visualizer.\n\n"
        "The UI adds nodes and edges, picks start/end, calls /run and replays the "
        "returned trace one state per step_interval_ms.\n"
        "State is in-memory and resets on restart."
    ),
)

# CORS for local dev frontends (Vite/Next/CRA)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -----------------------------
# Lifecycle
# -----------------------------

@app.on_event("startup")
async def setup() -> None:
    configure_logging()

# -----------------------------
# Endpoints
# -----------------------------

@app.get("/healthz")
async def healthz():
    return {"ok": True}

@app.get("/events", response_model=List[Event])
async def get_events(limit: Optional[int] = None, since: Optional[str] = None):
    """
    Retrieve events, optionally limited and filtered by a 'since' timestamp (ISO 8601).
    """
    events = STATE.get("events", [])

    if since is not None:
        try:
            since_dt = datetime.fromisoformat(since.replace("Z", "+00:00"))
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid ISO 8601 timestamp for 'since'")
        if since_dt.tzinfo is None:
            raise HTTPException(status_code=400, detail="'since' must include a timezone")

        events = [
            e for e in events
            if datetime.fromisoformat(e.time.replace("Z", "+00:00")) > since_dt
        ]

    if limit is not None:
        events = events[-limit:] if limit > 0 else []

    return events[::-1]

@app.get("/getGraph", response_model=Graph, tags=["graph"])
async def get_graph() -> Graph:
    return STATE["graph"].snapshot()

@app.post("/addNode", response_model=Node, tags=["graph"])
async def add_node(req: AddNodeRequest) -> Node:
    graph = STATE["graph"]
    node_id = graph.add_node(req.x, req.y, req.label)
    node = graph.nodes[-1]
    log_event("node_added", {"node": node_id, "label": node.label})
    return node

@app.post("/addEdge", response_model=Edge, tags=["graph"])
async def add_edge(req: AddEdgeRequest) -> Edge:
    try:
        edge = STATE["graph"].add_edge(req.from_, req.to, req.weight)
    except (InvalidReference, InvalidWeight) as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    log_event("edge_added", {"from": edge.from_, "to": edge.to, "weight": edge.weight})
    return edge

@app.post("/setDirected", response_model=Graph, tags=["graph"])
async def set_directed(req: SetDirectedRequest) -> Graph:
    graph = STATE["graph"]
    graph.set_directed(req.directed)
    # paths from the previous mode no longer describe this graph
    STATE["last_result"] = None
    log_event("directed_changed", {"directed": req.directed})
    return graph.snapshot()

@app.post("/clear", response_model=Graph, tags=["graph"])
async def clear_graph() -> Graph:
    graph = STATE["graph"]
    graph.clear()
    STATE["last_result"] = None
    log_event("graph_cleared", {})
    return graph.snapshot()

@app.post("/run", response_model=RunResponse, tags=["search"])
async def run(req: RunRequest) -> RunResponse:
    try:
        result = run_search(STATE["graph"], req.start, req.end, req.algorithm)
    except NodeNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    STATE["last_result"] = result
    log_event("search_completed", {
        "algorithm": result.algorithm.value,
        "start": result.start,
        "end": result.end,
        "status": result.status.value,
        "steps": len(result.trace),
        "path": result.path,
        "cost": result.cost,
    })
    return RunResponse(
        result=result,
        step_interval_ms=STEP_INTERVAL_MS,
        final_path_delay_ms=FINAL_PATH_DELAY_MS,
    )

@app.get("/stats", response_model=GraphStats, tags=["graph"])
async def get_stats() -> GraphStats:
    return graph_stats(STATE["graph"], STATE["last_result"])

# -----------------------------
# Run (if executed directly)
# -----------------------------

# Use: uvicorn pathfinder.main:app --reload
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pathfinder.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=True,
    )
