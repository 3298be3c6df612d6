"""
Configuration constants for the path visualizer backend.

Values can be overridden through environment variables.
"""

import logging
import os

# -----------------------------
# Logging
# -----------------------------

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# -----------------------------
# API
# -----------------------------

API_HOST = os.environ.get("PATHFINDER_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("PATHFINDER_PORT", "8000"))

# Comma separated; defaults cover Vite and CRA/Next dev servers
CORS_ORIGINS = [
    o.strip()
    for o in os.environ.get(
        "PATHFINDER_CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"
    ).split(",")
    if o.strip()
]

# Oldest events are dropped past this size
MAX_EVENTS = int(os.environ.get("PATHFINDER_MAX_EVENTS", "1000"))

# -----------------------------
# Graph
# -----------------------------

DEFAULT_EDGE_WEIGHT = 1
MAX_EDGE_WEIGHT = 99

# -----------------------------
# Playback (consumed by the UI)
# -----------------------------

# One trace state per interval
STEP_INTERVAL_MS = int(os.environ.get("PATHFINDER_STEP_INTERVAL_MS", "500"))

# Extra wait after the last state before the final path is shown
FINAL_PATH_DELAY_MS = int(os.environ.get("PATHFINDER_FINAL_PATH_DELAY_MS", "1000"))


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
