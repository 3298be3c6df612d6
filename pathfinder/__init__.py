"""Shortest path visualizer backend: graph model, search engine and HTTP API."""

__version__ = "0.1.0"
