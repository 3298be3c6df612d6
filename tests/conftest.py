"""
Shared graph fixtures.

Node ids follow creation order, so A=0, B=1, C=2, D=3 in every fixture.
"""

import pytest

from pathfinder.graph import GraphModel

A, B, C, D = 0, 1, 2, 3


def build_graph(node_count, edges, directed=False):
    graph = GraphModel(directed=directed)
    for _ in range(node_count):
        graph.add_node()
    for edge in edges:
        graph.add_edge(*edge)
    return graph


@pytest.fixture
def triangle():
    """A-B (1), B-C (1), A-C (5), undirected."""
    return build_graph(3, [(A, B, 1), (B, C, 1), (A, C, 5)])


@pytest.fixture
def directed_triangle():
    return build_graph(3, [(A, B, 1), (B, C, 1), (A, C, 5)], directed=True)


@pytest.fixture
def square():
    """4-cycle A-B-C-D-A, undirected, unit weights."""
    return build_graph(4, [(A, B), (B, C), (C, D), (D, A)])
