"""Shared test fixtures."""

import pytest

from attrgraph.core.enums import GraphMode
from attrgraph.core.graph import Graph


@pytest.fixture
def directed_graph() -> Graph:
    """Fixture providing an empty directed graph."""
    return Graph(GraphMode.DIRECTED)


@pytest.fixture
def undirected_graph() -> Graph:
    """Fixture providing an empty undirected graph."""
    return Graph(GraphMode.UNDIRECTED)


@pytest.fixture
def undirected_triangle() -> Graph:
    """Fixture providing an undirected triangle over vertices 0, 1 and 2."""
    graph = Graph(GraphMode.UNDIRECTED)
    graph.add_edge((0, 1))
    graph.add_edge((1, 2))
    graph.add_edge((2, 0))
    return graph
