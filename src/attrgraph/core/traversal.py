"""
Graph traversal using the iterator pattern.

This module provides breadth-first and depth-first discovery orders over the
vertices reachable from a source. Traversals only use the neighbor
enumeration of the graph, so sibling order always follows edge creation
order and results are deterministic for a given edit history.

Both iterators check the source when they are created: an unknown source
raises VertexNotFoundError before any vertex is produced.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Dict, Iterator, List, Set, Type

from .exceptions import VertexNotFoundError
from .models import validate_vertex_index
from .types import GraphProtocol

logger = logging.getLogger(__name__)


class GraphIterator(ABC):
    """Base class for graph traversal iterators."""

    def __init__(self, graph: GraphProtocol, source: int):
        """
        Initialize iterator.

        Args:
            graph: The graph to traverse
            source: Vertex the traversal starts from

        Raises:
            TypeError: If the source is not an integer
            ValueError: If the source is negative
            VertexNotFoundError: If the source is not in the graph
        """
        validate_vertex_index(source, "source")
        if not graph.has_vertex(source):
            raise VertexNotFoundError(f"Source vertex {source!r} not found in the graph")
        self.graph = graph
        self.source = source
        self.discovered: Set[int] = set()

    @abstractmethod
    def __iter__(self) -> Iterator[int]:
        """
        Get iterator for traversal.

        Returns:
            Iterator yielding vertex indices in discovery order
        """
        pass


class BFSIterator(GraphIterator):
    """
    Breadth-first traversal iterator.

    Vertices are marked discovered when they are enqueued, so each one is
    yielded exactly once and in non-decreasing distance from the source.
    """

    def __iter__(self) -> Iterator[int]:
        self.discovered = {self.source}
        queue = deque([self.source])
        yield self.source

        while queue:
            vertex = queue.popleft()
            for neighbor, _ in self.graph.get_neighbors(vertex):
                if neighbor not in self.discovered:
                    self.discovered.add(neighbor)
                    yield neighbor
                    queue.append(neighbor)


class DFSIterator(GraphIterator):
    """
    Depth-first traversal iterator.

    Vertices are marked discovered when popped rather than when pushed.
    Neighbors are pushed in stored order, so the most recently added
    neighbor is expanded first.
    """

    def __iter__(self) -> Iterator[int]:
        self.discovered = {self.source}
        stack = [self.source]
        yield self.source

        while stack:
            vertex = stack.pop()
            if vertex not in self.discovered:
                self.discovered.add(vertex)
                yield vertex
            for neighbor, _ in self.graph.get_neighbors(vertex):
                if neighbor not in self.discovered:
                    stack.append(neighbor)


STRATEGIES: Dict[str, Type[GraphIterator]] = {
    "bfs": BFSIterator,
    "dfs": DFSIterator,
}


def traverse(graph: GraphProtocol, source: int, strategy: str = "bfs") -> GraphIterator:
    """
    Get an iterator for traversing the graph.

    Args:
        graph: Graph to traverse
        source: Starting vertex
        strategy: Traversal strategy ('bfs' or 'dfs')

    Returns:
        Appropriate iterator instance

    Raises:
        ValueError: If strategy is not recognized
        VertexNotFoundError: If the source is not in the graph
    """
    if strategy not in STRATEGIES:
        raise ValueError(
            f"Unknown traversal strategy '{strategy}'. "
            f"Must be one of: {', '.join(STRATEGIES.keys())}"
        )
    return STRATEGIES[strategy](graph, source)


def breadth_first_order(graph: GraphProtocol, source: int) -> List[int]:
    """Vertices reachable from source in breadth-first discovery order."""
    order = list(BFSIterator(graph, source))
    logger.debug("BFS from %s discovered %d vertices", source, len(order))
    return order


def depth_first_order(graph: GraphProtocol, source: int) -> List[int]:
    """Vertices reachable from source in depth-first discovery order."""
    order = list(DFSIterator(graph, source))
    logger.debug("DFS from %s discovered %d vertices", source, len(order))
    return order
