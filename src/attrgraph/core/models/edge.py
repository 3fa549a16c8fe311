"""
Edge models for the attributed graph.

An edge is an ordered pair of vertex indices. The undirected graph mode
represents one conceptual edge as an edge and its reversal, so the reversal
helper lives here next to the model.
"""

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union

from .base import validate_vertex_index


@dataclass(frozen=True)
class Edge:
    """
    Directed edge between two vertex indices.

    Equality is pairwise on both endpoints, so ``Edge(a, b)`` and
    ``Edge(b, a)`` are different edges unless ``a == b``.

    Attributes:
        from_vertex (int): Source vertex index
        to_vertex (int): Destination vertex index
    """

    from_vertex: int
    to_vertex: int

    def __post_init__(self):
        """Validate endpoint indices after initialization."""
        validate_vertex_index(self.from_vertex, "from_vertex")
        validate_vertex_index(self.to_vertex, "to_vertex")

    def __iter__(self) -> Iterator[int]:
        yield self.from_vertex
        yield self.to_vertex

    @property
    def is_self_loop(self) -> bool:
        """Whether both endpoints are the same vertex."""
        return self.from_vertex == self.to_vertex

    def reversed(self) -> "Edge":
        """Return the edge pointing the other way."""
        return Edge(self.to_vertex, self.from_vertex)

    @classmethod
    def coerce(cls, edge: "EdgeLike") -> "Edge":
        """
        Normalize an edge-like value into an Edge.

        Args:
            edge: An Edge or a ``(from_vertex, to_vertex)`` pair

        Returns:
            Edge: The normalized edge

        Raises:
            TypeError: If the value is neither an Edge nor a pair
            ValueError: If a pair has the wrong length or a negative index
        """
        if isinstance(edge, cls):
            return edge
        if isinstance(edge, (str, bytes)) or not isinstance(edge, Sequence):
            raise TypeError(f"Expected an Edge or a (from, to) pair, got {type(edge).__name__}")
        if len(edge) != 2:
            raise ValueError(f"Edge pair must have exactly 2 items, got {len(edge)}")
        return cls(edge[0], edge[1])


EdgeLike = Union[Edge, Tuple[int, int]]


def edge_reversal(edge: EdgeLike) -> Edge:
    """
    Retrieve the reverse of an edge.

    Args:
        edge: Edge or ``(from, to)`` pair to reverse

    Returns:
        Edge: ``(to, from)``
    """
    return Edge.coerce(edge).reversed()
