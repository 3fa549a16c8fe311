"""
Directed adjacency store with attribute payloads.

This module provides the AdjacencyStore class that owns every piece of graph
data: the vertex set, the sparse vertex-attribute mapping, and one ordered
neighbor mapping per source vertex whose values are the edge attributes.
All operations are directed primitives; the undirected behaviour is layered
on top by the Graph facade.

Neighbor mappings are plain dicts keyed by destination. Dicts keep insertion
order, so neighbor enumeration follows edge-creation order, and an edge that
is removed and added again moves to the end.
"""

from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    ItemsView,
    Iterable,
    Iterator,
    Optional,
    Set,
    Tuple,
    TypeVar,
)

from ..exceptions import AttributeNotFoundError, EdgeNotFoundError, VertexNotFoundError
from ..models import Edge, EdgeLike, is_vertex_index, validate_vertex_index
from ..types import UNSET

V = TypeVar("V")
E = TypeVar("E")


@dataclass
class AdjacencyStore(Generic[V, E]):
    """
    Directed graph storage using an adjacency mapping representation.

    Every existing edge carries an attribute from the moment it is created
    (produced by ``edge_default``). Vertex attributes are optional and live
    in a separate mapping, so a vertex can exist without one.

    Attributes:
        edge_default (Callable[[], E]): Factory for new edge attributes
        _vertices (Set[int]): Set of all vertex indices
        _vertex_attributes (Dict[int, V]): Sparse vertex attribute mapping
        _adjacency (Dict[int, Dict[int, E]]): Source -> destination -> attribute
        _edge_count (int): Total number of stored directed edges
        _self_loop_count (int): Number of stored edges whose endpoints match
    """

    edge_default: Callable[[], E] = int
    _vertices: Set[int] = field(default_factory=set)
    _vertex_attributes: Dict[int, V] = field(default_factory=dict)
    _adjacency: Dict[int, Dict[int, E]] = field(default_factory=dict)
    _edge_count: int = 0
    _self_loop_count: int = 0

    @classmethod
    def from_edges(
        cls, edges: Iterable[Any], edge_default: Callable[[], E] = int
    ) -> "AdjacencyStore[V, E]":
        """
        Create a store from an iterable of edges.

        Args:
            edges: Edges, ``(from, to)`` pairs or ``(from, to, attribute)`` triples
            edge_default: Factory for edge attributes not given explicitly

        Returns:
            AdjacencyStore: New store holding the given edges
        """
        store: "AdjacencyStore[V, E]" = cls(edge_default=edge_default)
        for item in edges:
            if not isinstance(item, Edge) and len(item) == 3:
                store.add_edge((item[0], item[1]), item[2])
            else:
                store.add_edge(item)
        return store

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, vertex: int) -> None:
        """
        Add a vertex if it is not already present.

        Args:
            vertex (int): Vertex index to add
        """
        validate_vertex_index(vertex)
        if vertex not in self._vertices:
            self._vertices.add(vertex)
            self._adjacency[vertex] = {}

    def add_edge(self, edge: EdgeLike, attribute: Any = UNSET) -> None:
        """
        Add a directed edge, creating missing endpoints.

        Adding an edge that already exists leaves it in place. When an
        attribute is given it is written whether or not the edge was new.

        Args:
            edge (EdgeLike): Edge to add
            attribute (E): Optional attribute to store on the edge
        """
        edge = Edge.coerce(edge)

        if not self.has_edge(edge):
            self.add_vertex(edge.from_vertex)
            self.add_vertex(edge.to_vertex)
            self._adjacency[edge.from_vertex][edge.to_vertex] = self.edge_default()
            self._edge_count += 1
            if edge.is_self_loop:
                self._self_loop_count += 1

        if attribute is not UNSET:
            self._adjacency[edge.from_vertex][edge.to_vertex] = attribute

    def remove_edge(self, edge: EdgeLike) -> bool:
        """
        Remove a directed edge if it exists.

        Vertices are never removed, and the order of the remaining
        neighbors is preserved.

        Args:
            edge (EdgeLike): Edge to remove

        Returns:
            bool: True if the edge existed and was removed, False otherwise
        """
        edge = Edge.coerce(edge)
        if not self.has_edge(edge):
            return False

        del self._adjacency[edge.from_vertex][edge.to_vertex]
        self._edge_count -= 1
        if edge.is_self_loop:
            self._self_loop_count -= 1
        return True

    def clear(self) -> None:
        """Clear all vertices, edges and attributes."""
        self._vertices.clear()
        self._vertex_attributes.clear()
        self._adjacency.clear()
        self._edge_count = 0
        self._self_loop_count = 0

    # ---- queries ---------------------------------------------------------

    def has_vertex(self, vertex: int) -> bool:
        """
        Check if a vertex exists in the store.

        Args:
            vertex (int): Vertex index to check

        Returns:
            bool: True if the vertex exists, False otherwise
        """
        return is_vertex_index(vertex) and vertex in self._vertices

    def has_edge(self, edge: EdgeLike) -> bool:
        """
        Check if a directed edge exists in the store.

        Args:
            edge (EdgeLike): Edge to check

        Returns:
            bool: True if the edge exists, False otherwise
        """
        endpoints = _endpoints(edge)
        if endpoints is None:
            return False
        from_vertex, to_vertex = endpoints
        return to_vertex in self._adjacency.get(from_vertex, {})

    def get_vertex_count(self) -> int:
        """Get the number of vertices in the store."""
        return len(self._vertices)

    def get_edge_count(self) -> int:
        """Get the number of stored directed edges."""
        return self._edge_count

    def get_self_loop_count(self) -> int:
        """Get the number of stored edges from a vertex to itself."""
        return self._self_loop_count

    def get_vertices(self) -> Iterator[int]:
        """Iterate over the vertex indices in order of first appearance."""
        return iter(self._adjacency)

    def get_degree(self, vertex: int) -> int:
        """Get the out-degree of a vertex, 0 if it does not exist."""
        validate_vertex_index(vertex)
        return len(self._adjacency.get(vertex, {}))

    def get_neighbors(self, vertex: int) -> ItemsView[int, E]:
        """
        Get a read-only view of a vertex's neighbors.

        The view yields ``(destination, edge_attribute)`` pairs in edge
        creation order and reflects the live store, so it is only valid
        until the next mutation.

        Args:
            vertex (int): Source vertex

        Returns:
            ItemsView[int, E]: Neighbor view

        Raises:
            VertexNotFoundError: If the vertex does not exist
            TypeError: If the vertex is not an integer
            ValueError: If the vertex is negative
        """
        validate_vertex_index(vertex)
        if vertex not in self._vertices:
            raise VertexNotFoundError(f"Vertex {vertex!r} not found in the graph")
        return self._adjacency[vertex].items()

    # ---- attributes ------------------------------------------------------

    def set_vertex_attribute(self, vertex: int, value: V) -> None:
        """
        Create or overwrite a vertex attribute.

        The vertex is not added to the vertex set.

        Args:
            vertex (int): Vertex index
            value (V): Attribute value
        """
        validate_vertex_index(vertex)
        self._vertex_attributes[vertex] = value

    def has_vertex_attribute(self, vertex: int) -> bool:
        """Check whether an attribute has been set for a vertex."""
        return is_vertex_index(vertex) and vertex in self._vertex_attributes

    def get_vertex_attribute(self, vertex: int) -> V:
        """
        Get the attribute stored for a vertex.

        Args:
            vertex (int): Vertex index

        Returns:
            V: The stored value (not a copy)

        Raises:
            AttributeNotFoundError: If no attribute was set for the vertex
            TypeError: If the vertex is not an integer
            ValueError: If the vertex is negative
        """
        validate_vertex_index(vertex)
        try:
            return self._vertex_attributes[vertex]
        except KeyError:
            raise AttributeNotFoundError(f"Vertex {vertex!r} has no attribute set") from None

    def set_edge_attribute(self, edge: EdgeLike, value: E) -> None:
        """
        Overwrite the attribute of an existing edge.

        Args:
            edge (EdgeLike): Edge to update
            value (E): New attribute value

        Raises:
            EdgeNotFoundError: If the edge does not exist
        """
        edge = Edge.coerce(edge)
        neighbors = self._edge_neighbors(edge)
        neighbors[edge.to_vertex] = value

    def get_edge_attribute(self, edge: EdgeLike) -> E:
        """
        Get the attribute of an existing edge.

        Args:
            edge (EdgeLike): Edge to look up

        Returns:
            E: The stored value (not a copy)

        Raises:
            EdgeNotFoundError: If the edge does not exist
        """
        edge = Edge.coerce(edge)
        return self._edge_neighbors(edge)[edge.to_vertex]

    def _edge_neighbors(self, edge: Edge) -> Dict[int, E]:
        neighbors = self._adjacency.get(edge.from_vertex)
        if neighbors is None or edge.to_vertex not in neighbors:
            raise EdgeNotFoundError(
                f"No edge exists from {edge.from_vertex} to {edge.to_vertex}"
            )
        return neighbors


def _endpoints(edge: Any) -> Optional[Tuple[int, int]]:
    """Endpoints of an edge-like value, or None if it cannot name an edge."""
    if isinstance(edge, Edge):
        return edge.from_vertex, edge.to_vertex
    try:
        normalized = Edge.coerce(edge)
    except (TypeError, ValueError):
        return None
    return normalized.from_vertex, normalized.to_vertex
