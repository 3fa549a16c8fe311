"""
Graph module for the attributed graph library.

This module provides the Graph class, a facade over AdjacencyStore that adds:
- Directed and undirected semantics selected by GraphMode
- Optional JSON schema validation of attribute values
- Strict or permissive handling of attributes for absent vertices
- Breadth-first and depth-first discovery orders

An undirected edge is stored as two directed edges, (a, b) and (b, a), that
are added, removed and attributed together. A self-loop is stored once.
"""

import copy as _copy
import logging
from typing import (
    Any,
    Callable,
    Generic,
    ItemsView,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    TypeVar,
    Union,
)

from ..enums import GraphMode
from ..exceptions import EdgeNotFoundError, IntegrityViolationError
from ..models import Edge, EdgeLike, validate_vertex_index
from ..traversal import GraphIterator, breadth_first_order, depth_first_order, traverse
from ..types import UNSET
from ...utils.validation import SchemaValidator
from .base import AdjacencyStore
from .config import GraphConfig

logger = logging.getLogger(__name__)

V = TypeVar("V")
E = TypeVar("E")


class Graph(Generic[V, E]):
    """
    Attributed graph with directed or undirected semantics.

    Vertices are caller-chosen non-negative integers. Every edge carries an
    attribute from creation (built by ``edge_default``); vertex attributes
    are optional. In undirected mode the edges (a, b) and (b, a) always
    exist together and carry the same attribute.

    Values returned by the attribute getters and ``get_neighbors`` are the
    stored objects, not copies, and are only valid until the next mutation.
    Pass ``copy=True`` to the attribute getters for an independent copy.

    Attributes:
        _store (AdjacencyStore): Underlying directed storage
        _config (GraphConfig): Construction options
        _validator (SchemaValidator): Attribute schema validator
    """

    def __init__(
        self,
        mode: Union[GraphMode, str] = GraphMode.DIRECTED,
        edge_default: Callable[[], E] = int,
        *,
        strict_vertex_attributes: bool = False,
        vertex_schema: Optional[dict] = None,
        edge_schema: Optional[dict] = None,
    ):
        """
        Initialize an empty graph.

        Args:
            mode: Directed or undirected semantics
            edge_default: Factory called for the attribute of each new edge
            strict_vertex_attributes: Raise IntegrityViolationError when an
                attribute is set for a vertex that is not in the graph
            vertex_schema: JSON schema vertex attribute values must match
            edge_schema: JSON schema edge attribute values must match

        Raises:
            ConfigurationError: If the mode or a schema is invalid
        """
        self._config = GraphConfig(
            mode=mode,
            strict_vertex_attributes=strict_vertex_attributes,
            vertex_schema=vertex_schema,
            edge_schema=edge_schema,
        )
        self._store: AdjacencyStore[V, E] = AdjacencyStore(edge_default=edge_default)
        self._validator = SchemaValidator(
            vertex_schema=self._config.vertex_schema,
            edge_schema=self._config.edge_schema,
            check=False,
        )
        logger.debug("Created %s graph", self._config.mode.value)

    @classmethod
    def from_config(
        cls,
        config: Union[GraphConfig, Mapping[str, Any]],
        edge_default: Callable[[], E] = int,
    ) -> "Graph[V, E]":
        """
        Create an empty graph from a configuration.

        Args:
            config: GraphConfig or a mapping accepted by GraphConfig.from_dict
            edge_default: Factory called for the attribute of each new edge

        Returns:
            Graph: New empty graph
        """
        config = GraphConfig.coerce(config)
        return cls(
            mode=config.mode,
            edge_default=edge_default,
            strict_vertex_attributes=config.strict_vertex_attributes,
            vertex_schema=config.vertex_schema,
            edge_schema=config.edge_schema,
        )

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Any],
        mode: Union[GraphMode, str] = GraphMode.DIRECTED,
        edge_default: Callable[[], E] = int,
    ) -> "Graph[V, E]":
        """
        Create a graph holding the given edges.

        Args:
            edges: Edges, ``(from, to)`` pairs or ``(from, to, attribute)`` triples
            mode: Directed or undirected semantics
            edge_default: Factory for edge attributes not given explicitly

        Returns:
            Graph: New graph
        """
        graph: "Graph[V, E]" = cls(mode=mode, edge_default=edge_default)
        for item in edges:
            if not isinstance(item, Edge) and len(item) == 3:
                graph.add_edge((item[0], item[1]), item[2])
            else:
                graph.add_edge(item)
        return graph

    # ---- properties ------------------------------------------------------

    @property
    def mode(self) -> GraphMode:
        """Orientation semantics of this graph."""
        return self._config.mode

    @property
    def config(self) -> GraphConfig:
        """Construction options of this graph."""
        return self._config

    def is_directed(self) -> bool:
        """Whether edges are one-way."""
        return self._config.mode is GraphMode.DIRECTED

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, vertex: int) -> None:
        """
        Add a vertex if it does not already exist.

        Args:
            vertex (int): Vertex index

        Raises:
            TypeError: If the index is not an integer
            ValueError: If the index is negative
        """
        self._store.add_vertex(vertex)

    def add_edge(self, edge: EdgeLike, attribute: Any = UNSET) -> None:
        """
        Add an edge, creating missing endpoints.

        Adding an existing edge is a no-op, except that a supplied attribute
        overwrites the stored one. In undirected mode both orientations are
        written.

        Args:
            edge (EdgeLike): Edge or ``(from, to)`` pair
            attribute (E): Optional attribute; the edge default is used if omitted

        Raises:
            ValidationError: If the attribute does not match the edge schema
        """
        edge = Edge.coerce(edge)
        if attribute is not UNSET:
            self._validator.require_edge_attribute(attribute)
        elif not self.is_directed() and not self._store.has_edge(edge):
            # both orientations share one default object
            attribute = self._store.edge_default()

        self._store.add_edge(edge, attribute)
        if not self.is_directed() and not edge.is_self_loop:
            self._store.add_edge(edge.reversed(), attribute)

    def remove_edge(self, edge: EdgeLike) -> bool:
        """
        Remove an edge if it exists.

        In undirected mode both orientations are removed and the result is
        True only if both were present.

        Args:
            edge (EdgeLike): Edge or ``(from, to)`` pair

        Returns:
            bool: True if the edge existed and was removed, False otherwise
        """
        edge = Edge.coerce(edge)
        removed = self._store.remove_edge(edge)
        if self.is_directed() or edge.is_self_loop:
            return removed

        reverse_removed = self._store.remove_edge(edge.reversed())
        return removed and reverse_removed

    def clear(self) -> None:
        """Remove all vertices, edges and attributes."""
        self._store.clear()

    # ---- queries ---------------------------------------------------------

    def get_vertex_count(self) -> int:
        """Get the number of vertices."""
        return self._store.get_vertex_count()

    def get_edge_count(self) -> int:
        """
        Get the number of edges.

        In undirected mode each mirrored pair counts once, and so does each
        self-loop.
        """
        stored = self._store.get_edge_count()
        if self.is_directed():
            return stored
        return (stored + self._store.get_self_loop_count()) // 2

    def has_vertex(self, vertex: int) -> bool:
        """Check if a vertex exists."""
        return self._store.has_vertex(vertex)

    def has_edge(self, edge: EdgeLike) -> bool:
        """Check if an edge exists."""
        return self._store.has_edge(edge)

    def get_neighbors(self, vertex: int) -> ItemsView[int, E]:
        """
        Get a read-only view of ``(destination, edge_attribute)`` pairs.

        Pairs come in edge creation order. The view is live and is only
        valid until the next mutation.

        Raises:
            VertexNotFoundError: If the vertex does not exist
        """
        return self._store.get_neighbors(vertex)

    def get_degree(self, vertex: int) -> int:
        """Number of neighbors of a vertex, 0 if it does not exist."""
        return self._store.get_degree(vertex)

    def vertices(self) -> Iterator[int]:
        """Iterate over vertex indices in order of first appearance."""
        return self._store.get_vertices()

    # ---- attributes ------------------------------------------------------

    def set_vertex_attribute(self, vertex: int, value: V) -> None:
        """
        Create or overwrite a vertex attribute.

        Setting an attribute does not add the vertex. Strict graphs reject
        the write for absent vertices instead.

        Args:
            vertex (int): Vertex index
            value (V): Attribute value

        Raises:
            IntegrityViolationError: If the graph is strict and the vertex is absent
            ValidationError: If the value does not match the vertex schema
        """
        validate_vertex_index(vertex)
        if not self._store.has_vertex(vertex):
            if self._config.strict_vertex_attributes:
                raise IntegrityViolationError(
                    f"Cannot set attribute for vertex {vertex}: vertex not in the graph"
                )
            logger.debug("Setting attribute for vertex %s outside the vertex set", vertex)
        self._validator.require_vertex_attribute(value)
        self._store.set_vertex_attribute(vertex, value)

    def get_vertex_attribute(self, vertex: int, copy: bool = False) -> V:
        """
        Get the attribute of a vertex.

        Args:
            vertex (int): Vertex index
            copy (bool): Return a deep copy instead of the stored object

        Returns:
            V: The attribute value

        Raises:
            AttributeNotFoundError: If no attribute was set for the vertex
        """
        value = self._store.get_vertex_attribute(vertex)
        return _copy.deepcopy(value) if copy else value

    def set_edge_attribute(self, edge: EdgeLike, value: E) -> None:
        """
        Overwrite the attribute of an existing edge.

        In undirected mode both orientations receive the value.

        Args:
            edge (EdgeLike): Edge or ``(from, to)`` pair
            value (E): New attribute value

        Raises:
            EdgeNotFoundError: If the edge does not exist
            ValidationError: If the value does not match the edge schema
        """
        edge = Edge.coerce(edge)
        targets: List[Edge] = [edge]
        if not self.is_directed() and not edge.is_self_loop:
            targets.append(edge.reversed())

        for target in targets:
            if not self._store.has_edge(target):
                raise EdgeNotFoundError(
                    f"No edge exists from {target.from_vertex} to {target.to_vertex}"
                )
        self._validator.require_edge_attribute(value)

        for target in targets:
            self._store.set_edge_attribute(target, value)

    def get_edge_attribute(self, edge: EdgeLike, copy: bool = False) -> E:
        """
        Get the attribute of an existing edge.

        Args:
            edge (EdgeLike): Edge or ``(from, to)`` pair
            copy (bool): Return a deep copy instead of the stored object

        Returns:
            E: The attribute value

        Raises:
            EdgeNotFoundError: If the edge does not exist
        """
        value = self._store.get_edge_attribute(edge)
        return _copy.deepcopy(value) if copy else value

    # ---- traversal -------------------------------------------------------

    def breadth_first_order(self, source: int) -> List[int]:
        """
        Vertices reachable from source in breadth-first discovery order.

        Raises:
            VertexNotFoundError: If the source is not in the graph
        """
        return breadth_first_order(self, source)

    def depth_first_order(self, source: int) -> List[int]:
        """
        Vertices reachable from source in depth-first discovery order.

        Raises:
            VertexNotFoundError: If the source is not in the graph
        """
        return depth_first_order(self, source)

    def traverse(self, source: int, strategy: str = "bfs") -> GraphIterator:
        """Lazy traversal iterator; see attrgraph.core.traversal.traverse."""
        return traverse(self, source, strategy)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return self._store.has_vertex(vertex)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.get_vertex_count()

    def __repr__(self) -> str:
        return (
            f"Graph(mode={self.mode.value}, vertices={self.get_vertex_count()}, "
            f"edges={self.get_edge_count()})"
        )


__all__ = [
    "AdjacencyStore",
    "Graph",
    "GraphConfig",
]
