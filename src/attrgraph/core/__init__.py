"""Core graph functionality."""

from .enums import GraphMode
from .exceptions import (
    AttributeNotFoundError,
    ConfigurationError,
    EdgeNotFoundError,
    GraphOperationError,
    IntegrityViolationError,
    ResourceNotFoundError,
    ValidationError,
    VertexNotFoundError,
)
from .models import Edge, EdgeLike, edge_reversal
from .types import UNSET, GraphProtocol
from .traversal import (
    BFSIterator,
    DFSIterator,
    GraphIterator,
    breadth_first_order,
    depth_first_order,
    traverse,
)
from .graph import AdjacencyStore, Graph, GraphConfig

__all__ = [
    "AdjacencyStore",
    "AttributeNotFoundError",
    "BFSIterator",
    "ConfigurationError",
    "DFSIterator",
    "Edge",
    "EdgeLike",
    "EdgeNotFoundError",
    "Graph",
    "GraphConfig",
    "GraphIterator",
    "GraphMode",
    "GraphOperationError",
    "GraphProtocol",
    "IntegrityViolationError",
    "ResourceNotFoundError",
    "UNSET",
    "ValidationError",
    "VertexNotFoundError",
    "breadth_first_order",
    "depth_first_order",
    "edge_reversal",
    "traverse",
]
