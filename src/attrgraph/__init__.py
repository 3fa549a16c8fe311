"""
attrgraph - In-memory attributed graph container

This package provides a generic graph of integer-indexed vertices with
optional per-vertex attributes and per-edge attributes. It includes:

- A directed adjacency store that owns all graph data
- A Graph facade with directed and undirected semantics
- Breadth-first and depth-first discovery orders
- JSON schema validation of attribute values
"""

__version__ = "0.1.0"
__author__ = "attrgraph Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("attrgraph requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.enums import GraphMode
from .core.exceptions import (
    AttributeNotFoundError,
    EdgeNotFoundError,
    ResourceNotFoundError,
    VertexNotFoundError,
)
from .core.graph import Graph, GraphConfig
from .core.models import Edge, edge_reversal
from .core.traversal import breadth_first_order, depth_first_order

__all__ = [
    "AttributeNotFoundError",
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "GraphConfig",
    "GraphMode",
    "ResourceNotFoundError",
    "VertexNotFoundError",
    "breadth_first_order",
    "depth_first_order",
    "edge_reversal",
]
