"""
Core models package for the attributed graph.

This package provides the edge model and the vertex index validation shared
by every graph entry point.
"""

from .base import is_vertex_index, validate_vertex_index
from .edge import Edge, EdgeLike, edge_reversal

__all__ = [
    # Base utilities
    "is_vertex_index",
    "validate_vertex_index",
    # Edge models
    "Edge",
    "EdgeLike",
    "edge_reversal",
]
