"""
Common validation helpers shared by the graph models.
"""

from typing import Any


def validate_vertex_index(vertex: Any, name: str = "vertex") -> int:
    """
    Validate that a value is usable as a vertex index.

    Args:
        vertex: Candidate vertex index
        name: Name used in error messages

    Returns:
        int: The validated index

    Raises:
        TypeError: If the value is not an integer (booleans are rejected)
        ValueError: If the value is negative
    """
    if isinstance(vertex, bool) or not isinstance(vertex, int):
        raise TypeError(f"{name} must be a non-negative integer, got {type(vertex).__name__}")
    if vertex < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {vertex}")
    return vertex


def is_vertex_index(vertex: Any) -> bool:
    """Check whether a value is a non-negative integer (not a bool)."""
    return isinstance(vertex, int) and not isinstance(vertex, bool) and vertex >= 0
