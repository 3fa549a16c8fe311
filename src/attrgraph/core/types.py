"""
Core type definitions and protocols.

This module provides the protocol traversals consume and the sentinel used
to tell "no attribute given" apart from an attribute whose value is None.
"""

from typing import Any, Iterable, Protocol, Tuple


class _Unset:
    """Marker type for arguments that were not supplied."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class GraphProtocol(Protocol):
    """Protocol defining the graph operations traversals rely on."""

    def has_vertex(self, vertex: int) -> bool:
        """Check if a vertex exists."""
        ...

    def get_neighbors(self, vertex: int) -> Iterable[Tuple[int, Any]]:
        """Get ``(destination, edge_attribute)`` pairs of a vertex in stored order."""
        ...
