"""
Enumerations used by the graph core.
"""

from enum import Enum
from typing import Union


class GraphMode(Enum):
    """Orientation semantics of a graph."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"

    @classmethod
    def coerce(cls, value: Union["GraphMode", str]) -> "GraphMode":
        """
        Convert a mode name or member into a GraphMode.

        Args:
            value: A GraphMode member or its string value (case-insensitive)

        Returns:
            GraphMode: The matching member

        Raises:
            ValueError: If the value names no known mode
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown graph mode {value!r}; must be one of: {valid}")
