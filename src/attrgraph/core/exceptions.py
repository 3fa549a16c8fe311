"""
Custom exceptions for the attributed graph library.

This module defines the hierarchy of exceptions raised by graph operations.
Lookups of missing vertices, edges or attributes all derive from
ResourceNotFoundError so callers can handle every "not found" case with a
single except clause.
"""


class ValidationError(Exception):
    """
    Raised when an attribute value fails schema validation.

    Examples:
        * Vertex attribute not matching the configured vertex schema
        * Edge attribute not matching the configured edge schema
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when a graph configuration is invalid.

    Examples:
        * Unknown graph mode
        * Configuration mapping not matching the configuration schema
        * Malformed attribute schema
    """


class GraphOperationError(Exception):
    """
    Raised when a graph operation would break the graph's integrity.

    Examples:
        * Attribute writes for vertices outside the vertex set
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class IntegrityViolationError(GraphOperationError):
    """
    Raised when a strict graph is asked to attribute an absent vertex.

    Graphs are permissive by default; this is only raised when the graph
    was built with ``strict_vertex_attributes=True``.
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not present in the graph.

    Examples:
        * Vertex not found
        * Edge not found
        * Attribute never set
    """


class VertexNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested vertex is not in the vertex set.

    Examples:
        * Neighbor lookup for an unknown vertex
        * Traversal from an unknown source
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge does not exist.

    Examples:
        * Edge attribute lookup for a missing edge
        * Edge attribute update for a missing edge
    """


class AttributeNotFoundError(ResourceNotFoundError):
    """
    Raised when a vertex has no attribute set.

    A vertex may exist without an attribute, so this is independent of
    vertex existence.
    """
