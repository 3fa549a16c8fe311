"""
Graph configuration.

GraphConfig collects the construction-time options of a Graph. Configurations
can be built directly or from a plain mapping, in which case the mapping is
validated against CONFIG_SCHEMA with jsonschema first.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate

from ...utils.validation import check_schema
from ..enums import GraphMode
from ..exceptions import ConfigurationError

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "mode": {"type": "string", "enum": [mode.value for mode in GraphMode]},
        "strict_vertex_attributes": {"type": "boolean"},
        "vertex_schema": {"type": ["object", "null"]},
        "edge_schema": {"type": ["object", "null"]},
    },
    "additionalProperties": False,
}


@dataclass
class GraphConfig:
    """
    Construction options for a Graph.

    Attributes:
        mode (GraphMode): Directed or undirected semantics
        strict_vertex_attributes (bool): Reject attributes for absent vertices
        vertex_schema (Optional[Dict[str, Any]]): JSON schema for vertex attributes
        edge_schema (Optional[Dict[str, Any]]): JSON schema for edge attributes
    """

    mode: GraphMode = GraphMode.DIRECTED
    strict_vertex_attributes: bool = False
    vertex_schema: Optional[Dict[str, Any]] = None
    edge_schema: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        """Normalize the mode and check attribute schemas."""
        try:
            self.mode = GraphMode.coerce(self.mode)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        if self.vertex_schema is not None:
            check_schema(self.vertex_schema, "vertex schema")
        if self.edge_schema is not None:
            check_schema(self.edge_schema, "edge schema")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphConfig":
        """
        Build a configuration from a mapping.

        Args:
            data: Mapping with any of the GraphConfig field names

        Returns:
            GraphConfig: The validated configuration

        Raises:
            ConfigurationError: If the mapping does not match CONFIG_SCHEMA

        Example:
            >>> GraphConfig.from_dict({"mode": "undirected"}).mode
            <GraphMode.UNDIRECTED: 'undirected'>
        """
        try:
            validate(instance=dict(data), schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph configuration: {e.message}") from e
        return cls(**data)

    @classmethod
    def coerce(cls, config: Union["GraphConfig", Mapping[str, Any]]) -> "GraphConfig":
        """Return the config unchanged or build one from a mapping."""
        if isinstance(config, cls):
            return config
        if isinstance(config, Mapping):
            return cls.from_dict(config)
        raise ConfigurationError(
            f"Expected GraphConfig or mapping, got {type(config).__name__}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a mapping accepted by from_dict."""
        return {
            "mode": self.mode.value,
            "strict_vertex_attributes": self.strict_vertex_attributes,
            "vertex_schema": self.vertex_schema,
            "edge_schema": self.edge_schema,
        }
