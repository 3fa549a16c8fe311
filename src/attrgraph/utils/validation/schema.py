"""
Schema Validation Components for attribute values

This module provides JSON schema-based validation for the values stored as
vertex and edge attributes. A graph may be configured with one schema for
vertex attributes and one for edge attributes; every explicitly supplied
value is checked against the matching schema before it is written.
"""

from typing import Any, Dict, Optional

from jsonschema import SchemaError
from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate
from jsonschema.validators import validator_for

from ...core.exceptions import ConfigurationError, ValidationError
from .base import ValidationResult


def check_schema(schema: Dict[str, Any], name: str) -> None:
    """
    Ensure a JSON schema is itself well formed.

    Args:
        schema: JSON schema definition as a dictionary
        name: Label used in error messages

    Raises:
        ConfigurationError: If the schema is not a valid JSON schema
    """
    if not isinstance(schema, dict):
        raise ConfigurationError(f"{name} must be a JSON schema object")
    try:
        validator_for(schema).check_schema(schema)
    except SchemaError as e:
        raise ConfigurationError(f"Invalid {name}: {e.message}") from e


class SchemaValidator:
    """
    JSON Schema-based validator for vertex and edge attribute values.

    Either schema may be omitted, in which case values of that kind are
    accepted as-is and the result carries a warning.

    Attributes:
        vertex_schema (Optional[Dict[str, Any]]): Schema for vertex attributes
        edge_schema (Optional[Dict[str, Any]]): Schema for edge attributes
    """

    def __init__(
        self,
        vertex_schema: Optional[Dict[str, Any]] = None,
        edge_schema: Optional[Dict[str, Any]] = None,
        *,
        check: bool = True,
    ):
        """
        Initialize the validator.

        Args:
            vertex_schema: JSON schema for vertex attribute values
            edge_schema: JSON schema for edge attribute values
            check: Check that both schemas are well formed; pass False when
                they have already been checked, as GraphConfig does

        Raises:
            ConfigurationError: If either schema is malformed
        """
        if check:
            if vertex_schema is not None:
                check_schema(vertex_schema, "vertex schema")
            if edge_schema is not None:
                check_schema(edge_schema, "edge schema")
        self.vertex_schema = vertex_schema
        self.edge_schema = edge_schema

    @property
    def is_active(self) -> bool:
        """Whether any schema is registered."""
        return self.vertex_schema is not None or self.edge_schema is not None

    @staticmethod
    def _check(value: Any, schema: Optional[Dict[str, Any]], kind: str) -> ValidationResult:
        errors = []
        warnings = []

        if schema is None:
            warnings.append(f"No schema registered for {kind} attributes")
        else:
            try:
                json_validate(instance=value, schema=schema)
            except JsonSchemaError as e:
                errors.append(f"Schema validation failed: {e.message}")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={"attribute_kind": kind},
        )

    def check_vertex_attribute(self, value: Any) -> ValidationResult:
        """
        Validate a vertex attribute value against the vertex schema.

        Args:
            value: Attribute value to validate

        Returns:
            ValidationResult containing validation details and any errors or warnings

        Example:
            >>> validator = SchemaValidator(vertex_schema={"type": "integer"})
            >>> validator.check_vertex_attribute(3).is_valid
            True
        """
        return self._check(value, self.vertex_schema, "vertex")

    def check_edge_attribute(self, value: Any) -> ValidationResult:
        """
        Validate an edge attribute value against the edge schema.

        Args:
            value: Attribute value to validate

        Returns:
            ValidationResult containing validation details and any errors or warnings
        """
        return self._check(value, self.edge_schema, "edge")

    def require_vertex_attribute(self, value: Any) -> None:
        """Raise ValidationError unless the value matches the vertex schema."""
        result = self.check_vertex_attribute(value)
        if not result.is_valid:
            raise ValidationError("; ".join(result.errors))

    def require_edge_attribute(self, value: Any) -> None:
        """Raise ValidationError unless the value matches the edge schema."""
        result = self.check_edge_attribute(value)
        if not result.is_valid:
            raise ValidationError("; ".join(result.errors))
