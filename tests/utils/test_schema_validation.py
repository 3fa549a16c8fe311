"""
Tests for attribute schema validation.
"""

import pytest

import attrgraph.core.graph.config as graph_config
import attrgraph.utils.validation.schema as schema_module
from attrgraph.core.exceptions import ConfigurationError, ValidationError
from attrgraph.core.graph import Graph
from attrgraph.utils.validation import SchemaValidator

WEIGHT_SCHEMA = {"type": "number", "minimum": 0}
LABEL_SCHEMA = {
    "type": "object",
    "properties": {"name": {"type": "string"}},
    "required": ["name"],
}


def test_check_without_schema_warns():
    """Test that values pass with a warning when no schema is registered."""
    result = SchemaValidator().check_edge_attribute(object())

    assert result.is_valid
    assert result.warnings == ["No schema registered for edge attributes"]
    assert result.context == {"attribute_kind": "edge"}


def test_check_valid_value():
    """Test a value that matches its schema."""
    validator = SchemaValidator(vertex_schema=LABEL_SCHEMA)
    result = validator.check_vertex_attribute({"name": "hub"})

    assert result.is_valid
    assert result.errors == []
    assert validator.is_active


def test_check_invalid_value():
    """Test a value that does not match its schema."""
    result = SchemaValidator(edge_schema=WEIGHT_SCHEMA).check_edge_attribute(-1)

    assert not result.is_valid
    assert result.errors[0].startswith("Schema validation failed")


def test_require_raises():
    """Test that require_* raises on invalid values."""
    validator = SchemaValidator(vertex_schema=LABEL_SCHEMA)

    with pytest.raises(ValidationError, match="Schema validation failed"):
        validator.require_vertex_attribute({"label": "hub"})


def test_malformed_schema():
    """Test that malformed schemas are rejected up front."""
    with pytest.raises(ConfigurationError):
        SchemaValidator(vertex_schema={"type": 5})


def test_graph_checks_each_schema_once(monkeypatch):
    """Test that building a graph checks every schema a single time."""
    calls = []
    original = schema_module.check_schema

    def counting_check(schema, name):
        calls.append(name)
        original(schema, name)

    monkeypatch.setattr(graph_config, "check_schema", counting_check)
    monkeypatch.setattr(schema_module, "check_schema", counting_check)

    Graph(vertex_schema=LABEL_SCHEMA, edge_schema=WEIGHT_SCHEMA)

    assert sorted(calls) == ["edge schema", "vertex schema"]


def test_graph_rejects_malformed_schema():
    """Test that a graph still refuses a malformed schema."""
    with pytest.raises(ConfigurationError, match="Invalid edge schema"):
        Graph(edge_schema={"type": "not-a-type"})


def test_graph_rejects_invalid_edge_attribute():
    """Test that invalid edge attributes are never written."""
    graph = Graph(edge_schema=WEIGHT_SCHEMA)
    graph.add_edge((0, 1), 2.5)

    with pytest.raises(ValidationError):
        graph.set_edge_attribute((0, 1), -3)
    with pytest.raises(ValidationError):
        graph.add_edge((1, 2), "heavy")

    assert graph.get_edge_attribute((0, 1)) == pytest.approx(2.5)
    assert not graph.has_edge((1, 2))
    assert not graph.has_vertex(2)


def test_default_edge_attribute_is_not_validated():
    """Test that default-constructed attributes bypass the schema."""
    graph = Graph(edge_schema={"type": "string"})
    graph.add_edge((0, 1))

    assert graph.get_edge_attribute((0, 1)) == 0


def test_graph_rejects_invalid_vertex_attribute():
    """Test vertex attribute validation on an undirected graph."""
    graph = Graph("undirected", vertex_schema=LABEL_SCHEMA)
    graph.add_edge((0, 1))
    graph.set_vertex_attribute(0, {"name": "a"})

    with pytest.raises(ValidationError):
        graph.set_vertex_attribute(0, {"name": 1})
    assert graph.get_vertex_attribute(0) == {"name": "a"}
