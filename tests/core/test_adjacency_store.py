"""
Tests for the directed adjacency store.
"""

import pytest

from attrgraph.core.exceptions import (
    AttributeNotFoundError,
    EdgeNotFoundError,
    ResourceNotFoundError,
    VertexNotFoundError,
)
from attrgraph.core.graph.base import AdjacencyStore
from attrgraph.core.models import Edge


@pytest.fixture
def store() -> AdjacencyStore:
    """Fixture providing an empty store."""
    return AdjacencyStore()


def test_empty_store(store):
    """Test counts of a fresh store."""
    assert store.get_vertex_count() == 0
    assert store.get_edge_count() == 0
    assert store.get_self_loop_count() == 0
    assert list(store.get_vertices()) == []


def test_add_vertex_is_idempotent(store):
    """Test adding the same vertex twice."""
    store.add_vertex(3)
    store.add_vertex(3)

    assert store.has_vertex(3)
    assert store.get_vertex_count() == 1
    assert list(store.get_neighbors(3)) == []


def test_add_edge_creates_endpoints(store):
    """Test that both endpoints are added with the edge."""
    store.add_edge(Edge(0, 1))

    assert store.has_vertex(0)
    assert store.has_vertex(1)
    assert store.has_edge((0, 1))
    assert not store.has_edge((1, 0))
    assert store.get_vertex_count() == 2
    assert store.get_edge_count() == 1


def test_add_existing_edge_keeps_count(store):
    """Test that a duplicate edge is not stored twice."""
    store.add_edge((0, 1))
    store.add_edge((0, 1))

    assert store.get_edge_count() == 1
    assert list(store.get_neighbors(0)) == [(1, 0)]


def test_edge_attribute_defaults_from_factory():
    """Test that new edges get a default-constructed attribute."""
    store = AdjacencyStore(edge_default=list)
    store.add_edge((0, 1))

    assert store.get_edge_attribute((0, 1)) == []


def test_add_edge_with_attribute_overwrites(store):
    """Test that adding an existing edge with an attribute writes it."""
    store.add_edge((0, 1), 5)
    store.add_edge((0, 1), 7)

    assert store.get_edge_count() == 1
    assert store.get_edge_attribute((0, 1)) == 7


def test_add_edge_with_none_attribute(store):
    """Test that None is stored as an explicit attribute."""
    store.add_edge((0, 1), None)

    assert store.get_edge_attribute((0, 1)) is None


def test_remove_edge(store):
    """Test removing an existing edge."""
    store.add_edge((0, 1))

    assert store.remove_edge((0, 1)) is True
    assert not store.has_edge((0, 1))
    assert store.get_edge_count() == 0
    assert store.get_vertex_count() == 2


def test_remove_missing_edge(store):
    """Test removing an edge that does not exist."""
    store.add_edge((0, 1))

    assert store.remove_edge((1, 0)) is False
    assert store.remove_edge((5, 6)) is False
    assert store.get_edge_count() == 1


def test_neighbor_order_follows_creation(store):
    """Test that neighbors keep insertion order across removals."""
    store.add_edge((0, 3))
    store.add_edge((0, 1))
    store.add_edge((0, 2))
    store.remove_edge((0, 3))
    store.add_edge((0, 3))

    assert [vertex for vertex, _ in store.get_neighbors(0)] == [1, 2, 3]


def test_neighbors_view_is_live(store):
    """Test that the neighbor view reflects later changes."""
    store.add_edge((0, 1))
    view = store.get_neighbors(0)
    store.add_edge((0, 2))

    assert len(view) == 2
    assert (2, 0) in view


def test_neighbors_of_missing_vertex(store):
    """Test neighbor lookup for an unknown vertex."""
    with pytest.raises(VertexNotFoundError, match="Vertex 4 not found"):
        store.get_neighbors(4)


def test_destination_only_vertex_has_no_neighbors(store):
    """Test that a vertex seen only as a destination has an empty list."""
    store.add_edge((0, 1))

    assert list(store.get_neighbors(1)) == []
    assert store.get_degree(1) == 0
    assert store.get_degree(0) == 1


def test_self_loop_counts_once(store):
    """Test that a self-loop is a single stored edge."""
    store.add_edge((2, 2))

    assert store.get_edge_count() == 1
    assert store.get_self_loop_count() == 1
    assert store.get_vertex_count() == 1

    assert store.remove_edge((2, 2))
    assert store.get_self_loop_count() == 0


def test_vertex_attribute_round_trip(store):
    """Test setting and overwriting a vertex attribute."""
    store.add_vertex(0)
    store.set_vertex_attribute(0, 32)
    store.set_vertex_attribute(0, 64)

    assert store.get_vertex_attribute(0) == 64
    assert store.has_vertex_attribute(0)


def test_vertex_attribute_does_not_add_vertex(store):
    """Test that attributing an unknown vertex leaves the vertex set alone."""
    store.set_vertex_attribute(9, "x")

    assert store.get_vertex_attribute(9) == "x"
    assert not store.has_vertex(9)
    assert store.get_vertex_count() == 0


def test_missing_vertex_attribute(store):
    """Test reading an attribute that was never set."""
    store.add_vertex(1)

    with pytest.raises(AttributeNotFoundError):
        store.get_vertex_attribute(1)


def test_edge_attribute_of_missing_edge(store):
    """Test edge attribute access for an unknown edge."""
    store.add_edge((0, 1))

    with pytest.raises(EdgeNotFoundError):
        store.get_edge_attribute((1, 2))
    with pytest.raises(EdgeNotFoundError):
        store.set_edge_attribute((1, 0), 3)
    assert store.get_edge_attribute((0, 1)) == 0


def test_read_paths_do_not_mutate(store):
    """Test that failing reads leave the store untouched."""
    for read in (
        lambda: store.get_vertex_attribute(0),
        lambda: store.get_edge_attribute((0, 1)),
        lambda: store.get_neighbors(0),
    ):
        with pytest.raises(ResourceNotFoundError):
            read()

    assert store.get_vertex_count() == 0
    assert store.get_edge_count() == 0
    assert not store.has_vertex_attribute(0)


def test_invalid_vertex_index(store):
    """Test rejection of invalid vertex indices."""
    with pytest.raises(ValueError):
        store.add_vertex(-1)
    with pytest.raises(TypeError):
        store.add_vertex("a")
    with pytest.raises(TypeError):
        store.add_vertex(True)


def test_has_edge_with_invalid_input(store):
    """Test that edge predicates answer False for unusable input."""
    assert store.has_edge((-1, 0)) is False
    assert store.has_edge("ab") is False


@pytest.mark.parametrize("vertex", [True, 1.0])
def test_lookalike_index_is_not_a_vertex(store, vertex):
    """Test that values equal to an index are not treated as that index."""
    store.add_edge((1, 2))
    store.set_vertex_attribute(1, "x")

    assert store.has_vertex(vertex) is False
    assert store.has_vertex_attribute(vertex) is False
    with pytest.raises(TypeError):
        store.get_neighbors(vertex)
    with pytest.raises(TypeError):
        store.get_vertex_attribute(vertex)
    with pytest.raises(TypeError):
        store.get_degree(vertex)


def test_negative_index_on_read_paths(store):
    """Test that reads reject negative indices."""
    store.add_vertex(0)

    assert store.has_vertex(-1) is False
    assert store.has_vertex_attribute(-1) is False
    with pytest.raises(ValueError, match="non-negative"):
        store.get_neighbors(-1)
    with pytest.raises(ValueError, match="non-negative"):
        store.get_vertex_attribute(-1)
    with pytest.raises(ValueError, match="non-negative"):
        store.get_degree(-1)


def test_from_edges():
    """Test building a store from pairs and triples."""
    store = AdjacencyStore.from_edges([(0, 1), (1, 2, 9), Edge(2, 0)])

    assert store.get_edge_count() == 3
    assert store.get_edge_attribute((1, 2)) == 9
    assert store.get_edge_attribute((2, 0)) == 0


def test_clear(store):
    """Test clearing the store."""
    store.add_edge((0, 0))
    store.set_vertex_attribute(0, 1)
    store.clear()

    assert store.get_vertex_count() == 0
    assert store.get_edge_count() == 0
    assert store.get_self_loop_count() == 0
    assert not store.has_vertex_attribute(0)
