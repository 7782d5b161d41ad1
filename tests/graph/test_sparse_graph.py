"""Unit tests for SparseGraph.

Tests cover:
- Edge insertion and duplicate detection
- Edge and vertex removal, including cascades and self-loops
- Incoming/outgoing neighbour queries and None normalization
- Vertex set, emptiness and edge counting
- Conversion to and from relations
"""

import pytest

from tsrt.graph.relation import Relation
from tsrt.graph.sparse_graph import SparseGraph

EXPECTED_EDGE_COUNT_THREE = 3


@pytest.fixture
def simple_dag() -> SparseGraph[str]:
    """Simple DAG used across tests.

         a
         |
         b
        / \\
       c   d
    """
    graph = SparseGraph()
    graph.add_edge("a", "b")
    graph.add_edge("b", "c")
    graph.add_edge("b", "d")
    return graph


def assert_mirrored(graph: SparseGraph) -> None:
    """Check that both adjacency maps describe the same edge set."""
    forward = {(s, t) for s, targets in graph._sources.items() for t in targets}
    backward = {(s, t) for t, sources in graph._destinations.items() for s in sources}
    assert forward == backward
    assert graph.edge_count == len(forward)


class TestGraphCreation:
    """Test construction and basic emptiness."""

    def test_new_graph_is_empty(self):
        """Test that a fresh graph has no vertices or edges."""
        graph = SparseGraph()

        assert graph.is_empty()
        assert graph.vertices() == set()
        assert graph.edge_count == 0
        assert len(graph) == 0

    def test_single_edge(self):
        """Test that one edge makes the graph non-empty."""
        graph = SparseGraph()

        assert graph.add_edge("a", "b")
        assert not graph.is_empty()
        assert graph.vertices() == {"a", "b"}
        assert graph.edge_count == 1

    def test_repr(self, simple_dag):
        """Test the repr reports vertex and edge counts."""
        assert repr(simple_dag) == "SparseGraph(vertices=4, edges=3)"


class TestAddEdge:
    """Test edge insertion."""

    def test_duplicate_edge_not_counted(self, simple_dag):
        """Test that re-adding an existing edge returns False."""
        assert not simple_dag.add_edge("a", "b")
        assert simple_dag.edge_count == EXPECTED_EDGE_COUNT_THREE
        assert_mirrored(simple_dag)

    def test_reverse_edge_is_distinct(self, simple_dag):
        """Test that b -> a is a new edge even though a -> b exists."""
        assert simple_dag.add_edge("b", "a")
        assert simple_dag.edge_count == EXPECTED_EDGE_COUNT_THREE + 1
        assert_mirrored(simple_dag)

    def test_incoming_and_outgoing(self, simple_dag):
        """Test neighbour queries after insertion."""
        assert simple_dag.incoming("a") is None
        assert simple_dag.incoming("b") == {"a"}
        assert simple_dag.outgoing("b") == {"c", "d"}
        assert simple_dag.outgoing("c") is None

    def test_unknown_vertex_queries(self, simple_dag):
        """Test that queries for absent vertices return None."""
        assert simple_dag.incoming("zzz") is None
        assert simple_dag.outgoing("zzz") is None
        assert "zzz" not in simple_dag

    def test_neighbour_sets_are_read_only(self, simple_dag):
        """Test that callers cannot mutate adjacency through query results."""
        outgoing = simple_dag.outgoing("b")

        assert isinstance(outgoing, frozenset)
        with pytest.raises(AttributeError):
            outgoing.add("x")  # type: ignore[attr-defined]

    def test_has_edge(self, simple_dag):
        """Test edge membership in both directions."""
        assert simple_dag.has_edge("a", "b")
        assert not simple_dag.has_edge("b", "a")

    def test_non_string_vertices(self):
        """Test that any hashable value can be a vertex."""
        graph = SparseGraph()
        graph.add_edge(1, 2)
        graph.add_edge((0, 0), 1)

        assert graph.vertices() == {1, 2, (0, 0)}
        assert graph.outgoing((0, 0)) == {1}


class TestRemoveEdge:
    """Test edge removal."""

    def test_remove_existing_edge(self, simple_dag):
        """Test removing an edge updates both maps and the count."""
        assert simple_dag.remove_edge("a", "b")

        assert simple_dag.incoming("b") is None
        assert simple_dag.outgoing("b") == {"c", "d"}
        assert simple_dag.edge_count == EXPECTED_EDGE_COUNT_THREE - 1
        assert_mirrored(simple_dag)

    def test_remove_missing_edge(self, simple_dag):
        """Test removing an absent edge is a no-op."""
        assert not simple_dag.remove_edge("c", "a")
        assert not simple_dag.remove_edge("x", "y")
        assert simple_dag.edge_count == EXPECTED_EDGE_COUNT_THREE

    def test_remove_edge_twice(self, simple_dag):
        """Test the second removal of the same edge returns False."""
        assert simple_dag.remove_edge("b", "c")
        assert not simple_dag.remove_edge("b", "c")

    def test_add_then_remove_restores_state(self, simple_dag):
        """Test add_edge followed by remove_edge restores the graph."""
        before_vertices = simple_dag.vertices()
        before_relations = simple_dag.to_relations()

        simple_dag.add_edge("d", "e")
        simple_dag.remove_edge("d", "e")

        assert simple_dag.vertices() == before_vertices
        assert simple_dag.to_relations() == before_relations
        assert simple_dag.edge_count == EXPECTED_EDGE_COUNT_THREE
        assert "e" not in simple_dag

    def test_remove_last_edge_empties_graph(self):
        """Test that removing the only edge leaves an empty graph."""
        graph = SparseGraph()
        graph.add_edge("x", "y")
        graph.remove_edge("x", "y")

        assert graph.is_empty()
        assert graph.vertices() == set()


class TestRemoveVertex:
    """Test cascading vertex removal."""

    def test_remove_middle_vertex(self, simple_dag):
        """Test removing b drops every edge touching b."""
        simple_dag.add_edge("d", "e")

        assert simple_dag.remove_vertex("b")

        assert simple_dag.incoming("b") is None
        assert simple_dag.outgoing("b") is None
        assert not simple_dag.remove_edge("a", "b")
        assert simple_dag.outgoing("d") == {"e"}
        assert simple_dag.edge_count == 1
        assert all("b" not in edge for edge in simple_dag.edges())
        assert_mirrored(simple_dag)

    def test_remove_vertex_leaves_isolated_neighbours_out(self, simple_dag):
        """Test that neighbours left without edges vanish from the vertex set."""
        simple_dag.remove_vertex("b")

        assert simple_dag.is_empty()
        assert simple_dag.vertices() == set()

    def test_remove_absent_vertex(self, simple_dag):
        """Test removing an unknown vertex returns False."""
        assert not simple_dag.remove_vertex("zzz")
        assert simple_dag.edge_count == EXPECTED_EDGE_COUNT_THREE

    def test_remove_sink_vertex(self, simple_dag):
        """Test removing a vertex that only has incoming edges."""
        assert simple_dag.remove_vertex("c")

        assert simple_dag.outgoing("b") == {"d"}
        assert simple_dag.edge_count == EXPECTED_EDGE_COUNT_THREE - 1
        assert_mirrored(simple_dag)

    def test_remove_vertex_with_self_loop(self):
        """Test that a self-loop is counted once when its vertex is removed."""
        graph = SparseGraph()
        graph.add_edge("a", "a")
        graph.add_edge("a", "b")
        graph.add_edge("c", "a")

        assert graph.remove_vertex("a")

        assert graph.edge_count == 0
        assert graph.is_empty()

    def test_remove_vertex_on_cycle(self):
        """Test removing one vertex of a two-cycle."""
        graph = SparseGraph()
        graph.add_edge("a", "b")
        graph.add_edge("b", "a")
        graph.add_edge("b", "c")

        graph.remove_vertex("a")

        assert graph.to_relations() == {Relation("b", "c")}
        assert graph.edge_count == 1
        assert_mirrored(graph)


class TestVertices:
    """Test vertex set computation."""

    def test_vertices(self, simple_dag):
        """Test the vertex set is the union of every endpoint."""
        assert simple_dag.vertices() == {"a", "b", "c", "d"}
        assert len(simple_dag) == 4

    def test_contains(self, simple_dag):
        """Test membership for sources and sinks alike."""
        assert "a" in simple_dag
        assert "d" in simple_dag


class TestRelationConversion:
    """Test conversion between relations and graphs."""

    def test_round_trip(self):
        """Test relations -> graph -> relations is the identity."""
        relations = {
            Relation("a", "b"),
            Relation("b", "c"),
            Relation("b", "d"),
            Relation("d", "a"),
        }

        graph = SparseGraph.from_relations(relations)

        assert graph.to_relations() == relations
        assert graph.edge_count == len(relations)

    def test_duplicates_collapse(self):
        """Test duplicate relations produce a single edge."""
        graph = SparseGraph.from_relations([Relation("x", "y"), Relation("x", "y")])

        assert graph.edge_count == 1
        assert graph.to_relations() == {Relation("x", "y")}

    def test_empty_relations(self):
        """Test an empty relation set yields an empty graph."""
        assert SparseGraph.from_relations([]).is_empty()

    def test_copy_is_independent(self, simple_dag):
        """Test mutating a copy leaves the original untouched."""
        clone = simple_dag.copy()
        clone.remove_vertex("b")

        assert simple_dag.edge_count == EXPECTED_EDGE_COUNT_THREE
        assert simple_dag.outgoing("b") == {"c", "d"}
        assert clone.is_empty()

    def test_relation_value_semantics(self):
        """Test relations compare and hash by value."""
        assert Relation("a", "b") == Relation("a", "b")
        assert Relation("a", "b") != Relation("b", "a")
        assert len({Relation("a", "b"), Relation("a", "b")}) == 1
        assert tuple(Relation("a", "b")) == ("a", "b")
        assert str(Relation("a", "b")) == "a,b"
