"""
Tests for core graph mutation and views.
"""

import pytest

from simplegraph.core.exceptions import InvalidArgumentError
from simplegraph.core.graph import SimpleMutableGraph
from simplegraph.core.models import Edge


def test_empty_graph(directed_graph):
    """Test a freshly created graph."""
    assert directed_graph.is_directed()
    assert len(directed_graph.get_nodes()) == 0
    assert len(directed_graph.get_edges()) == 0


def test_orientation_is_fixed_at_construction():
    """Test the orientation accessor."""
    assert SimpleMutableGraph(directed=True).is_directed()
    assert not SimpleMutableGraph(directed=False).is_directed()


def test_add_vertex(directed_graph):
    """Test adding vertices and rejecting duplicates."""
    assert directed_graph.add_vertex("A")
    assert not directed_graph.add_vertex("A")

    assert set(directed_graph.get_nodes()) == {"A"}
    assert len(directed_graph.get_edges()) == 0


def test_add_vertex_rejects_none(directed_graph):
    """Test that a missing node is a programmer error."""
    with pytest.raises(InvalidArgumentError):
        directed_graph.add_vertex(None)
    assert len(directed_graph.get_nodes()) == 0


def test_add_edge_creates_missing_vertices(directed_graph):
    """Test that adding an edge between unknown nodes succeeds."""
    assert directed_graph.add_edge("A", "B")

    assert set(directed_graph.get_nodes()) == {"A", "B"}
    assert set(directed_graph.get_edges()) == {Edge.ordered("A", "B")}


def test_add_edge_with_existing_vertices(directed_graph):
    """Test adding an edge between known nodes."""
    directed_graph.add_vertex("A")
    directed_graph.add_vertex("B")

    assert directed_graph.add_edge("A", "B")
    assert len(directed_graph.get_edges()) == 1


@pytest.mark.parametrize("node_u, node_v", [(None, "B"), ("A", None), (None, None)])
def test_add_edge_rejects_none_before_mutation(directed_graph, node_u, node_v):
    """Test that argument checks run before any vertex is created."""
    with pytest.raises(InvalidArgumentError):
        directed_graph.add_edge(node_u, node_v)

    assert len(directed_graph.get_nodes()) == 0
    assert len(directed_graph.get_edges()) == 0


def test_duplicate_directed_edge_rejected(directed_graph):
    """Test that the same directed edge is only added once."""
    assert directed_graph.add_edge("A", "B")
    assert not directed_graph.add_edge("A", "B")
    assert len(directed_graph.get_edges()) == 1

    # The reverse direction is a different edge
    assert directed_graph.add_edge("B", "A")
    assert len(directed_graph.get_edges()) == 2


def test_duplicate_undirected_edge_rejected(undirected_graph):
    """Test that (v, u) duplicates (u, v) in an undirected graph."""
    assert undirected_graph.add_edge("A", "B")
    assert not undirected_graph.add_edge("B", "A")
    assert not undirected_graph.add_edge("A", "B")

    assert len(undirected_graph.get_edges()) == 1


def test_directed_edge_recorded_only_at_source(directed_graph):
    """Test directed adjacency bookkeeping."""
    directed_graph.add_edge("A", "B")
    directed_graph.add_edge("B", "C")

    assert directed_graph.get_path("A", "C") == [Edge.ordered("A", "B"), Edge.ordered("B", "C")]
    assert directed_graph.get_path("B", "A") == []
    assert directed_graph.get_path("C", "A") == []


def test_undirected_edge_recorded_at_both_ends(undirected_graph):
    """Test undirected adjacency bookkeeping."""
    undirected_graph.add_edge("A", "B")
    undirected_graph.add_edge("B", "C")

    forward = undirected_graph.get_path("A", "C")
    backward = undirected_graph.get_path("C", "A")

    assert forward == [Edge.unordered("A", "B"), Edge.unordered("B", "C")]
    assert backward == [Edge.unordered("C", "B"), Edge.unordered("B", "A")]
    # Both ends share the stored edge
    assert forward[0] is backward[1]


def test_undirected_self_loop(undirected_graph):
    """Test that an undirected self-loop is stored but not listed as adjacency."""
    assert undirected_graph.add_edge("A", "A")
    assert not undirected_graph.add_edge("A", "A")
    undirected_graph.add_vertex("B")

    assert set(undirected_graph.get_edges()) == {Edge.unordered("A", "A")}
    assert undirected_graph.get_path("A", "A") == [Edge.unordered("A", "A")]
    assert undirected_graph.get_path("A", "B") == []


def test_path_edges_belong_to_graph(undirected_graph):
    """Test that every edge of a path is one of the graph's edges."""
    for node_u, node_v in [("A", "B"), ("B", "C"), ("C", "D"), ("A", "E"), ("E", "D")]:
        undirected_graph.add_edge(node_u, node_v)

    edges = undirected_graph.get_edges()
    for source in undirected_graph.get_nodes():
        for target in undirected_graph.get_nodes():
            assert all(edge in edges for edge in undirected_graph.get_path(source, target))


def test_every_edge_has_both_endpoints(undirected_graph):
    """Test that edges never reference unknown vertices."""
    for node_u, node_v in [("A", "B"), ("C", "D"), ("B", "C"), ("E", "E")]:
        undirected_graph.add_edge(node_u, node_v)

    nodes = undirected_graph.get_nodes()
    for edge in undirected_graph.get_edges():
        assert edge.node_u in nodes
        assert edge.node_v in nodes


def test_edges_match_graph_orientation(directed_graph, undirected_graph):
    """Test that each graph builds edges of its own orientation."""
    directed_graph.add_edge("A", "B")
    undirected_graph.add_edge("A", "B")

    assert all(edge.is_ordered for edge in directed_graph.get_edges())
    assert not any(edge.is_ordered for edge in undirected_graph.get_edges())


def test_views_are_live_and_read_only(directed_graph):
    """Test that node and edge views follow later mutations."""
    nodes = directed_graph.get_nodes()
    edges = directed_graph.get_edges()

    directed_graph.add_edge("A", "B")

    assert "A" in nodes and "B" in nodes
    assert Edge.ordered("A", "B") in edges
    assert not hasattr(nodes, "add")
    assert not hasattr(edges, "add")


def test_connect(directed_graph):
    """Test bulk connection returns one result per target in order."""
    directed_graph.add_edge("A", "C")

    results = directed_graph.connect("A", ["B", "C", "D"])

    assert results == [True, False, True]
    assert set(directed_graph.get_edges()) == {
        Edge.ordered("A", "C"),
        Edge.ordered("A", "B"),
        Edge.ordered("A", "D"),
    }


@pytest.mark.parametrize("targets", [None, [], iter([])])
def test_connect_rejects_empty_targets(directed_graph, targets):
    """Test that bulk connection requires targets and mutates nothing otherwise."""
    with pytest.raises(InvalidArgumentError):
        directed_graph.connect("A", targets)

    assert len(directed_graph.get_nodes()) == 0


def test_connect_rejects_none_target_before_mutation(directed_graph):
    """Test that a None among the targets aborts the whole batch."""
    with pytest.raises(InvalidArgumentError, match=r"targets\[1\]"):
        directed_graph.connect("A", ["B", None])

    assert len(directed_graph.get_edges()) == 0


def test_connect_rejects_none_node(directed_graph):
    """Test that the shared endpoint is required."""
    with pytest.raises(InvalidArgumentError):
        directed_graph.connect(None, ["B"])


def test_graph_rendering(directed_graph, undirected_graph):
    """Test the diagnostic string form."""
    directed_graph.add_edge("A", "B")
    directed_graph.add_edge("B", "C")
    undirected_graph.add_edge("A", "B")

    assert str(directed_graph) == "Graph(directed; [Edge(A->B), Edge(B->C)])"
    assert str(undirected_graph) == "Graph(undirected; [Edge(A--B)])"
    assert str(SimpleMutableGraph(directed=False)) == "Graph(undirected; [])"
