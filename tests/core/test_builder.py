"""
Tests for graph construction.
"""

import pytest

from simplegraph.core.builder import GraphBuilder
from simplegraph.core.concurrent import ReadWriteSynchronizedGraph
from simplegraph.core.config import GraphSettings
from simplegraph.core.graph import SimpleMutableGraph


def test_directed_builder():
    """Test building a directed graph."""
    graph = GraphBuilder.directed().build()

    assert isinstance(graph, SimpleMutableGraph)
    assert graph.is_directed()


def test_undirected_builder():
    """Test building an undirected graph."""
    graph = GraphBuilder.undirected().build()

    assert isinstance(graph, SimpleMutableGraph)
    assert not graph.is_directed()


def test_builder_with_explicit_flag():
    """Test the plain constructor."""
    assert GraphBuilder(True).build().is_directed()
    assert not GraphBuilder(False).build().is_directed()


def test_each_build_returns_a_new_graph():
    """Test that builders do not share graphs between builds."""
    builder = GraphBuilder.directed()
    first = builder.build()
    second = builder.build()

    first.add_edge("A", "B")

    assert len(second.get_edges()) == 0


@pytest.mark.parametrize("fair", [False, True])
def test_synchronized_builder(fair):
    """Test wrapping built graphs in a read/write lock."""
    graph = GraphBuilder.undirected().synchronized(fair=fair).build()

    assert isinstance(graph, ReadWriteSynchronizedGraph)
    assert graph.lock.fair is fair
    assert not graph.is_directed()
    assert graph.add_edge("A", "B")


def test_builder_from_settings():
    """Test building from validated settings."""
    settings = GraphSettings(directed=True, synchronized=True, fair=True)

    graph = GraphBuilder.from_settings(settings).build()

    assert isinstance(graph, ReadWriteSynchronizedGraph)
    assert graph.is_directed()
    assert graph.lock.fair


def test_builder_from_default_settings():
    """Test that default settings build a plain undirected graph."""
    graph = GraphBuilder.from_settings(GraphSettings()).build()

    assert isinstance(graph, SimpleMutableGraph)
    assert not graph.is_directed()
