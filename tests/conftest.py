"""Shared test fixtures."""

from typing import Callable, Generic, List, Type, TypeVar

import pytest

from simplegraph.core.graph import SimpleMutableGraph

A = TypeVar("A")


class AnyOf(Generic[A]):
    """Checks whether a predicate holds for at least one of a few values."""

    def __init__(self, values: List[A]):
        self._values = values

    @classmethod
    def of(cls, *values: A) -> "AnyOf[A]":
        return cls(list(values))

    def any_true(self, predicate: Callable[[A], bool]) -> bool:
        return any(predicate(value) for value in self._values)


@pytest.fixture
def any_of() -> Type[AnyOf]:
    """Fixture providing the AnyOf predicate helper."""
    return AnyOf


@pytest.fixture
def directed_graph() -> SimpleMutableGraph[str]:
    """Fixture providing an empty directed graph."""
    return SimpleMutableGraph(directed=True)


@pytest.fixture
def undirected_graph() -> SimpleMutableGraph[str]:
    """Fixture providing an empty undirected graph."""
    return SimpleMutableGraph(directed=False)


@pytest.fixture
def diamond_graph() -> SimpleMutableGraph[str]:
    """Fixture providing an undirected diamond A-B-C and A-D-C."""
    graph: SimpleMutableGraph[str] = SimpleMutableGraph(directed=False)
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    graph.add_edge("A", "D")
    graph.add_edge("D", "C")
    return graph
