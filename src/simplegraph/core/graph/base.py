"""
Abstract graph interfaces.

:class:`Graph` is the read and traversal surface; :class:`MutableGraph` adds
vertex and edge insertion. Concrete engines and wrappers such as the
read/write synchronized graph implement the same interface, so they compose
freely.

A graph is either directed or undirected for its whole lifetime, and
implementations must honour that choice consistently. Weighted edges are not
part of the interface.
"""

from abc import ABC, abstractmethod
from typing import AbstractSet, Generic, Hashable, Iterable, List, Optional, TypeVar

from ..models import Edge, validate_node, validate_targets

N = TypeVar("N", bound=Hashable)


class Graph(ABC, Generic[N]):
    """Read-only graph interface over vertices of type ``N``."""

    @abstractmethod
    def get_path(self, source: N, target: N) -> List[Edge[N]]:
        """
        Get the edges of a shortest path from ``source`` to ``target``.

        Args:
            source (N): Start of the path
            target (N): End of the path

        Returns:
            List[Edge[N]]: Edges in travel order, empty if no path exists
        """

    @abstractmethod
    def get_nodes(self) -> AbstractSet[N]:
        """Get all vertices of the graph."""

    @abstractmethod
    def get_edges(self) -> AbstractSet[Edge[N]]:
        """Get all edges of the graph."""

    @abstractmethod
    def is_directed(self) -> bool:
        """True if the graph is directed."""


class MutableGraph(Graph[N]):
    """Graph interface allowing vertices and edges to be added."""

    @abstractmethod
    def add_vertex(self, node: N) -> bool:
        """
        Add a vertex to the graph.

        Args:
            node (N): The vertex to add

        Returns:
            bool: False if the vertex already existed

        Raises:
            InvalidArgumentError: If ``node`` is None
        """

    @abstractmethod
    def add_edge(self, node_u: N, node_v: N) -> bool:
        """
        Add an edge between ``node_u`` and ``node_v``.

        Missing endpoints are created as if by :meth:`add_vertex`.

        Returns:
            bool: False if the edge already existed

        Raises:
            InvalidArgumentError: If either node is None
        """

    def connect(self, node: N, targets: Optional[Iterable[N]]) -> List[bool]:
        """
        Add one edge from ``node`` to each of ``targets``.

        Every argument is validated before the first edge is added.

        Args:
            node (N): Shared endpoint, the source for directed graphs
            targets (Iterable[N]): Other endpoints, at least one

        Returns:
            List[bool]: One :meth:`add_edge` result per target, in input order

        Raises:
            InvalidArgumentError: If ``node`` is None, or ``targets`` is None,
                empty or contains None
        """
        validate_node("node", node)
        checked = validate_targets("targets", targets)
        return [self.add_edge(node, target) for target in checked]
