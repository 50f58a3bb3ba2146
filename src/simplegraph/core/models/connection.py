"""
Per-node adjacency records.

A :class:`GraphConnection` stores what a single vertex can reach directly: a
mapping from each neighbour to the edge realizing that adjacency. The graph
engine owns one connection per vertex and is the only writer. Connections
only grow; there is no removal.
"""

from types import MappingProxyType
from typing import Dict, Generic, Hashable, KeysView, Optional, TypeVar

from .edge import Edge

N = TypeVar("N", bound=Hashable)


class GraphConnection(Generic[N]):
    """
    Adjacency record of one vertex.

    Neighbours are kept in insertion order, so enumerating
    :meth:`adjacent_nodes` is deterministic for a given sequence of edge
    additions.

    Attributes:
        node (N): The vertex owning this record
    """

    def __init__(self, node: N):
        self.node = node
        self._adjacent: Dict[N, Edge[N]] = {}
        self._adjacent_view = MappingProxyType(self._adjacent)

    def adjacent_nodes(self) -> KeysView[N]:
        """
        Nodes reachable from :attr:`node` over a single edge.

        Returns:
            KeysView[N]: Live, read-only view of the neighbour keys
        """
        return self._adjacent_view.keys()

    def edge_to(self, node: N) -> Optional[Edge[N]]:
        """Get the edge reaching ``node``, or None if it is not adjacent."""
        return self._adjacent.get(node)

    def record_connection(self, edge: Edge[N]) -> bool:
        """
        Register a new adjacency realized by ``edge``.

        A directed edge is recorded under its target and only by the record
        owning its source. An undirected edge is recorded under each endpoint
        other than the owning node, so an undirected self-loop adds nothing.

        Args:
            edge (Edge[N]): An edge touching :attr:`node`

        Returns:
            bool: False if the edge cannot be reached from :attr:`node`
        """
        if edge.is_ordered:
            if edge.source != self.node:
                return False
            self._adjacent[edge.target] = edge
            return True

        if not edge.touches(self.node):
            return False
        if edge.node_u != self.node:
            self._adjacent[edge.node_u] = edge
        if edge.node_v != self.node:
            self._adjacent[edge.node_v] = edge
        return True

    def is_disjoint(self) -> bool:
        """True if nothing has been recorded yet."""
        return not self._adjacent

    def __len__(self) -> int:
        return len(self._adjacent)

    def __str__(self) -> str:
        neighbours = ", ".join(str(node) for node in self._adjacent)
        return f"Connection({self.node}: [{neighbours}])"
