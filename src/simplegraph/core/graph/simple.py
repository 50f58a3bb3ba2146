"""
Simple mutable graph engine.

The structure of a graph is stored in a map from each vertex to its
:class:`GraphConnection`, alongside a flat, insertion-ordered set of every
edge. Queries hand out read-only views of both.

Paths are computed with a breadth-first search followed by back-tracing
through the predecessor map, so every returned path has the minimum number of
edges. Edges carry no weights.

This implementation is NOT thread-safe. Wrap it in a
:class:`~simplegraph.core.concurrent.synchronized.ReadWriteSynchronizedGraph`
to share it between threads.
"""

import logging
from collections import deque
from typing import AbstractSet, Deque, Dict, Hashable, KeysView, List, TypeVar

from ..enums import Orientation
from ..exceptions import GraphOperationError
from ..models import Edge, GraphConnection, validate_node
from .base import MutableGraph

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


class SimpleMutableGraph(MutableGraph[N]):
    """
    Adjacency-map graph with breadth-first shortest paths.

    Attributes:
        _orientation (Orientation): Fixed orientation of every edge
        _nodes (Dict[N, GraphConnection[N]]): Vertices and their adjacency
        _edges (Dict[Edge[N], None]): Every edge, in insertion order
    """

    def __init__(self, directed: bool):
        """
        Initialize an empty graph.

        Args:
            directed (bool): Whether edges are directed
        """
        self._orientation = Orientation.of(directed)
        self._nodes: Dict[N, GraphConnection[N]] = {}
        self._edges: Dict[Edge[N], None] = {}

    def add_vertex(self, node: N) -> bool:
        validate_node("node", node)

        if node in self._nodes:
            return False

        self._nodes[node] = GraphConnection(node)
        logger.debug("Added vertex %s", node)
        return True

    def add_edge(self, node_u: N, node_v: N) -> bool:
        validate_node("node_u", node_u)
        validate_node("node_v", node_v)

        # A missing endpoint is created; that never blocks the edge itself
        self.add_vertex(node_u)
        self.add_vertex(node_v)

        edge = self._edge_from(node_u, node_v)
        if edge in self._edges:
            logger.debug("Rejected duplicate %s", edge)
            return False

        self._edges[edge] = None
        if self.is_directed():
            recorded = self._nodes[edge.source].record_connection(edge)
        else:
            # Both sides must be attempted, even for a self-loop
            recorded_u = self._nodes[node_u].record_connection(edge)
            recorded_v = self._nodes[node_v].record_connection(edge)
            recorded = recorded_u and recorded_v

        logger.debug("Added %s", edge)
        return recorded

    def get_path(self, source: N, target: N) -> List[Edge[N]]:
        # Graph must contain both nodes first
        if source not in self._nodes or target not in self._nodes:
            return []

        # A direct edge is already a shortest path
        straight = self._edge_from(source, target)
        if straight in self._edges:
            return [straight]

        path = self._find_path(source, target)
        logger.debug("Path %s -> %s: %s", source, target, path)
        return path

    def get_nodes(self) -> KeysView[N]:
        """Get a live, read-only view of the vertices."""
        return self._nodes.keys()

    def get_edges(self) -> AbstractSet[Edge[N]]:
        """Get a live, read-only view of the edges, in insertion order."""
        return self._edges.keys()

    def is_directed(self) -> bool:
        return self._orientation is Orientation.DIRECTED

    def __str__(self) -> str:
        edges = ", ".join(str(edge) for edge in self._edges)
        return f"Graph({self._orientation.value}; [{edges}])"

    def _edge_from(self, node_u: N, node_v: N) -> Edge[N]:
        return Edge(node_u, node_v, self._orientation)

    def _find_path(self, source: N, target: N) -> List[Edge[N]]:
        """Classic breadth-first search from ``source``."""
        if self._nodes[source].is_disjoint():
            # Node is disconnected
            return []

        predecessors: Dict[N, N] = {}
        queued: Deque[N] = deque([source])

        while queued:
            current = queued.popleft()
            # Finish the search once the target is dequeued
            if current == target:
                break

            for neighbour in self._nodes[current].adjacent_nodes():
                if neighbour != source and neighbour not in predecessors:
                    predecessors[neighbour] = current
                    queued.append(neighbour)

        return self._backtrace(source, target, predecessors)

    def _backtrace(self, source: N, target: N, predecessors: Dict[N, N]) -> List[Edge[N]]:
        """Walk predecessor links back from ``target`` to ``source``."""
        if not predecessors or target not in predecessors:
            return []

        path: Deque[Edge[N]] = deque()
        node = target
        while node != source:
            previous = predecessors[node]
            edge = self._nodes[previous].edge_to(node)
            if edge is None:
                raise GraphOperationError(f"No recorded edge from '{previous}' to '{node}'")
            path.appendleft(edge)
            node = previous

        return list(path)
