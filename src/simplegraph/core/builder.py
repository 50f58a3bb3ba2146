"""
Graph construction.

:class:`GraphBuilder` selects the orientation of a new graph and, optionally,
wraps it for shared use between threads.
"""

from typing import TYPE_CHECKING, Hashable, TypeVar

from .concurrent.synchronized import ReadWriteSynchronizedGraph
from .graph.base import MutableGraph
from .graph.simple import SimpleMutableGraph

if TYPE_CHECKING:
    from .config import GraphSettings

N = TypeVar("N", bound=Hashable)


class GraphBuilder:
    """
    Fluent builder for mutable graphs.

    Example:
        >>> graph = GraphBuilder.directed().synchronized(fair=True).build()
        >>> graph.add_edge("A", "B")
        True
    """

    def __init__(self, directed: bool):
        self._directed = directed
        self._synchronized = False
        self._fair = False

    @classmethod
    def undirected(cls) -> "GraphBuilder":
        return cls(False)

    @classmethod
    def directed(cls) -> "GraphBuilder":
        return cls(True)

    @classmethod
    def from_settings(cls, settings: "GraphSettings") -> "GraphBuilder":
        """Create a builder configured from validated settings."""
        builder = cls(settings.directed)
        if settings.synchronized:
            builder.synchronized(fair=settings.fair)
        return builder

    def synchronized(self, fair: bool = False) -> "GraphBuilder":
        """Wrap built graphs in a read/write lock."""
        self._synchronized = True
        self._fair = fair
        return self

    def build(self) -> MutableGraph[N]:
        """Create a new, empty graph."""
        graph: MutableGraph[N] = SimpleMutableGraph(self._directed)
        if self._synchronized:
            graph = ReadWriteSynchronizedGraph(graph, fair=self._fair)
        return graph
