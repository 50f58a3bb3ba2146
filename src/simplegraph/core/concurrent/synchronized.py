"""
A synchronized delegate graph implementation.

Delegates all graph functionality to a wrapped graph, providing
synchronization via a read/write lock. Reading and traversal operations run in
parallel as long as no thread is mutating the graph. Mutations run only when no
other thread is reading or writing.

The wrapper is only as safe as its ownership: any code keeping a direct
reference to the wrapped graph and mutating it bypasses the lock. Hand the raw
graph to the wrapper and drop every other reference to it.
"""

from typing import AbstractSet, FrozenSet, Hashable, Iterable, List, Optional, TypeVar

from ..graph.base import MutableGraph
from ..models import Edge
from .rwlock import ReadWriteLock

N = TypeVar("N", bound=Hashable)


class ReadWriteSynchronizedGraph(MutableGraph[N]):
    """
    Thread-safe wrapper around a mutable graph.

    Every call is forwarded unchanged to the delegate and returns its result,
    or propagates its exception, after the lock is released. Reads hand out
    snapshots taken while the lock was held, so callers never observe later
    mutations through them.

    Attributes:
        _delegate (MutableGraph[N]): The wrapped graph
        _lock (ReadWriteLock): Guards every access to the delegate
    """

    def __init__(self, delegate: MutableGraph[N], fair: bool = False):
        """
        Initialize the wrapper.

        Args:
            delegate (MutableGraph[N]): Graph to protect; the caller gives up
                direct access to it
            fair (bool): Admit waiting threads in arrival order
        """
        self._delegate = delegate
        self._lock = ReadWriteLock(fair=fair)

    @property
    def lock(self) -> ReadWriteLock:
        return self._lock

    def add_vertex(self, node: N) -> bool:
        with self._lock.write_locked():
            return self._delegate.add_vertex(node)

    def add_edge(self, node_u: N, node_v: N) -> bool:
        with self._lock.write_locked():
            return self._delegate.add_edge(node_u, node_v)

    def connect(self, node: N, targets: Optional[Iterable[N]]) -> List[bool]:
        # The whole batch is applied under a single exclusive hold
        with self._lock.write_locked():
            return self._delegate.connect(node, targets)

    def get_path(self, source: N, target: N) -> List[Edge[N]]:
        with self._lock.read_locked():
            return list(self._delegate.get_path(source, target))

    def get_nodes(self) -> FrozenSet[N]:
        with self._lock.read_locked():
            return frozenset(self._delegate.get_nodes())

    def get_edges(self) -> AbstractSet[Edge[N]]:
        with self._lock.read_locked():
            return frozenset(self._delegate.get_edges())

    def is_directed(self) -> bool:
        # Orientation never changes, no lock needed
        return self._delegate.is_directed()

    def __str__(self) -> str:
        with self._lock.read_locked():
            return str(self._delegate)
