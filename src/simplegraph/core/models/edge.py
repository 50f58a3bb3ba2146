"""
Edge model for the graph library.

An edge is a connection between two node values. Both variants share one
representation, a pair of nodes plus an orientation tag, and differ only in
their identity rules:

* An ordered (directed) edge ``(u, v)`` runs from its source ``u`` to its
  target ``v``. Two ordered edges are equal iff their sources and their
  targets are equal.
* An unordered (undirected) edge ``(u, v)`` is the same connection as
  ``(v, u)``. Its hash combines both orderings so that the two spellings
  land in the same bucket.

An ordered edge never equals an unordered one, whatever its endpoints.
"""

from dataclasses import dataclass
from typing import Any, Generic, Hashable, TypeVar

from ..enums import Orientation
from ..exceptions import InvalidOperationError
from .base import validate_node

N = TypeVar("N", bound=Hashable)


@dataclass(frozen=True, eq=False)
class Edge(Generic[N]):
    """
    Immutable connection between two node values.

    Use :meth:`ordered` and :meth:`unordered` rather than the constructor so
    that the orientation is always spelled out at the call site.

    Attributes:
        node_u (N): First node, in construction order
        node_v (N): Second node, in construction order
        orientation (Orientation): Whether the edge is directed
    """

    node_u: N
    node_v: N
    orientation: Orientation

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_node("node_u", self.node_u)
        validate_node("node_v", self.node_v)
        if not isinstance(self.orientation, Orientation):
            raise TypeError("orientation must be an Orientation enum")

    @classmethod
    def ordered(cls, source: N, target: N) -> "Edge[N]":
        """Create a directed edge running from ``source`` to ``target``."""
        return cls(source, target, Orientation.DIRECTED)

    @classmethod
    def unordered(cls, node_u: N, node_v: N) -> "Edge[N]":
        """Create an undirected edge between ``node_u`` and ``node_v``."""
        return cls(node_u, node_v, Orientation.UNDIRECTED)

    @property
    def is_ordered(self) -> bool:
        """True for directed edges."""
        return self.orientation is Orientation.DIRECTED

    @property
    def source(self) -> N:
        """
        Source node of a directed edge.

        Raises:
            InvalidOperationError: If the edge is undirected
        """
        if not self.is_ordered:
            raise InvalidOperationError(f"{self} has no source: it is undirected")
        return self.node_u

    @property
    def target(self) -> N:
        """
        Target node of a directed edge.

        Raises:
            InvalidOperationError: If the edge is undirected
        """
        if not self.is_ordered:
            raise InvalidOperationError(f"{self} has no target: it is undirected")
        return self.node_v

    def touches(self, node: N) -> bool:
        """Check whether ``node`` is one of the endpoints."""
        return node == self.node_u or node == self.node_v

    def __eq__(self, other: Any) -> bool:
        if other is self:
            return True
        if not isinstance(other, Edge):
            return NotImplemented
        if self.orientation is not other.orientation:
            return False

        if self.node_u == other.node_u and self.node_v == other.node_v:
            return True
        # (u, v) and (v, u) only coincide when direction does not matter
        return (
            not self.is_ordered
            and self.node_u == other.node_v
            and self.node_v == other.node_u
        )

    def __hash__(self) -> int:
        if self.is_ordered:
            return hash((self.node_u, self.node_v))
        return hash((self.node_u, self.node_v)) + hash((self.node_v, self.node_u))

    def __str__(self) -> str:
        link = "->" if self.is_ordered else "--"
        return f"Edge({self.node_u}{link}{self.node_v})"

    __repr__ = __str__
