"""
Enumerations shared by the graph models.

Orientation is the tag carried by every edge and fixed for every graph at
construction time. Directed graphs only ever hold directed edges and
undirected graphs only ever hold undirected ones.
"""

from enum import Enum


class Orientation(Enum):
    """Orientation of an edge or of a whole graph."""

    DIRECTED = "directed"  # (u, v) runs from u to v
    UNDIRECTED = "undirected"  # (u, v) is the same connection as (v, u)

    @classmethod
    def of(cls, directed: bool) -> "Orientation":
        """Map a ``directed`` flag onto its orientation."""
        return cls.DIRECTED if directed else cls.UNDIRECTED
