"""Graph interfaces and the adjacency-map engine."""

from .base import Graph, MutableGraph
from .simple import SimpleMutableGraph

__all__ = [
    "Graph",
    "MutableGraph",
    "SimpleMutableGraph",
]
