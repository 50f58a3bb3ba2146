"""
simplegraph - In-memory graphs with shortest-path queries

This package provides generic directed and undirected graphs over any hashable
node type. It includes:

- Edge values whose equality follows the graph orientation
- A mutable adjacency-map graph with breadth-first shortest paths
- A read/write synchronized wrapper for sharing a graph between threads
- A builder and validated settings to assemble the above

The plain graph is not thread-safe; see ``GraphBuilder.synchronized``.
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("simplegraph requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.builder import GraphBuilder
from .core.concurrent import ReadWriteSynchronizedGraph
from .core.graph import Graph, MutableGraph, SimpleMutableGraph
from .core.models import Edge

__all__ = [
    "Edge",
    "Graph",
    "GraphBuilder",
    "MutableGraph",
    "ReadWriteSynchronizedGraph",
    "SimpleMutableGraph",
]
