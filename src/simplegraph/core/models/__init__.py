"""
Core domain models of the graph library.

This package provides the edge value type, the per-node adjacency record and
the validation helpers they share.
"""

from .base import validate_node, validate_targets
from .connection import GraphConnection
from .edge import Edge

__all__ = [
    # Base utilities
    "validate_node",
    "validate_targets",
    # Models
    "Edge",
    "GraphConnection",
]
