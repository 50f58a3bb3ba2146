"""Core graph functionality."""

from .enums import Orientation
from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    InvalidArgumentError,
    InvalidOperationError,
    ValidationError,
)
from .models import Edge, GraphConnection
from .graph import Graph, MutableGraph, SimpleMutableGraph
from .concurrent import ReadWriteLock, ReadWriteSynchronizedGraph
from .config import GraphSettings
from .builder import GraphBuilder

__all__ = [
    "ConfigurationError",
    "Edge",
    "Graph",
    "GraphBuilder",
    "GraphConnection",
    "GraphOperationError",
    "GraphSettings",
    "InvalidArgumentError",
    "InvalidOperationError",
    "MutableGraph",
    "Orientation",
    "ReadWriteLock",
    "ReadWriteSynchronizedGraph",
    "SimpleMutableGraph",
    "ValidationError",
]
