"""Thread-safety for shared graphs."""

from .rwlock import ReadWriteLock
from .synchronized import ReadWriteSynchronizedGraph

__all__ = [
    "ReadWriteLock",
    "ReadWriteSynchronizedGraph",
]
