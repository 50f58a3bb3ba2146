"""
Common validation helpers for the graph models.

Node values are opaque to the library: anything hashable with value equality
works. The only value the library refuses is ``None``, which stands for an
absent node.
"""

from typing import Hashable, Iterable, List, Optional, TypeVar

from ..exceptions import InvalidArgumentError

N = TypeVar("N", bound=Hashable)


def validate_node(name: str, node: Optional[N]) -> N:
    """Validate that a node value is present and return it."""
    if node is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return node


def validate_targets(name: str, targets: Optional[Iterable[N]]) -> List[N]:
    """Validate a non-empty collection of node values and return it as a list."""
    if targets is None:
        raise InvalidArgumentError(f"{name} must not be None")

    materialized = list(targets)
    if not materialized:
        raise InvalidArgumentError(f"{name} must contain at least one node")
    for index, node in enumerate(materialized):
        validate_node(f"{name}[{index}]", node)
    return materialized
