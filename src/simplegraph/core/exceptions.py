"""
Custom exceptions for the graph library.

This module defines the hierarchy of exceptions raised by the graph engine,
its builder, its configuration layer and its synchronization wrapper. Expected
outcomes such as duplicate vertices, duplicate edges or unreachable targets are
never signalled through exceptions: they are reported through ``False`` results
and empty paths. Exceptions are reserved for programmer errors.
"""


class ValidationError(Exception):
    """
    Raised when input validation fails.

    Examples:
        * Missing node values
        * Malformed bulk connection targets
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidArgumentError(ValidationError, ValueError):
    """
    Raised when a required argument is absent or empty.

    The check always runs before any mutation, so a graph is never left
    partially updated by a rejected call.

    Examples:
        * ``None`` passed as a node value
        * An empty target list passed to a bulk connection
    """


class GraphOperationError(Exception):
    """
    Raised when a graph operation cannot be completed.

    Examples:
        * Internal adjacency bookkeeping disagreeing with the edge set
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid for the receiving object.

    Examples:
        * Asking an undirected edge for its source or target
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown settings keys
        * Settings values of the wrong type
        * Malformed configuration documents
    """
