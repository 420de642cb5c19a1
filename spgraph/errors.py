"""Exception types raised by spgraph.

Every error derives from `GraphError` and from the built-in exception that
best describes it, so callers may catch either the specific type or the
built-in (``ValueError``, ``KeyError``, ``OverflowError``).
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all spgraph errors."""


class InvalidArgumentError(GraphError, ValueError):
    """Raised for malformed input.

    Covers zero or non-integer weights, missing endpoints, endpoints that are
    not members of the graph, and shortest-path queries on unknown vertices.
    """


class DuplicateEdgeError(GraphError, ValueError):
    """Raised when an edge with the same (source, destination, tag) exists."""


class EdgeNotFoundError(GraphError, KeyError):
    """Raised when a queried edge does not exist."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class VertexNotFoundError(GraphError, KeyError):
    """Raised when a value-based vertex lookup finds nothing."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class DistanceOverflowError(GraphError, OverflowError):
    """Raised when a path distance exceeds the configured integer width."""
