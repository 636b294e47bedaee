"""Exceptions raised by graph traversals."""
from __future__ import annotations

from typing import Hashable, Sequence


class GraphError(Exception):
    """Base class for all graph errors."""


class UnknownVertexError(GraphError):
    """Raised when a traversal reaches a vertex the graph has no entry for.

    Edges always register both endpoints, so this only happens for a
    root that was never added or a graph whose mapping was edited by
    hand through ``edges()``.
    """

    def __init__(self, vertex: Hashable) -> None:
        self.vertex = vertex
        super().__init__(f"unknown vertex {vertex}")


class CircularReferenceError(GraphError):
    """Raised when a traversal finds a directed cycle.

    ``cycle`` is the offending path with the repeated vertex at both
    ends, e.g. ``["A", "F", "D", "A"]``.
    """

    def __init__(self, cycle: Sequence[Hashable]) -> None:
        self.cycle = list(cycle)
        path = " -> ".join(str(v) for v in self.cycle)
        super().__init__(f"found circular reference {path}")
