"""Directed dependency graphs with leaf and longest-path queries."""

from depgraph.graph import (
    CircularReferenceError,
    CycleResult,
    DirectedGraph,
    GraphError,
    UnknownVertexError,
    adjacency_to_node,
    detect_cycle,
)

__all__ = [
    "CircularReferenceError",
    "CycleResult",
    "DirectedGraph",
    "GraphError",
    "UnknownVertexError",
    "adjacency_to_node",
    "detect_cycle",
]
