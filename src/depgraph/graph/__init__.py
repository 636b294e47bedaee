"""Graph container and traversal algorithms."""

from depgraph.graph.adjacency import DirectedGraph
from depgraph.graph.cycle_detector import CycleResult, detect_cycle
from depgraph.graph.errors import (
    CircularReferenceError,
    GraphError,
    UnknownVertexError,
)
from depgraph.graph.levels import adjacency_to_node

__all__ = [
    "CircularReferenceError",
    "CycleResult",
    "DirectedGraph",
    "GraphError",
    "UnknownVertexError",
    "adjacency_to_node",
    "detect_cycle",
]
