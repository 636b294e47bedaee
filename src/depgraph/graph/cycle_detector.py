"""Whole-graph cycle detection using DFS three-color marking.

adjacency_to_node() only sees cycles reachable from its root.  This
module checks every vertex, which is what you want when validating a
dependency file before picking a root.

The three colors:
  WHITE  -- vertex not yet visited
  GRAY   -- vertex is on the current DFS path
  BLACK  -- vertex fully explored

An edge to a GRAY vertex closes a cycle.  The path is kept as an
explicit stack of frames, so the offending segment can be sliced off
directly and deep graphs do not hit the recursion limit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, TypeVar

from depgraph.graph.adjacency import DirectedGraph

T = TypeVar("T", bound=Hashable)

WHITE, GRAY, BLACK = 0, 1, 2


@dataclass(slots=True)
class CycleResult(Generic[T]):
    """Outcome of a whole-graph check.

    cycle_path is None for an acyclic graph, otherwise the first cycle
    found with its starting vertex repeated at the end.
    """
    has_cycle: bool
    cycle_path: list[T] | None = None


def detect_cycle(graph: DirectedGraph[T]) -> CycleResult[T]:
    """Walk every vertex of *graph* in insertion order looking for a cycle.

    Each start vertex that is still WHITE opens a walk; one frame per
    GRAY vertex holds the iterator over its remaining targets, and the
    frame is dropped (vertex turns BLACK) once the iterator runs out.
    The first edge into a GRAY vertex stops the search and the GRAY
    path from that vertex onward becomes the cycle.  A target with no
    entry in the mapping is treated as a vertex without edges.
    """
    edges = graph.edges()
    color: dict[T, int] = {v: WHITE for v in edges}

    for start in edges:
        if color[start] != WHITE:
            continue
        color[start] = GRAY
        path: list[T] = [start]
        stack: list[Iterator[T]] = [iter(edges[start])]
        while stack:
            for succ in stack[-1]:
                state = color.get(succ, WHITE)
                if state == GRAY:
                    return CycleResult(
                        has_cycle=True,
                        cycle_path=path[path.index(succ):] + [succ],
                    )
                if state == WHITE:
                    color[succ] = GRAY
                    path.append(succ)
                    stack.append(iter(edges.get(succ, [])))
                    break
            else:
                color[path.pop()] = BLACK
                stack.pop()

    return CycleResult(has_cycle=False, cycle_path=None)
