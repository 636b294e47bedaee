"""Adjacency levels: longest path depth from a root, with cycle detection.

For every vertex reachable from the root, the level is the length (in
edges) of the *longest* directed path from the root to it.  In a
dependency graph that is the vertex's true depth: a stage has to wait
for its deepest chain of prerequisites, not its shallowest.

The walk is a depth-first search that remembers the best level seen
for each vertex:

  1.  Entering a vertex at level L: if no level is recorded, or the
      recorded one is strictly less than L, record L and walk its
      children at L + 1.  Otherwise stop here -- a path at least as
      long already reached this vertex and pushed its depth down to
      every descendant.
  2.  Before walking into a child, check whether the child is already
      on the current path (the ancestors of the vertex being expanded,
      the vertex itself included).  If so the graph has a cycle and
      the path segment from that child down to here is reported.

Cycle detection only looks at the current path, not at everything
visited so far, so diamonds (two disjoint routes converging on the same
vertex) are fine while true cycles are rejected.

The search is written with an explicit stack of (vertex, level, child
iterator) frames instead of recursion, so a dependency chain longer
than the interpreter's recursion limit still works.  The visiting
order, the pruning rule and the reported cycle are the same as in the
recursive formulation.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Hashable, Iterator, TypeVar

from depgraph.graph.errors import CircularReferenceError, UnknownVertexError

if TYPE_CHECKING:
    from depgraph.graph.adjacency import DirectedGraph

T = TypeVar("T", bound=Hashable)

log = logging.getLogger(__name__)


def adjacency_to_node(graph: DirectedGraph[T], root: T) -> dict[T, int]:
    """Return ``{vertex: level}`` for every vertex reachable from *root*.

    *root* itself is at level 0.  Raises UnknownVertexError if *root*
    (or any vertex reached) has no entry in the graph, and
    CircularReferenceError as soon as a cycle reachable from *root* is
    found.
    """
    edges = graph.edges()
    levels: dict[T, int] = {}

    def _enter(node: T, level: int) -> Iterator[T] | None:
        # None means the node was already reached at this depth or deeper
        try:
            children = edges[node]
        except KeyError:
            raise UnknownVertexError(node) from None
        best = levels.get(node)
        if best is not None and best >= level:
            return None
        levels[node] = level
        return iter(children)

    try:
        root_children = iter(edges[root])
    except KeyError:
        raise UnknownVertexError(root) from None
    levels[root] = 0

    path: list[T] = [root]
    on_path: set[T] = {root}
    stack: list[tuple[T, int, Iterator[T]]] = [(root, 0, root_children)]

    while stack:
        node, level, children = stack[-1]
        for child in children:
            if child in on_path:
                cycle = path[path.index(child):] + [child]
                log.debug("cycle reachable from %s: %s", root, cycle)
                raise CircularReferenceError(cycle)
            grandchildren = _enter(child, level + 1)
            if grandchildren is not None:
                path.append(child)
                on_path.add(child)
                stack.append((child, level + 1, grandchildren))
                break
        else:
            # all children done
            stack.pop()
            path.pop()
            on_path.discard(node)

    log.debug("%d vertices reachable from %s", len(levels), root)
    return levels
