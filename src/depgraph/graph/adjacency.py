"""Generic directed graph using adjacency lists.

The graph stores vertices of any hashable type T and directed edges
between them.  Internally it is a dict[T, list[T]] where keys are
source vertices and values are the ordered targets of their outgoing
edges.  Every vertex that was ever added, as a source, as a target or
on its own, has a key, so a vertex with no outgoing edges maps to an
empty list.

Edges are kept in insertion order and are not deduplicated: adding
A -> B twice gives A two parallel edges to B.  Self-loops are accepted
here and only rejected when a traversal walks into them.

The typical use is dependency ordering: vertices are initialization
stages or modules, an edge means "must come before", and
adjacency_to_node() on the reversed graph tells you how deep each
stage sits below a common root.
"""
from __future__ import annotations

from typing import Generic, Hashable, Iterator, Mapping, Sequence, TypeVar

from depgraph.graph.levels import adjacency_to_node

T = TypeVar("T", bound=Hashable)


class DirectedGraph(Generic[T]):
    """Directed graph backed by adjacency lists.

    Passing *edges* makes the new graph take ownership of that dict
    as-is; use from_edges() to build from an arbitrary mapping.
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: dict[T, list[T]] | None = None) -> None:
        self._edges: dict[T, list[T]] = edges if edges is not None else {}

    @classmethod
    def from_edges(cls, mapping: Mapping[T, Sequence[T]]) -> DirectedGraph[T]:
        """Build a graph from a ``{source: [targets]}`` mapping.

        Every key and every target becomes a vertex.
        """
        graph: DirectedGraph[T] = cls()
        for source, targets in mapping.items():
            graph.add_vertex(source)
            for target in targets:
                graph.add_edge(source, target)
        return graph

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, vertex: T) -> list[T]:
        """Add *vertex* if it does not already exist.

        Returns the live list of the vertex's targets.
        """
        targets = self._edges.get(vertex)
        if targets is None:
            targets = []
            self._edges[vertex] = targets
        return targets

    def add_edge(self, source: T, target: T) -> None:
        """Add a directed edge source -> target.

        Creates both vertices if they are missing.  Duplicate edges are
        kept.
        """
        targets = self.add_vertex(source)
        self.add_vertex(target)
        targets.append(target)

    # ---- derived graphs --------------------------------------------------

    def shallow_clone(self) -> DirectedGraph[T]:
        """Copy the mapping and every target list, but not the vertices."""
        return DirectedGraph({v: list(targets) for v, targets in self._edges.items()})

    def reverse(self) -> DirectedGraph[T]:
        """Return a new graph with every edge flipped."""
        rev: DirectedGraph[T] = DirectedGraph()
        for source, targets in self._edges.items():
            # register explicitly, a vertex with no incoming edges would
            # otherwise be dropped
            rev.add_vertex(source)
            for target in targets:
                rev.add_edge(target, source)
        return rev

    # ---- queries ---------------------------------------------------------

    def edges(self) -> dict[T, list[T]]:
        """The internal mapping itself, not a copy."""
        return self._edges

    def leaves(self) -> list[T]:
        """Vertices with no outgoing edges, in first-seen order."""
        return [v for v, targets in self._edges.items() if not targets]

    def adjacency_to_node(self, root: T) -> dict[T, int]:
        """Longest path length from *root* to every reachable vertex.

        Raises CircularReferenceError if a cycle is reachable from
        *root*, UnknownVertexError if *root* is not in the graph.
        """
        return adjacency_to_node(self, root)

    def has_vertex(self, vertex: T) -> bool:
        return vertex in self._edges

    def has_edge(self, source: T, target: T) -> bool:
        return source in self._edges and target in self._edges[source]

    def successors(self, vertex: T) -> list[T]:
        """Targets of *vertex*'s outgoing edges (a copy)."""
        return list(self._edges.get(vertex, []))

    def vertices(self) -> Iterator[T]:
        return iter(self._edges)

    @property
    def vertex_count(self) -> int:
        return len(self._edges)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._edges.values())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._edges

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self.vertex_count}, edges={self.edge_count})"
