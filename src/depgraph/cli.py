"""depgraph CLI entry point.

Usage: depgraph [-v] {leaves,reverse,levels,check} FILE

FILE is a JSON object mapping each vertex to the list of its targets,
e.g. ``{"A": ["C", "D"], "B": ["E"]}``.  Use ``-`` to read stdin.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from depgraph.graph.adjacency import DirectedGraph
from depgraph.graph.cycle_detector import detect_cycle
from depgraph.graph.errors import GraphError

log = logging.getLogger(__name__)


class InputError(Exception):
    """Raised when the input file is missing or not an edge mapping."""


def load_graph(source: str) -> DirectedGraph[str]:
    """Read a ``{vertex: [targets]}`` JSON document from *source*."""
    try:
        if source == "-":
            data: Any = json.load(sys.stdin)
        else:
            with open(source, encoding="utf-8") as fh:
                data = json.load(fh)
    except OSError as exc:
        raise InputError(f"cannot read {source}: {exc.strerror}") from exc
    except json.JSONDecodeError as exc:
        raise InputError(f"{source} is not valid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise InputError(f"{source} is not valid UTF-8: {exc}") from exc

    if not isinstance(data, dict):
        raise InputError(f"{source}: expected a JSON object of vertex -> targets")
    for vertex, targets in data.items():
        if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
            raise InputError(f"{source}: targets of {vertex!r} must be a list of strings")

    graph = DirectedGraph.from_edges(data)
    log.info("loaded %r from %s", graph, source)
    return graph


def _add_file_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument("file", help="JSON edge mapping, or - for stdin")


def _run_leaves(args: argparse.Namespace) -> int:
    graph = load_graph(args.file)
    for vertex in graph.leaves():
        print(vertex)
    return 0


def _run_reverse(args: argparse.Namespace) -> int:
    graph = load_graph(args.file)
    print(json.dumps(graph.reverse().edges(), indent=2))
    return 0


def _run_levels(args: argparse.Namespace) -> int:
    graph = load_graph(args.file)
    if args.reverse:
        graph = graph.reverse()
    levels = graph.adjacency_to_node(args.root)
    print(json.dumps(levels, indent=2))
    return 0


def _run_check(args: argparse.Namespace) -> int:
    graph = load_graph(args.file)
    result = detect_cycle(graph)
    if result.has_cycle:
        path = " -> ".join(result.cycle_path or [])
        print(f"depgraph: cycle: {path}", file=sys.stderr)
        return 1
    print(f"ok: {graph.vertex_count} vertices, {graph.edge_count} edges, no cycles")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="depgraph",
        description="Inspect dependency graphs: leaves, reversal and longest-path levels.",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase log output (-v for info, -vv for debug).",
    )
    subparsers = parser.add_subparsers(dest="command")

    p = subparsers.add_parser("leaves", help="Print vertices with no outgoing edges.")
    _add_file_argument(p)
    p.set_defaults(func=_run_leaves)

    p = subparsers.add_parser("reverse", help="Print the graph with every edge flipped.")
    _add_file_argument(p)
    p.set_defaults(func=_run_reverse)

    p = subparsers.add_parser(
        "levels",
        help="Print the longest path length from ROOT to every reachable vertex.",
    )
    _add_file_argument(p)
    p.add_argument("--root", required=True, help="Vertex to measure from.")
    p.add_argument(
        "--reverse", action="store_true",
        help="Follow edges backwards (walk from a shared sink up to its dependents).",
    )
    p.set_defaults(func=_run_levels)

    p = subparsers.add_parser("check", help="Report whether the graph has a cycle.")
    _add_file_argument(p)
    p.set_defaults(func=_run_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except (GraphError, InputError) as exc:
        print(f"depgraph: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
