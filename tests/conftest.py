"""Shared fixtures for graph tests."""
from __future__ import annotations

import pytest

from depgraph.graph.adjacency import DirectedGraph

SEED = 42


def build_sample(include_x: bool = False) -> DirectedGraph[str]:
    """The sample dependency graph (edges point down):

               A     B
             /   \\   |
            C     D  E
            |     | /
            |     F   G
             \\   /  /
               X --

    X and its incoming edges are only present with *include_x*.
    """
    g: DirectedGraph[str] = DirectedGraph()
    g.add_edge("A", "C")
    g.add_edge("A", "D")
    g.add_edge("B", "E")
    g.add_edge("D", "F")
    g.add_edge("E", "F")
    g.add_vertex("G")
    if include_x:
        g.add_edge("C", "X")
        g.add_edge("F", "X")
        g.add_edge("G", "X")
    return g


@pytest.fixture
def empty_graph() -> DirectedGraph[str]:
    return DirectedGraph()


@pytest.fixture
def sample_graph() -> DirectedGraph[str]:
    return build_sample()


@pytest.fixture
def sample_graph_with_x() -> DirectedGraph[str]:
    return build_sample(include_x=True)


@pytest.fixture
def linear_graph() -> DirectedGraph[str]:
    """A -> B -> C -> D"""
    g: DirectedGraph[str] = DirectedGraph()
    for src, dst in [("A", "B"), ("B", "C"), ("C", "D")]:
        g.add_edge(src, dst)
    return g


@pytest.fixture
def diamond_graph() -> DirectedGraph[str]:
    """
    A -> B -> D
    A -> C -> D
    """
    g: DirectedGraph[str] = DirectedGraph()
    for src, dst in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]:
        g.add_edge(src, dst)
    return g


# Initialization stages of a web service: each module points at the
# stages that have to be ready before it.
STAGE_EDGES: dict[str, list[str]] = {
    "AuthReadyStage": ["MiddlewareReadyStage"],
    "DbReadyStage": ["AuthReadyStage", "DevSetup"],
    "TokenAuthenticationMiddleware": ["AuthReadyStage"],
    "ConfigReadyStage": ["DbReadyStage"],
    "ContactSchema": ["DbReadyStage", "ContactsResource"],
    "CredentialSchema": ["DbReadyStage"],
    "OrganisationUserSchema": ["DbReadyStage"],
    "OrganisationSchema": ["DbReadyStage", "UserSchema", "OrganisationsResource"],
    "UserSchema": [
        "DbReadyStage", "ContactSchema", "CredentialSchema",
        "OrganisationUserSchema", "UsersResource",
    ],
    "__root__": [
        "ConfigReadyStage", "BodyParserMiddleware", "CorsMiddleware",
        "RequestTracingMiddleware", "TokenAuthenticationMiddleware",
        "AuthTokensResource", "OrganisationSchema",
    ],
    "MiddlewareReadyStage": ["RoutingReadyStage"],
    "BodyParserMiddleware": ["MiddlewareReadyStage"],
    "CorsMiddleware": ["MiddlewareReadyStage"],
    "RequestTracingMiddleware": ["MiddlewareReadyStage"],
    "RoutingReadyStage": [],
    "AuthTokensResource": ["RoutingReadyStage"],
    "ContactsResource": ["RoutingReadyStage"],
    "OrganisationsResource": ["RoutingReadyStage"],
    "UsersResource": ["RoutingReadyStage"],
    "DevSetup": [],
}


@pytest.fixture
def stage_graph() -> DirectedGraph[str]:
    g: DirectedGraph[str] = DirectedGraph()
    for module, children in STAGE_EDGES.items():
        g.add_vertex(module)
        for child in children:
            g.add_edge(module, child)
    return g
