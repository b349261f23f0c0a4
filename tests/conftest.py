"""Pytest configuration and fixtures for common-graph-lib tests."""

import pytest

from common_graph import GraphBuilder, NetworkBuilder, ValueGraphBuilder


@pytest.fixture
def directed_graph():
    """Empty directed graph that allows self-loops."""
    return GraphBuilder.directed().allows_self_loops(True).build()


@pytest.fixture
def undirected_graph():
    """Empty undirected graph that allows self-loops."""
    return GraphBuilder.undirected().allows_self_loops(True).build()


@pytest.fixture
def directed_value_graph():
    """Empty directed value graph that allows self-loops."""
    return ValueGraphBuilder.directed().allows_self_loops(True).build()


@pytest.fixture
def undirected_value_graph():
    """Empty undirected value graph that allows self-loops."""
    return ValueGraphBuilder.undirected().allows_self_loops(True).build()


@pytest.fixture
def directed_multinetwork():
    """Empty directed network allowing parallel edges and self-loops."""
    return NetworkBuilder.directed().allows_parallel_edges(True).allows_self_loops(True).build()


@pytest.fixture
def undirected_multinetwork():
    """Empty undirected network allowing parallel edges and self-loops."""
    return NetworkBuilder.undirected().allows_parallel_edges(True).allows_self_loops(True).build()


@pytest.fixture
def populated_directed_graph(directed_graph):
    """Directed graph used by traversal-shaped tests.

    Graph structure:
        a -> b -> c -> d
        a -> c
        d -> d (self-loop)
        e (isolated)
    """
    g = directed_graph
    g.put_edge("a", "b")
    g.put_edge("b", "c")
    g.put_edge("c", "d")
    g.put_edge("a", "c")
    g.put_edge("d", "d")
    g.add_node("e")
    return g
