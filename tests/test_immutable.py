"""Tests for ImmutableGraph, ImmutableValueGraph and ImmutableNetwork.

Test categories:
- TestCopyOf: snapshots equal their source and ignore later changes
- TestImmutableBuilders: incremental construction, reuse after build
- TestSealed: no mutators, no subclassing, no direct construction
- TestObservedOrder: frozen copies report the order they iterate in
- TestConcurrentReads: unsynchronized reads from many threads
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from common_graph import (
    ElementOrder,
    EndpointPair,
    GraphBuilder,
    ImmutableGraph,
    ImmutableNetwork,
    ImmutableValueGraph,
    NetworkBuilder,
    SelfLoopNotAllowedError,
    ValueGraphBuilder,
)


# ── TestCopyOf ────────────────────────────────────────────────


class TestCopyOf:
    """copy_of takes a detached snapshot."""

    def test_graph_snapshot(self, populated_directed_graph):
        frozen = ImmutableGraph.copy_of(populated_directed_graph)
        assert frozen == populated_directed_graph
        populated_directed_graph.put_edge("e", "a")
        populated_directed_graph.remove_node("b")
        assert frozen != populated_directed_graph
        assert frozen.successors("a") == {"b", "c"}
        assert "b" in frozen.nodes()

    def test_value_graph_snapshot(self, undirected_value_graph):
        undirected_value_graph.put_edge_value(1, 2, "x")
        frozen = ImmutableValueGraph.copy_of(undirected_value_graph)
        undirected_value_graph.put_edge_value(1, 2, "y")
        assert frozen.edge_value(2, 1) == "x"
        assert len(frozen.edges()) == 1

    def test_network_snapshot(self, directed_multinetwork):
        n = directed_multinetwork
        n.add_edge("e1", "a", "b")
        n.add_edge("e2", "a", "b")
        n.add_edge("loop", "b", "b")
        frozen = ImmutableNetwork.copy_of(n)
        assert frozen == n
        n.remove_edge("e1")
        assert frozen.edges_connecting("a", "b") == {"e1", "e2"}
        assert frozen.incident_nodes("loop") == EndpointPair.ordered("b", "b")
        assert frozen.degree("b") == 4

    def test_undirected_network_snapshot(self, undirected_multinetwork):
        n = undirected_multinetwork
        n.add_edge("loop", 1, 1)
        n.add_edge("e", 1, 2)
        frozen = ImmutableNetwork.copy_of(n)
        assert frozen == n
        assert frozen.degree(1) == 3
        assert frozen.adjacent_nodes(1) == {1, 2}

    def test_iteration_order_round_trip(self, populated_directed_graph):
        g = populated_directed_graph
        frozen = ImmutableGraph.copy_of(g)
        assert list(frozen.nodes()) == list(g.nodes())
        for node in g.nodes():
            assert list(frozen.successors(node)) == list(g.successors(node))
            assert list(frozen.predecessors(node)) == list(g.predecessors(node))
            assert list(frozen.incident_edges(node)) == list(g.incident_edges(node))

    def test_network_iteration_order_round_trip(self, undirected_multinetwork):
        n = undirected_multinetwork
        for edge, u, v in (("e3", 3, 1), ("e1", 1, 2), ("loop", 2, 2), ("e2", 2, 3)):
            n.add_edge(edge, u, v)
        frozen = ImmutableNetwork.copy_of(n)
        assert list(frozen.nodes()) == list(n.nodes())
        assert list(frozen.edges()) == list(n.edges())
        for node in n.nodes():
            assert list(frozen.incident_edges(node)) == list(n.incident_edges(node))
            assert list(frozen.adjacent_nodes(node)) == list(n.adjacent_nodes(node))

    def test_copy_of_immutable_is_identity(self, directed_graph):
        frozen = ImmutableGraph.copy_of(directed_graph)
        assert ImmutableGraph.copy_of(frozen) is frozen

    def test_configuration_preserved(self):
        n = NetworkBuilder.undirected().allows_parallel_edges(True).allows_self_loops(True).build()
        frozen = ImmutableNetwork.copy_of(n)
        assert not frozen.is_directed()
        assert frozen.allows_parallel_edges()
        assert frozen.allows_self_loops()

    def test_wrong_kind_rejected(self, directed_value_graph):
        with pytest.raises(TypeError):
            ImmutableGraph.copy_of(directed_value_graph)
        with pytest.raises(TypeError):
            ImmutableNetwork.copy_of(directed_value_graph)

    def test_value_graph_as_graph_is_immutable(self, directed_value_graph):
        directed_value_graph.put_edge_value(1, 2, 3)
        frozen = ImmutableValueGraph.copy_of(directed_value_graph)
        graph = frozen.as_graph()
        assert isinstance(graph, ImmutableGraph)
        assert graph.successors(1) == {2}

    def test_network_as_graph_is_immutable(self, directed_multinetwork):
        directed_multinetwork.add_edge("e1", 1, 2)
        directed_multinetwork.add_edge("e2", 1, 2)
        graph = ImmutableNetwork.copy_of(directed_multinetwork).as_graph()
        assert isinstance(graph, ImmutableGraph)
        assert len(graph.edges()) == 1

    def test_network_as_graph_is_shared(self, directed_multinetwork):
        directed_multinetwork.add_edge("e1", 1, 2)
        frozen = ImmutableNetwork.copy_of(directed_multinetwork)
        assert frozen.as_graph() is frozen.as_graph()
        assert frozen.as_graph() == directed_multinetwork.as_graph()

    def test_equal_to_mutable_with_same_contents(self):
        mutable = GraphBuilder.undirected().build()
        mutable.put_edge(1, 2)
        frozen = ImmutableGraph.copy_of(mutable)
        assert frozen == mutable
        assert hash(frozen) == hash(mutable)


# ── TestImmutableBuilders ─────────────────────────────────────


class TestImmutableBuilders:
    """Builders obtained from ``immutable()``."""

    def test_graph_builder(self):
        graph = (
            GraphBuilder.directed()
            .immutable()
            .put_edge(1, 2)
            .put_edge(2, 3)
            .add_node(4)
            .build()
        )
        assert isinstance(graph, ImmutableGraph)
        assert list(graph.nodes()) == [1, 2, 3, 4]
        assert graph.successors(2) == {3}

    def test_value_graph_builder(self):
        graph = ValueGraphBuilder.undirected().immutable().put_edge_value("a", "b", 1.5).build()
        assert isinstance(graph, ImmutableValueGraph)
        assert graph.edge_value("b", "a") == 1.5

    def test_network_builder(self):
        network = (
            NetworkBuilder.directed()
            .allows_parallel_edges(True)
            .immutable()
            .add_edge("e1", 1, 2)
            .add_edge("e2", 1, 2)
            .build()
        )
        assert isinstance(network, ImmutableNetwork)
        assert network.edges_connecting(1, 2) == {"e1", "e2"}

    def test_builder_reusable_after_build(self):
        builder = GraphBuilder.undirected().immutable().put_edge(1, 2)
        first = builder.build()
        builder.put_edge(2, 3)
        second = builder.build()
        assert len(first.edges()) == 1
        assert len(second.edges()) == 2

    def test_constraints_enforced_immediately(self):
        builder = GraphBuilder.directed().immutable()
        with pytest.raises(SelfLoopNotAllowedError):
            builder.put_edge(1, 1)

    def test_unordered_becomes_insertion(self):
        graph = GraphBuilder.directed().immutable().put_edge(1, 2).build()
        assert graph.incident_edge_order() == ElementOrder.insertion()
        assert graph.node_order() == ElementOrder.insertion()


# ── TestSealed ────────────────────────────────────────────────


class TestSealed:
    """Immutable types cannot be mutated, extended or forged."""

    @pytest.mark.parametrize(
        "attribute", ["add_node", "put_edge", "put_edge_value", "remove_node", "remove_edge"]
    )
    def test_no_graph_mutators(self, attribute):
        graph = GraphBuilder.directed().immutable().put_edge(1, 2).build()
        value_graph = ValueGraphBuilder.directed().immutable().put_edge_value(1, 2, 0).build()
        assert not hasattr(graph, attribute)
        assert not hasattr(value_graph, attribute)

    @pytest.mark.parametrize("attribute", ["add_node", "add_edge", "remove_node", "remove_edge"])
    def test_no_network_mutators(self, attribute):
        network = NetworkBuilder.directed().immutable().add_edge("e", 1, 2).build()
        assert not hasattr(network, attribute)

    @pytest.mark.parametrize("cls", [ImmutableGraph, ImmutableValueGraph, ImmutableNetwork])
    def test_cannot_subclass(self, cls):
        with pytest.raises(TypeError):
            type("Sneaky", (cls,), {})

    def test_cannot_construct_directly(self, directed_graph):
        with pytest.raises(TypeError):
            ImmutableGraph(directed_graph)

    def test_repeated_iteration_is_identical(self):
        graph = GraphBuilder.undirected().immutable().put_edge("x", "y").put_edge("y", "z").build()
        assert list(graph.nodes()) == list(graph.nodes())
        assert list(graph.edges()) == list(graph.edges())

    def test_views_are_read_only(self):
        graph = GraphBuilder.directed().immutable().put_edge(1, 2).build()
        nodes = graph.nodes()
        assert not hasattr(nodes, "add")
        assert not hasattr(nodes, "discard")
        with pytest.raises(TypeError):
            nodes[0] = 5  # type: ignore[index]


# ── TestObservedOrder ─────────────────────────────────────────


class TestObservedOrder:
    """Frozen copies iterate and report the order seen during copying."""

    def test_sorted_order_kept(self):
        g = GraphBuilder.directed().node_order(ElementOrder.natural()).build()
        for node in (3, 1, 2):
            g.add_node(node)
        frozen = ImmutableGraph.copy_of(g)
        assert list(frozen.nodes()) == [1, 2, 3]
        assert frozen.node_order() == ElementOrder.natural()

    def test_incident_order_replicated(self):
        g = GraphBuilder.directed().incident_edge_order(ElementOrder.natural()).build()
        for successor in (5, 2, 9):
            g.put_edge(0, successor)
        frozen = ImmutableGraph.copy_of(g)
        assert list(frozen.successors(0)) == [2, 5, 9]

    def test_unordered_reported_as_insertion(self, directed_graph):
        frozen = ImmutableGraph.copy_of(directed_graph)
        assert frozen.incident_edge_order() == ElementOrder.insertion()

    def test_network_edge_order_replicated(self):
        n = NetworkBuilder.undirected().edge_order(ElementOrder.natural()).build()
        n.add_edge("c", 1, 2)
        n.add_edge("a", 2, 3)
        n.add_edge("b", 3, 4)
        frozen = ImmutableNetwork.copy_of(n)
        assert list(frozen.edges()) == ["a", "b", "c"]
        assert frozen.edge_order() == ElementOrder.natural()


# ── TestConcurrentReads ───────────────────────────────────────


def _grid_graph(size):
    builder = GraphBuilder.undirected().immutable()
    for row in range(size):
        for col in range(size):
            if row + 1 < size:
                builder.put_edge((row, col), (row + 1, col))
            if col + 1 < size:
                builder.put_edge((row, col), (row, col + 1))
    return builder.build()


class TestConcurrentReads:
    """Frozen graphs need no locking for readers."""

    def test_parallel_degree_sums(self):
        graph = _grid_graph(20)
        expected = 2 * len(graph.edges())

        def degree_sum(_):
            return sum(graph.degree(node) for node in graph.nodes())

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(degree_sum, range(32)))
        assert results == [expected] * 32

    def test_parallel_edge_iteration(self):
        graph = _grid_graph(10)

        def edge_set(_):
            return frozenset(graph.edges())

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = set(pool.map(edge_set, range(16)))
        assert len(results) == 1
