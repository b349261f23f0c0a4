"""Tests for mutable ValueGraph instances.

Test categories:
- TestEdgeValues: put/replace/remove values and their return values
- TestEdgeValueLookup: edge_value and edge_value_or_default semantics
- TestValueGraphAsGraph: connectivity-only view
- TestValueGraphEquality: values take part in equality
"""

import pytest

from common_graph import (
    EndpointPair,
    GraphBuilder,
    NullElementError,
    SelfLoopNotAllowedError,
    UnknownElementError,
    ValueGraphBuilder,
)


# ── TestEdgeValues ────────────────────────────────────────────


class TestEdgeValues:
    """put_edge_value and remove_edge."""

    def test_put_returns_previous_value(self, directed_value_graph):
        g = directed_value_graph
        assert g.put_edge_value("a", "b", 1) is None
        assert g.put_edge_value("a", "b", 2) == 1
        assert g.edge_value("a", "b") == 2
        assert len(g.edges()) == 1

    def test_put_adds_nodes(self, directed_value_graph):
        directed_value_graph.put_edge_value(1, 2, "w")
        assert directed_value_graph.nodes() == {1, 2}

    def test_remove_edge_returns_value(self, directed_value_graph):
        g = directed_value_graph
        g.put_edge_value("a", "b", 7.5)
        assert g.remove_edge("a", "b") == 7.5
        assert g.remove_edge("a", "b") is None
        assert g.nodes() == {"a", "b"}

    def test_remove_edge_with_unknown_node(self, directed_value_graph):
        assert directed_value_graph.remove_edge("x", "y") is None

    def test_undirected_value_shared(self, undirected_value_graph):
        g = undirected_value_graph
        g.put_edge_value(1, 2, "shared")
        assert g.edge_value(2, 1) == "shared"
        assert g.put_edge_value(2, 1, "updated") == "shared"
        assert g.edge_value(1, 2) == "updated"
        assert len(g.edges()) == 1

    def test_undirected_self_loop_value(self, undirected_value_graph):
        g = undirected_value_graph
        g.put_edge_value(1, 1, "loop")
        assert g.edge_value(1, 1) == "loop"
        assert g.degree(1) == 2
        assert g.remove_node(1) is True
        assert len(g.edges()) == 0

    def test_none_value_rejected(self, directed_value_graph):
        with pytest.raises(NullElementError):
            directed_value_graph.put_edge_value(1, 2, None)
        assert directed_value_graph.nodes() == set()

    def test_self_loop_rejected_without_side_effects(self):
        g = ValueGraphBuilder.directed().build()
        with pytest.raises(SelfLoopNotAllowedError):
            g.put_edge_value("n", "n", 1)
        assert g.nodes() == set()

    def test_falsy_values_are_stored(self, directed_value_graph):
        g = directed_value_graph
        g.put_edge_value(1, 2, 0)
        g.put_edge_value(2, 3, "")
        assert g.edge_value(1, 2) == 0
        assert g.edge_value(2, 3) == ""
        assert g.has_edge_connecting(1, 2)

    def test_remove_node_drops_edge_values(self, directed_value_graph):
        g = directed_value_graph
        g.put_edge_value("a", "b", 1)
        g.put_edge_value("b", "c", 2)
        g.remove_node("b")
        assert len(g.edges()) == 0
        assert g.edge_value_or_default("a", "c", "none") == "none"


# ── TestEdgeValueLookup ───────────────────────────────────────


class TestEdgeValueLookup:
    """Value lookups distinguish missing edges from missing nodes."""

    def test_default_for_unconnected_nodes(self, directed_value_graph):
        g = directed_value_graph
        g.put_edge_value("a", "b", 3)
        assert g.edge_value_or_default("b", "a", -1) == -1
        assert g.edge_value("b", "a") is None

    def test_unknown_node_raises(self, directed_value_graph):
        g = directed_value_graph
        g.add_node("a")
        with pytest.raises(UnknownElementError):
            g.edge_value("a", "missing")
        with pytest.raises(UnknownElementError):
            g.edge_value_or_default("missing", "a", 0)

    def test_directed_value_is_one_way(self, directed_value_graph):
        directed_value_graph.put_edge_value(1, 2, "forward")
        assert directed_value_graph.edge_value(1, 2) == "forward"
        assert directed_value_graph.edge_value(2, 1) is None


# ── TestValueGraphAsGraph ─────────────────────────────────────


class TestValueGraphAsGraph:
    """as_graph() exposes connectivity only, live."""

    def test_as_graph_is_live(self, directed_value_graph):
        g = directed_value_graph
        view = g.as_graph()
        g.put_edge_value(1, 2, "x")
        assert view.successors(1) == {2}
        assert EndpointPair.ordered(1, 2) in view.edges()
        assert not hasattr(view, "put_edge")

    def test_as_graph_equals_plain_graph(self, undirected_value_graph):
        undirected_value_graph.put_edge_value("a", "b", 10)
        plain = GraphBuilder.undirected().build()
        plain.put_edge("b", "a")
        assert undirected_value_graph.as_graph() == plain


# ── TestValueGraphEquality ────────────────────────────────────


class TestValueGraphEquality:
    """Equality includes edge values; hashing ignores them."""

    def _build(self, directed, triples):
        builder = ValueGraphBuilder.directed() if directed else ValueGraphBuilder.undirected()
        g = builder.build()
        for u, v, value in triples:
            g.put_edge_value(u, v, value)
        return g

    def test_same_values_equal(self):
        g1 = self._build(True, [(1, 2, "a"), (2, 3, "b")])
        g2 = self._build(True, [(2, 3, "b"), (1, 2, "a")])
        assert g1 == g2
        assert hash(g1) == hash(g2)

    def test_different_values_not_equal(self):
        g1 = self._build(True, [(1, 2, "a")])
        g2 = self._build(True, [(1, 2, "z")])
        assert g1 != g2

    def test_undirected_values_compare_symmetrically(self):
        g1 = self._build(False, [(1, 2, 5)])
        g2 = self._build(False, [(2, 1, 5)])
        assert g1 == g2

    def test_unhashable_values_allowed(self):
        g1 = self._build(True, [(1, 2, [1, 2])])
        g2 = self._build(True, [(1, 2, [1, 2])])
        assert g1 == g2
        assert hash(g1) == hash(g2)

    def test_repr_includes_values(self):
        g = self._build(True, [(1, 2, "w")])
        assert "<1 -> 2>: 'w'" in repr(g)
