"""Graph and ValueGraph interfaces.

A Graph models nodes and anonymous connections between them; a
ValueGraph additionally attaches a value to each connection. Both are
read-only interfaces: mutation lives in the separate MutableGraph and
MutableValueGraph subtypes so that code needing only queries never has
to accept an object that happens to be mutable.

Degree, edge enumeration, equality and ``repr`` are implemented once
here in terms of ``nodes``, ``adjacent_nodes``, ``predecessors`` and
``successors``, so every storage backend behaves identically.

Public API:
    BaseGraph: Queries shared by Graph and ValueGraph.
    Graph: Anonymous-edge graph.
    ValueGraph: Graph with a value on every edge.
    MutableGraph: Graph plus add/remove operations.
    MutableValueGraph: ValueGraph plus add/remove operations.
    ForwardingGraph: Graph delegating every query to another graph.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from .element_order import ElementOrder
from .endpoints import EndpointPair
from .exceptions import check_not_none
from .views import GraphView


class BaseGraph(ABC):
    """Read-only queries common to Graph and ValueGraph.

    Every accessor taking a node raises UnknownElementError if the node
    is not in the graph, and NullElementError if it is None.
    """

    # ── configuration ─────────────────────────────────────────

    @abstractmethod
    def is_directed(self) -> bool:
        """Whether every edge has a distinguished source and target."""

    @abstractmethod
    def allows_self_loops(self) -> bool:
        """Whether an edge may connect a node to itself."""

    @abstractmethod
    def node_order(self) -> ElementOrder:
        """Iteration order of ``nodes()``."""

    @abstractmethod
    def incident_edge_order(self) -> ElementOrder:
        """Iteration order of per-node neighbour and incident-edge views."""

    # ── primitives ────────────────────────────────────────────

    @abstractmethod
    def nodes(self) -> GraphView:
        """All nodes in the graph, in ``node_order()``."""

    @abstractmethod
    def adjacent_nodes(self, node: Any) -> GraphView:
        """Nodes connected to *node* by an edge in either direction."""

    @abstractmethod
    def predecessors(self, node: Any) -> GraphView:
        """Nodes with an edge into *node* (all neighbours if undirected)."""

    @abstractmethod
    def successors(self, node: Any) -> GraphView:
        """Nodes *node* has an edge to (all neighbours if undirected)."""

    def _modification_count(self) -> int:
        """Counter bumped on every structural change; guards live views."""
        return 0

    # ── derived queries ───────────────────────────────────────

    def edges(self) -> GraphView:
        """Every edge as an EndpointPair, each reported once."""
        return GraphView(
            self,
            iterate=self._iterate_edges,
            contains=self._contains_edge,
            size=self._edge_count,
        )

    def _iterate_edges(self) -> Iterator[EndpointPair]:
        if self.is_directed():
            for node in self.nodes():
                for successor in self.successors(node):
                    yield EndpointPair.ordered(node, successor)
            return
        visited = set()
        for node in self.nodes():
            for neighbor in self.adjacent_nodes(node):
                if neighbor not in visited:
                    yield EndpointPair.unordered(node, neighbor)
            visited.add(node)

    def _contains_edge(self, pair: object) -> bool:
        if not isinstance(pair, EndpointPair) or pair.is_ordered != self.is_directed():
            return False
        return self.has_edge_connecting(pair.node_u, pair.node_v)

    def _edge_count(self) -> int:
        # each edge contributes to exactly two degree counts
        return sum(self.degree(node) for node in self.nodes()) // 2

    def incident_edges(self, node: Any) -> GraphView:
        """Edges touching *node* as EndpointPairs; a self-loop appears once."""
        self.adjacent_nodes(node)  # validates membership up front

        def iterate() -> Iterator[EndpointPair]:
            if not self.is_directed():
                for neighbor in self.adjacent_nodes(node):
                    yield EndpointPair.unordered(node, neighbor)
                return
            for predecessor in self.predecessors(node):
                yield EndpointPair.ordered(predecessor, node)
            for successor in self.successors(node):
                if successor != node:
                    yield EndpointPair.ordered(node, successor)

        def contains(pair: object) -> bool:
            if not isinstance(pair, EndpointPair) or pair.is_ordered != self.is_directed():
                return False
            if node != pair.node_u and node != pair.node_v:
                return False
            return self.has_edge_connecting(pair.node_u, pair.node_v)

        def size() -> int:
            if not self.is_directed():
                return len(self.adjacent_nodes(node))
            successors = self.successors(node)
            self_loop = 1 if node in successors else 0
            return len(self.predecessors(node)) + len(successors) - self_loop

        return GraphView(self, iterate, contains, size)

    def degree(self, node: Any) -> int:
        """Number of edge endpoints at *node*; a self-loop counts twice."""
        if self.is_directed():
            return len(self.predecessors(node)) + len(self.successors(node))
        neighbors = self.adjacent_nodes(node)
        self_loop = 1 if self.allows_self_loops() and node in neighbors else 0
        return len(neighbors) + self_loop

    def in_degree(self, node: Any) -> int:
        if self.is_directed():
            return len(self.predecessors(node))
        return self.degree(node)

    def out_degree(self, node: Any) -> int:
        if self.is_directed():
            return len(self.successors(node))
        return self.degree(node)

    def has_edge_connecting(self, node_u: Any, node_v: Any) -> bool:
        """True iff an edge goes from *node_u* to *node_v* (either way if undirected).

        Unlike the node accessors this never raises for unknown nodes.
        """
        check_not_none(node_u, "node_u")
        check_not_none(node_v, "node_v")
        return node_u in self.nodes() and node_v in self.successors(node_u)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(is_directed={self.is_directed()}, "
            f"allows_self_loops={self.allows_self_loops()}, "
            f"nodes={list(self.nodes())!r}, edges={self._edges_repr()})"
        )

    def _edges_repr(self) -> str:
        return repr(list(self.edges()))


class Graph(BaseGraph):
    """A graph whose edges are anonymous node pairs.

    Two graphs are equal when they have the same directedness, the same
    nodes and the same edges. Self-loop policy and element orders do not
    take part in equality.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self.is_directed() == other.is_directed()
            and self.nodes() == other.nodes()
            and self.edges() == other.edges()
        )

    def __hash__(self) -> int:
        return hash((frozenset(self.nodes()), frozenset(self.edges())))


class ValueGraph(BaseGraph):
    """A graph with a value attached to every edge.

    Equality is Graph equality plus equal values on corresponding
    edges. The hash ignores values, so values need not be hashable.
    """

    @abstractmethod
    def edge_value_or_default(self, node_u: Any, node_v: Any, default: Any) -> Any:
        """Value of the edge from *node_u* to *node_v*, or *default* if not connected.

        Raises:
            UnknownElementError: If either node is not in the graph.
        """

    def edge_value(self, node_u: Any, node_v: Any) -> Any:
        """Value of the edge from *node_u* to *node_v*, or None if not connected."""
        return self.edge_value_or_default(node_u, node_v, None)

    def as_graph(self) -> Graph:
        """Live read-only Graph view of this graph's connectivity."""
        return ForwardingGraph(self)

    def _edge_value_map(self) -> dict[EndpointPair, Any]:
        return {
            pair: self.edge_value_or_default(pair.node_u, pair.node_v, None)
            for pair in self.edges()
        }

    def _edges_repr(self) -> str:
        return repr(self._edge_value_map())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueGraph):
            return NotImplemented
        return (
            self.is_directed() == other.is_directed()
            and self.nodes() == other.nodes()
            and self._edge_value_map() == other._edge_value_map()
        )

    def __hash__(self) -> int:
        return hash((frozenset(self.nodes()), frozenset(self.edges())))


class MutableGraph(Graph):
    """A Graph that can be changed after construction.

    No internal synchronization is performed: callers sharing an
    instance between threads must serialize writers and exclude readers
    during writes.
    """

    @abstractmethod
    def add_node(self, node: Any) -> bool:
        """Add *node* if absent. Returns True if the graph changed."""

    @abstractmethod
    def put_edge(self, node_u: Any, node_v: Any) -> bool:
        """Connect *node_u* to *node_v*, adding either node if absent.

        Returns True if the graph changed.

        Raises:
            SelfLoopNotAllowedError: If the nodes are equal and self-loops
                are disallowed; the graph is left unchanged.
        """

    @abstractmethod
    def remove_node(self, node: Any) -> bool:
        """Remove *node* and every edge touching it. Returns True if it existed."""

    @abstractmethod
    def remove_edge(self, node_u: Any, node_v: Any) -> bool:
        """Remove the edge from *node_u* to *node_v*. Returns True if it existed."""


class MutableValueGraph(ValueGraph):
    """A ValueGraph that can be changed after construction.

    Same threading caveats as MutableGraph.
    """

    @abstractmethod
    def add_node(self, node: Any) -> bool:
        """Add *node* if absent. Returns True if the graph changed."""

    @abstractmethod
    def put_edge_value(self, node_u: Any, node_v: Any, value: Any) -> Any:
        """Connect *node_u* to *node_v* with *value*, replacing any existing value.

        Returns:
            The previous value, or None if the nodes were not connected.

        Raises:
            NullElementError: If *value* is None.
            SelfLoopNotAllowedError: If the nodes are equal and self-loops
                are disallowed.
        """

    @abstractmethod
    def remove_node(self, node: Any) -> bool:
        """Remove *node* and every edge touching it. Returns True if it existed."""

    @abstractmethod
    def remove_edge(self, node_u: Any, node_v: Any) -> Any:
        """Remove the edge from *node_u* to *node_v*; return its value or None."""


class ForwardingGraph(Graph):
    """Graph that forwards every query to *delegate*.

    The delegate may be any BaseGraph; this is how a ValueGraph is
    exposed as a plain Graph.
    """

    def __init__(self, delegate: BaseGraph) -> None:
        self._delegate = delegate

    def is_directed(self) -> bool:
        return self._delegate.is_directed()

    def allows_self_loops(self) -> bool:
        return self._delegate.allows_self_loops()

    def node_order(self) -> ElementOrder:
        return self._delegate.node_order()

    def incident_edge_order(self) -> ElementOrder:
        return self._delegate.incident_edge_order()

    def nodes(self) -> GraphView:
        return self._delegate.nodes()

    def edges(self) -> GraphView:
        return self._delegate.edges()

    def adjacent_nodes(self, node: Any) -> GraphView:
        return self._delegate.adjacent_nodes(node)

    def predecessors(self, node: Any) -> GraphView:
        return self._delegate.predecessors(node)

    def successors(self, node: Any) -> GraphView:
        return self._delegate.successors(node)

    def incident_edges(self, node: Any) -> GraphView:
        return self._delegate.incident_edges(node)

    def degree(self, node: Any) -> int:
        return self._delegate.degree(node)

    def in_degree(self, node: Any) -> int:
        return self._delegate.in_degree(node)

    def out_degree(self, node: Any) -> int:
        return self._delegate.out_degree(node)

    def has_edge_connecting(self, node_u: Any, node_v: Any) -> bool:
        return self._delegate.has_edge_connecting(node_u, node_v)

    def _edge_count(self) -> int:
        return self._delegate._edge_count()

    def _modification_count(self) -> int:
        return self._delegate._modification_count()


__all__ = [
    "BaseGraph",
    "Graph",
    "ValueGraph",
    "MutableGraph",
    "MutableValueGraph",
    "ForwardingGraph",
]
