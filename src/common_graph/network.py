"""Network interface -- graphs whose edges are first-class objects.

Each edge is a caller-supplied hashable value that identifies exactly
one connection, so several distinct edges may join the same pair of
nodes when parallel edges are allowed.

Public API:
    Network: Read-only queries over nodes and identified edges.
    MutableNetwork: Network plus add/remove operations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any

from .element_order import ElementOrder
from .endpoints import EndpointPair
from .exceptions import MULTIPLE_EDGES_CONNECTING, AmbiguousEdgeError, check_not_none
from .graph import Graph
from .views import GraphView


def _unique(iterable: Iterable[Any]) -> Iterator[Any]:
    """Yield elements of *iterable* once each, keeping first-seen order."""
    seen = set()
    for element in iterable:
        if element not in seen:
            seen.add(element)
            yield element


class Network(ABC):
    """A graph whose edges are unique, caller-supplied objects.

    Node and edge accessors raise UnknownElementError for elements not
    in the network and NullElementError for None.

    Two networks are equal when they have the same directedness, the
    same nodes, and every edge connects the same endpoints in both.
    """

    # ── configuration ─────────────────────────────────────────

    @abstractmethod
    def is_directed(self) -> bool:
        ...

    @abstractmethod
    def allows_parallel_edges(self) -> bool:
        ...

    @abstractmethod
    def allows_self_loops(self) -> bool:
        ...

    @abstractmethod
    def node_order(self) -> ElementOrder:
        ...

    @abstractmethod
    def edge_order(self) -> ElementOrder:
        """Iteration order of ``edges()``."""

    @abstractmethod
    def incident_edge_order(self) -> ElementOrder:
        """Iteration order of ``in_edges``, ``out_edges`` and ``incident_edges``."""

    # ── primitives ────────────────────────────────────────────

    @abstractmethod
    def nodes(self) -> GraphView:
        ...

    @abstractmethod
    def edges(self) -> GraphView:
        ...

    @abstractmethod
    def adjacent_nodes(self, node: Any) -> GraphView:
        ...

    @abstractmethod
    def predecessors(self, node: Any) -> GraphView:
        ...

    @abstractmethod
    def successors(self, node: Any) -> GraphView:
        ...

    @abstractmethod
    def incident_edges(self, node: Any) -> GraphView:
        """Edges touching *node*; a self-loop appears once."""

    @abstractmethod
    def in_edges(self, node: Any) -> GraphView:
        """Edges arriving at *node* (all incident edges if undirected)."""

    @abstractmethod
    def out_edges(self, node: Any) -> GraphView:
        """Edges leaving *node* (all incident edges if undirected)."""

    @abstractmethod
    def incident_nodes(self, edge: Any) -> EndpointPair:
        """Endpoints of *edge*, ordered iff the network is directed."""

    @abstractmethod
    def edges_connecting(self, node_u: Any, node_v: Any) -> GraphView:
        """Every edge from *node_u* to *node_v* (either way if undirected)."""

    def _modification_count(self) -> int:
        return 0

    # ── derived queries ───────────────────────────────────────

    def adjacent_edges(self, edge: Any) -> GraphView:
        """Edges sharing an endpoint with *edge*, excluding *edge* itself."""
        endpoints = self.incident_nodes(edge)

        def iterate() -> Iterator[Any]:
            for node in endpoints:
                for other in self.incident_edges(node):
                    if other != edge:
                        yield other

        def contains(other: object) -> bool:
            if other is None or other == edge:
                return False
            return any(other in self.incident_edges(node) for node in endpoints)

        return GraphView(
            self,
            iterate=lambda: _unique(iterate()),
            contains=contains,
            size=lambda: sum(1 for _ in _unique(iterate())),
        )

    def degree(self, node: Any) -> int:
        """Number of edge endpoints at *node*; parallel edges each count."""
        if self.is_directed():
            return len(self.in_edges(node)) + len(self.out_edges(node))
        # a self-loop touches the node twice
        return len(self.incident_edges(node)) + len(self.edges_connecting(node, node))

    def in_degree(self, node: Any) -> int:
        if self.is_directed():
            return len(self.in_edges(node))
        return self.degree(node)

    def out_degree(self, node: Any) -> int:
        if self.is_directed():
            return len(self.out_edges(node))
        return self.degree(node)

    def has_edge_connecting(self, node_u: Any, node_v: Any) -> bool:
        """True iff at least one edge goes from *node_u* to *node_v*.

        Never raises for unknown nodes.
        """
        check_not_none(node_u, "node_u")
        check_not_none(node_v, "node_v")
        return node_u in self.nodes() and node_v in self.successors(node_u)

    def edge_connecting_or_default(self, node_u: Any, node_v: Any, default: Any) -> Any:
        """The single edge from *node_u* to *node_v*, or *default* if there is none.

        Raises:
            AmbiguousEdgeError: If parallel edges connect the two nodes.
        """
        connecting = self.edges_connecting(node_u, node_v)
        count = len(connecting)
        if count == 0:
            return default
        if count > 1:
            raise AmbiguousEdgeError(MULTIPLE_EDGES_CONNECTING % (node_u, node_v))
        return next(iter(connecting))

    def edge_connecting(self, node_u: Any, node_v: Any) -> Any:
        """The single edge from *node_u* to *node_v*, or None if there is none."""
        return self.edge_connecting_or_default(node_u, node_v, None)

    def as_graph(self) -> Graph:
        """Live read-only Graph view in which parallel edges collapse into one."""
        return _NetworkAsGraph(self)

    # ── equality ──────────────────────────────────────────────

    def _edge_incident_nodes_map(self) -> dict[Any, EndpointPair]:
        return {edge: self.incident_nodes(edge) for edge in self.edges()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Network):
            return NotImplemented
        return (
            self.is_directed() == other.is_directed()
            and self.nodes() == other.nodes()
            and self._edge_incident_nodes_map() == other._edge_incident_nodes_map()
        )

    def __hash__(self) -> int:
        return hash(
            (frozenset(self.nodes()), frozenset(self._edge_incident_nodes_map().items()))
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(is_directed={self.is_directed()}, "
            f"allows_parallel_edges={self.allows_parallel_edges()}, "
            f"allows_self_loops={self.allows_self_loops()}, "
            f"nodes={list(self.nodes())!r}, edges={self._edge_incident_nodes_map()!r})"
        )


class MutableNetwork(Network):
    """A Network that can be changed after construction.

    No internal synchronization is performed; see MutableGraph.
    """

    @abstractmethod
    def add_node(self, node: Any) -> bool:
        """Add *node* if absent. Returns True if the network changed."""

    @abstractmethod
    def add_edge(self, edge: Any, node_u: Any, node_v: Any) -> bool:
        """Add *edge* from *node_u* to *node_v*, adding either node if absent.

        Returns False, changing nothing, if *edge* already connects exactly
        these endpoints.

        Raises:
            EdgeReusedError: If *edge* already connects different endpoints.
            ParallelEdgeNotAllowedError: If another edge already connects
                the nodes and parallel edges are disallowed.
            SelfLoopNotAllowedError: If the nodes are equal and self-loops
                are disallowed.
        """

    @abstractmethod
    def remove_node(self, node: Any) -> bool:
        """Remove *node* and every edge touching it. Returns True if it existed."""

    @abstractmethod
    def remove_edge(self, edge: Any) -> bool:
        """Remove *edge*. Returns True if it existed; absent edges are a no-op."""


class _NetworkAsGraph(Graph):
    """Connectivity of a Network; degrees count each neighbour once."""

    def __init__(self, network: Network) -> None:
        self._network = network

    def is_directed(self) -> bool:
        return self._network.is_directed()

    def allows_self_loops(self) -> bool:
        return self._network.allows_self_loops()

    def node_order(self) -> ElementOrder:
        return self._network.node_order()

    def incident_edge_order(self) -> ElementOrder:
        # collapsed edges have no order of their own
        return ElementOrder.unordered()

    def nodes(self) -> GraphView:
        return self._network.nodes()

    def adjacent_nodes(self, node: Any) -> GraphView:
        return self._network.adjacent_nodes(node)

    def predecessors(self, node: Any) -> GraphView:
        return self._network.predecessors(node)

    def successors(self, node: Any) -> GraphView:
        return self._network.successors(node)

    def has_edge_connecting(self, node_u: Any, node_v: Any) -> bool:
        return self._network.has_edge_connecting(node_u, node_v)

    def _modification_count(self) -> int:
        return self._network._modification_count()


__all__ = ["Network", "MutableNetwork"]
