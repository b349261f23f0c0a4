"""Standard adjacency-map implementation of Network.

Storage is a node -> NetworkConnections map plus an edge -> reference
node map; the reference node is the source of a directed edge or the
first endpoint given for an undirected one.

Public API:
    StandardNetwork: Read-only Network over adjacency storage.
    StandardMutableNetwork: Mutable Network.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from .config import GraphConfig
from .connections import (
    DirectedNetworkConnections,
    NetworkConnections,
    UndirectedNetworkConnections,
)
from .element_order import ElementOrder
from .endpoints import EndpointPair
from .exceptions import (
    EDGE_NOT_IN_GRAPH,
    NODE_NOT_IN_GRAPH,
    NODE_REMOVED_FROM_GRAPH,
    PARALLEL_EDGES_NOT_ALLOWED,
    REUSING_EDGE,
    SELF_LOOPS_NOT_ALLOWED,
    EdgeReusedError,
    IterationInvalidatedError,
    ParallelEdgeNotAllowedError,
    SelfLoopNotAllowedError,
    UnknownElementError,
    check_not_none,
)
from .network import MutableNetwork, Network
from .views import GraphView


class StandardNetwork(Network):
    """Network over per-node incident-edge maps.

    Args:
        config: Constraints and orders for this network.
        node_connections: Existing node storage to adopt, or None.
        edge_to_reference_node: Existing edge storage to adopt, or None.
    """

    def __init__(
        self,
        config: GraphConfig,
        node_connections: MutableMapping[Any, NetworkConnections] | None = None,
        edge_to_reference_node: MutableMapping[Any, Any] | None = None,
    ) -> None:
        self._config = config
        if node_connections is None:
            node_connections = config.node_order.create_map(config.expected_node_count)
        if edge_to_reference_node is None:
            edge_to_reference_node = config.edge_order.create_map(config.expected_edge_count)
        self._node_connections = node_connections
        self._edge_to_reference_node = edge_to_reference_node
        self._mod_count = 0

    @property
    def config(self) -> GraphConfig:
        return self._config

    def is_directed(self) -> bool:
        return self._config.directed

    def allows_parallel_edges(self) -> bool:
        return self._config.allows_parallel_edges

    def allows_self_loops(self) -> bool:
        return self._config.allows_self_loops

    def node_order(self) -> ElementOrder:
        return self._config.node_order

    def edge_order(self) -> ElementOrder:
        return self._config.edge_order

    def incident_edge_order(self) -> ElementOrder:
        return self._config.incident_edge_order

    def nodes(self) -> GraphView:
        return GraphView.of_mapping(self, lambda: self._node_connections)

    def edges(self) -> GraphView:
        return GraphView.of_mapping(self, lambda: self._edge_to_reference_node)

    def adjacent_nodes(self, node: Any) -> GraphView:
        self._check_node(node)
        return GraphView.of_mapping(self, lambda: self._view_connections(node).adjacent_counts)

    def predecessors(self, node: Any) -> GraphView:
        self._check_node(node)
        return GraphView.of_mapping(
            self, lambda: self._view_connections(node).predecessor_counts
        )

    def successors(self, node: Any) -> GraphView:
        self._check_node(node)
        return GraphView.of_mapping(self, lambda: self._view_connections(node).successor_counts)

    def incident_edges(self, node: Any) -> GraphView:
        self._check_node(node)
        return GraphView.of_mapping(
            self, lambda: self._view_connections(node).incident_edge_map
        )

    def in_edges(self, node: Any) -> GraphView:
        self._check_node(node)
        return GraphView.of_mapping(self, lambda: self._view_connections(node).in_edge_map)

    def out_edges(self, node: Any) -> GraphView:
        self._check_node(node)
        return GraphView.of_mapping(self, lambda: self._view_connections(node).out_edge_map)

    def incident_nodes(self, edge: Any) -> EndpointPair:
        node_u = self._check_edge(edge)
        node_v = self._node_connections[node_u].adjacent_node(edge)
        return EndpointPair.of(self, node_u, node_v)

    def edges_connecting(self, node_u: Any, node_v: Any) -> GraphView:
        self._check_node(node_u)
        self._check_node(node_v)

        def iterate():
            return self._view_connections(node_u).edges_connecting(node_v)

        def contains(edge: object) -> bool:
            out_edges = self._view_connections(node_u).out_edge_map
            return edge is not None and edge in out_edges and out_edges[edge] == node_v

        return GraphView(
            self, iterate, contains, size=lambda: sum(1 for _ in iterate())
        )

    def has_edge_connecting(self, node_u: Any, node_v: Any) -> bool:
        check_not_none(node_u, "node_u")
        check_not_none(node_v, "node_v")
        connections = self._node_connections.get(node_u)
        return connections is not None and node_v in connections.successor_counts

    def _modification_count(self) -> int:
        return self._mod_count

    def _check_node(self, node: Any) -> NetworkConnections:
        check_not_none(node, "node")
        connections = self._node_connections.get(node)
        if connections is None:
            raise UnknownElementError(NODE_NOT_IN_GRAPH % (node,))
        return connections

    def _check_edge(self, edge: Any) -> Any:
        check_not_none(edge, "edge")
        if edge not in self._edge_to_reference_node:
            raise UnknownElementError(EDGE_NOT_IN_GRAPH % (edge,))
        return self._edge_to_reference_node[edge]

    def _view_connections(self, node: Any) -> NetworkConnections:
        connections = self._node_connections.get(node)
        if connections is None:
            raise IterationInvalidatedError(NODE_REMOVED_FROM_GRAPH % (node,))
        return connections


class StandardMutableNetwork(StandardNetwork, MutableNetwork):
    """Mutable Network; every public mutation validates before changing state."""

    def __init__(self, config: GraphConfig) -> None:
        super().__init__(config)

    def add_node(self, node: Any) -> bool:
        check_not_none(node, "node")
        if node in self._node_connections:
            return False
        self._add_node_internal(node)
        return True

    def _add_node_internal(self, node: Any) -> NetworkConnections:
        order = self._config.incident_edge_order
        if self._config.directed:
            connections = DirectedNetworkConnections.of(order)
        else:
            connections = UndirectedNetworkConnections.of(order)
        self._node_connections[node] = connections
        self._mod_count += 1
        return connections

    def add_edge(self, edge: Any, node_u: Any, node_v: Any) -> bool:
        check_not_none(edge, "edge")
        check_not_none(node_u, "node_u")
        check_not_none(node_v, "node_v")

        if edge in self._edge_to_reference_node:
            existing = self.incident_nodes(edge)
            requested = EndpointPair.of(self, node_u, node_v)
            if existing != requested:
                raise EdgeReusedError(REUSING_EDGE % (edge, existing, requested))
            return False

        if not self._config.allows_self_loops and node_u == node_v:
            raise SelfLoopNotAllowedError(SELF_LOOPS_NOT_ALLOWED % (node_u,))
        connections_u = self._node_connections.get(node_u)
        if (
            not self._config.allows_parallel_edges
            and connections_u is not None
            and node_v in connections_u.successor_counts
        ):
            raise ParallelEdgeNotAllowedError(PARALLEL_EDGES_NOT_ALLOWED % (node_u, node_v))

        if connections_u is None:
            connections_u = self._add_node_internal(node_u)
        connections_u.add_out_edge(edge, node_v)
        connections_v = self._node_connections.get(node_v)
        if connections_v is None:
            connections_v = self._add_node_internal(node_v)
        connections_v.add_in_edge(edge, node_u)
        self._edge_to_reference_node[edge] = node_u
        self._mod_count += 1
        return True

    def remove_node(self, node: Any) -> bool:
        check_not_none(node, "node")
        connections = self._node_connections.get(node)
        if connections is None:
            return False
        for edge in list(connections.incident_edge_map):
            self._remove_edge_internal(edge)
        del self._node_connections[node]
        self._mod_count += 1
        return True

    def remove_edge(self, edge: Any) -> bool:
        check_not_none(edge, "edge")
        if edge not in self._edge_to_reference_node:
            return False
        self._remove_edge_internal(edge)
        return True

    def _remove_edge_internal(self, edge: Any) -> None:
        node_u = self._edge_to_reference_node[edge]
        connections_u = self._node_connections[node_u]
        node_v = connections_u.adjacent_node(edge)
        connections_u.remove_out_edge(edge)
        self._node_connections[node_v].remove_in_edge(edge)
        del self._edge_to_reference_node[edge]
        self._mod_count += 1


__all__ = ["StandardNetwork", "StandardMutableNetwork"]
