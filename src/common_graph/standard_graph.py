"""Standard adjacency-map implementations of Graph and ValueGraph.

Storage is a node -> GraphConnections map ordered by the configured
node order; each connections object holds that node's neighbours in the
configured incident-edge order. A Graph is a ValueGraph whose every
edge carries the same marker value.

Public API:
    StandardValueGraph: Read-only ValueGraph over adjacency storage.
    StandardMutableValueGraph: Mutable ValueGraph.
    StandardMutableGraph: Mutable Graph backed by a StandardMutableValueGraph.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from enum import Enum
from typing import Any

from .config import GraphConfig
from .connections import (
    DirectedGraphConnections,
    GraphConnections,
    UndirectedGraphConnections,
)
from .element_order import ElementOrder
from .exceptions import (
    NODE_NOT_IN_GRAPH,
    NODE_REMOVED_FROM_GRAPH,
    SELF_LOOPS_NOT_ALLOWED,
    IterationInvalidatedError,
    SelfLoopNotAllowedError,
    UnknownElementError,
    check_not_none,
)
from .graph import ForwardingGraph, MutableGraph, MutableValueGraph, ValueGraph
from .views import GraphView


class Presence(Enum):
    """Edge value used when a ValueGraph backs a plain Graph."""

    EDGE_EXISTS = "edge_exists"


class StandardValueGraph(ValueGraph):
    """ValueGraph over a node -> GraphConnections map.

    Args:
        config: Constraints and orders for this graph.
        node_connections: Existing storage to adopt; a fresh empty map
            in ``config.node_order`` when None.
        edge_count: Number of edges already present in *node_connections*.
    """

    def __init__(
        self,
        config: GraphConfig,
        node_connections: MutableMapping[Any, GraphConnections] | None = None,
        edge_count: int = 0,
    ) -> None:
        self._config = config
        if node_connections is None:
            node_connections = config.node_order.create_map(config.expected_node_count)
        self._node_connections = node_connections
        self._edge_count_value = edge_count
        self._mod_count = 0

    @property
    def config(self) -> GraphConfig:
        return self._config

    def is_directed(self) -> bool:
        return self._config.directed

    def allows_self_loops(self) -> bool:
        return self._config.allows_self_loops

    def node_order(self) -> ElementOrder:
        return self._config.node_order

    def incident_edge_order(self) -> ElementOrder:
        return self._config.incident_edge_order

    def nodes(self) -> GraphView:
        return GraphView.of_mapping(self, lambda: self._node_connections)

    def adjacent_nodes(self, node: Any) -> GraphView:
        self._check_node(node)
        return GraphView.of_mapping(self, lambda: self._view_connections(node).adjacent_map)

    def predecessors(self, node: Any) -> GraphView:
        self._check_node(node)
        return GraphView.of_mapping(self, lambda: self._view_connections(node).predecessor_map)

    def successors(self, node: Any) -> GraphView:
        self._check_node(node)
        return GraphView.of_mapping(self, lambda: self._view_connections(node).successor_map)

    def has_edge_connecting(self, node_u: Any, node_v: Any) -> bool:
        check_not_none(node_u, "node_u")
        check_not_none(node_v, "node_v")
        connections = self._node_connections.get(node_u)
        return connections is not None and node_v in connections.successor_map

    def edge_value_or_default(self, node_u: Any, node_v: Any, default: Any) -> Any:
        connections = self._check_node(node_u)
        self._check_node(node_v)
        value = connections.value(node_v)
        return default if value is None else value

    def _edge_count(self) -> int:
        return self._edge_count_value

    def _modification_count(self) -> int:
        return self._mod_count

    def _check_node(self, node: Any) -> GraphConnections:
        check_not_none(node, "node")
        connections = self._node_connections.get(node)
        if connections is None:
            raise UnknownElementError(NODE_NOT_IN_GRAPH % (node,))
        return connections

    def _view_connections(self, node: Any) -> GraphConnections:
        connections = self._node_connections.get(node)
        if connections is None:
            raise IterationInvalidatedError(NODE_REMOVED_FROM_GRAPH % (node,))
        return connections


class StandardMutableValueGraph(StandardValueGraph, MutableValueGraph):
    """Mutable ValueGraph; every public mutation validates before changing state."""

    def __init__(self, config: GraphConfig) -> None:
        super().__init__(config)

    def add_node(self, node: Any) -> bool:
        check_not_none(node, "node")
        if node in self._node_connections:
            return False
        self._add_node_internal(node)
        return True

    def _add_node_internal(self, node: Any) -> GraphConnections:
        order = self._config.incident_edge_order
        if self._config.directed:
            connections = DirectedGraphConnections.of(order)
        else:
            connections = UndirectedGraphConnections.of(order)
        self._node_connections[node] = connections
        self._mod_count += 1
        return connections

    def _connections_or_add(self, node: Any) -> GraphConnections:
        connections = self._node_connections.get(node)
        if connections is None:
            connections = self._add_node_internal(node)
        return connections

    def put_edge_value(self, node_u: Any, node_v: Any, value: Any) -> Any:
        check_not_none(node_u, "node_u")
        check_not_none(node_v, "node_v")
        check_not_none(value, "value")
        if not self._config.allows_self_loops and node_u == node_v:
            raise SelfLoopNotAllowedError(SELF_LOOPS_NOT_ALLOWED % (node_u,))

        previous = self._connections_or_add(node_u).add_successor(node_v, value)
        self._connections_or_add(node_v).add_predecessor(node_u, value)
        if previous is None:
            self._edge_count_value += 1
            self._mod_count += 1
        return previous

    def remove_node(self, node: Any) -> bool:
        check_not_none(node, "node")
        connections = self._node_connections.get(node)
        if connections is None:
            return False

        if self._config.allows_self_loops and connections.remove_successor(node) is not None:
            connections.remove_predecessor(node)
            self._edge_count_value -= 1

        for successor in list(connections.successor_map):
            self._node_connections[successor].remove_predecessor(node)
            self._edge_count_value -= 1
        # undirected: predecessors are the successors already handled
        if self._config.directed:
            for predecessor in list(connections.predecessor_map):
                self._node_connections[predecessor].remove_successor(node)
                self._edge_count_value -= 1

        del self._node_connections[node]
        self._mod_count += 1
        return True

    def remove_edge(self, node_u: Any, node_v: Any) -> Any:
        check_not_none(node_u, "node_u")
        check_not_none(node_v, "node_v")
        connections_u = self._node_connections.get(node_u)
        connections_v = self._node_connections.get(node_v)
        if connections_u is None or connections_v is None:
            return None

        previous = connections_u.remove_successor(node_v)
        if previous is not None:
            connections_v.remove_predecessor(node_u)
            self._edge_count_value -= 1
            self._mod_count += 1
        return previous


class StandardMutableGraph(ForwardingGraph, MutableGraph):
    """Mutable Graph stored as a ValueGraph with a marker value on every edge."""

    def __init__(self, config: GraphConfig) -> None:
        super().__init__(StandardMutableValueGraph(config))

    @property
    def config(self) -> GraphConfig:
        return self._delegate.config

    def add_node(self, node: Any) -> bool:
        return self._delegate.add_node(node)

    def put_edge(self, node_u: Any, node_v: Any) -> bool:
        return self._delegate.put_edge_value(node_u, node_v, Presence.EDGE_EXISTS) is None

    def remove_node(self, node: Any) -> bool:
        return self._delegate.remove_node(node)

    def remove_edge(self, node_u: Any, node_v: Any) -> bool:
        return self._delegate.remove_edge(node_u, node_v) is not None


__all__ = [
    "Presence",
    "StandardValueGraph",
    "StandardMutableValueGraph",
    "StandardMutableGraph",
]
