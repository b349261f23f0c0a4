"""Immutable Graph, ValueGraph and Network.

Instances are produced only by ``copy_of`` or by the immutable builders
returned from ``GraphBuilder.immutable()`` and friends. Construction
copies the source into fresh insertion-ordered storage that is never
written again, so:

- no node, edge or edge value can be added, removed or replaced;
- every iteration yields the order observed while copying;
- concurrent unsynchronized reads from any number of threads are safe.

The classes cannot be subclassed and their constructors reject direct
calls, so no other type can claim these guarantees.

Public API:
    ImmutableGraph: Frozen Graph.
    ImmutableValueGraph: Frozen ValueGraph.
    ImmutableNetwork: Frozen Network.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .config import GraphConfig
from .connections import (
    DirectedGraphConnections,
    DirectedNetworkConnections,
    GraphConnections,
    UndirectedGraphConnections,
    UndirectedNetworkConnections,
)
from .element_order import ElementOrder
from .graph import BaseGraph, ForwardingGraph, Graph, ValueGraph
from .network import Network
from .standard_graph import (
    Presence,
    StandardMutableGraph,
    StandardMutableValueGraph,
    StandardValueGraph,
)
from .standard_network import StandardMutableNetwork, StandardNetwork

logger = logging.getLogger(__name__)

_CONSTRUCTION_TOKEN = object()


def _check_token(cls: type, token: object) -> None:
    if token is not _CONSTRUCTION_TOKEN:
        raise TypeError(
            f"{cls.__name__} cannot be constructed directly; "
            f"use {cls.__name__}.copy_of() or an immutable builder"
        )


def _refuse_subclass(cls: type) -> None:
    raise TypeError(f"{cls.__mro__[1].__name__} cannot be subclassed (attempted by {cls.__name__})")


def _observed_order(order: ElementOrder) -> ElementOrder:
    """Order reported by a frozen copy: sorted stays sorted, anything else is what was seen."""
    return order if order.is_sorted else ElementOrder.insertion()


# ---------------------------------------------------------------------------
# Snapshot helpers
# ---------------------------------------------------------------------------


def _freeze_graph_connections(
    graph: BaseGraph, value_of: Callable[[Any, Any], Any]
) -> dict[Any, GraphConnections]:
    node_connections: dict[Any, GraphConnections] = {}
    for node in graph.nodes():
        if graph.is_directed():
            predecessors = {p: value_of(p, node) for p in graph.predecessors(node)}
            successors = {s: value_of(node, s) for s in graph.successors(node)}
            node_connections[node] = DirectedGraphConnections.of_immutable(
                predecessors, successors, graph.adjacent_nodes(node)
            )
        else:
            adjacent = {a: value_of(node, a) for a in graph.adjacent_nodes(node)}
            node_connections[node] = UndirectedGraphConnections.of_immutable(adjacent)
    return node_connections


def _frozen_graph_config(graph: BaseGraph) -> GraphConfig:
    return GraphConfig(
        directed=graph.is_directed(),
        allows_self_loops=graph.allows_self_loops(),
        node_order=_observed_order(graph.node_order()),
        incident_edge_order=_observed_order(graph.incident_edge_order()),
    )


def _frozen_value_graph(graph: BaseGraph, value_of: Callable[[Any, Any], Any]) -> tuple:
    config = _frozen_graph_config(graph)
    node_connections = _freeze_graph_connections(graph, value_of)
    edge_count = len(graph.edges())
    logger.debug(
        "Froze %s graph with %d nodes and %d edges",
        "directed" if config.directed else "undirected",
        len(node_connections),
        edge_count,
    )
    return config, node_connections, edge_count


# ---------------------------------------------------------------------------
# ImmutableValueGraph
# ---------------------------------------------------------------------------


class ImmutableValueGraph(StandardValueGraph):
    """A ValueGraph that can never change after construction."""

    def __init_subclass__(cls, **kwargs):
        _refuse_subclass(cls)

    def __init__(
        self,
        config: GraphConfig,
        node_connections: dict[Any, GraphConnections],
        edge_count: int,
        *,
        _token: object = None,
    ) -> None:
        _check_token(ImmutableValueGraph, _token)
        super().__init__(config, node_connections, edge_count)

    @classmethod
    def copy_of(cls, graph: ValueGraph) -> ImmutableValueGraph:
        """Frozen copy of *graph*; an ImmutableValueGraph is returned as is."""
        if isinstance(graph, ImmutableValueGraph):
            return graph
        if not isinstance(graph, ValueGraph):
            raise TypeError(f"expected a ValueGraph, got {type(graph).__name__}")
        config, node_connections, edge_count = _frozen_value_graph(
            graph, lambda u, v: graph.edge_value_or_default(u, v, None)
        )
        return cls(config, node_connections, edge_count, _token=_CONSTRUCTION_TOKEN)

    def as_graph(self) -> ImmutableGraph:
        return ImmutableGraph(self, _token=_CONSTRUCTION_TOKEN)

    class Builder:
        """Accumulates nodes and valued edges, then freezes them with ``build()``.

        Constraint violations raise immediately from the offending call.
        The builder can keep being used after ``build()``; each call
        returns an independent snapshot.
        """

        def __init__(self, config: GraphConfig) -> None:
            self._mutable_value_graph = StandardMutableValueGraph(config)

        def add_node(self, node: Any) -> ImmutableValueGraph.Builder:
            self._mutable_value_graph.add_node(node)
            return self

        def put_edge_value(self, node_u: Any, node_v: Any, value: Any) -> ImmutableValueGraph.Builder:
            self._mutable_value_graph.put_edge_value(node_u, node_v, value)
            return self

        def build(self) -> ImmutableValueGraph:
            return ImmutableValueGraph.copy_of(self._mutable_value_graph)


# ---------------------------------------------------------------------------
# ImmutableGraph
# ---------------------------------------------------------------------------


class ImmutableGraph(ForwardingGraph):
    """A Graph that can never change after construction."""

    def __init_subclass__(cls, **kwargs):
        _refuse_subclass(cls)

    def __init__(self, delegate: BaseGraph, *, _token: object = None) -> None:
        _check_token(ImmutableGraph, _token)
        super().__init__(delegate)

    @classmethod
    def copy_of(cls, graph: Graph) -> ImmutableGraph:
        """Frozen copy of *graph*; an ImmutableGraph is returned as is."""
        if isinstance(graph, ImmutableGraph):
            return graph
        if not isinstance(graph, Graph):
            raise TypeError(f"expected a Graph, got {type(graph).__name__}")
        config, node_connections, edge_count = _frozen_value_graph(
            graph, lambda u, v: Presence.EDGE_EXISTS
        )
        backing = StandardValueGraph(config, node_connections, edge_count)
        return cls(backing, _token=_CONSTRUCTION_TOKEN)

    class Builder:
        """Accumulates nodes and edges, then freezes them with ``build()``.

        Constraint violations raise immediately from the offending call.
        """

        def __init__(self, config: GraphConfig) -> None:
            self._mutable_graph = StandardMutableGraph(config)

        def add_node(self, node: Any) -> ImmutableGraph.Builder:
            self._mutable_graph.add_node(node)
            return self

        def put_edge(self, node_u: Any, node_v: Any) -> ImmutableGraph.Builder:
            self._mutable_graph.put_edge(node_u, node_v)
            return self

        def build(self) -> ImmutableGraph:
            return ImmutableGraph.copy_of(self._mutable_graph)


# ---------------------------------------------------------------------------
# ImmutableNetwork
# ---------------------------------------------------------------------------


class ImmutableNetwork(StandardNetwork):
    """A Network that can never change after construction."""

    def __init_subclass__(cls, **kwargs):
        _refuse_subclass(cls)

    def __init__(
        self,
        config: GraphConfig,
        node_connections: dict,
        edge_to_reference_node: dict,
        *,
        _token: object = None,
    ) -> None:
        _check_token(ImmutableNetwork, _token)
        super().__init__(config, node_connections, edge_to_reference_node)
        self._as_graph = ImmutableGraph.copy_of(super().as_graph())

    @classmethod
    def copy_of(cls, network: Network) -> ImmutableNetwork:
        """Frozen copy of *network*; an ImmutableNetwork is returned as is."""
        if isinstance(network, ImmutableNetwork):
            return network
        if not isinstance(network, Network):
            raise TypeError(f"expected a Network, got {type(network).__name__}")

        node_connections: dict = {}
        for node in network.nodes():
            if network.is_directed():
                in_edges = {e: network.incident_nodes(e).source() for e in network.in_edges(node)}
                out_edges = {e: network.incident_nodes(e).target() for e in network.out_edges(node)}
                node_connections[node] = DirectedNetworkConnections.of_immutable(
                    in_edges,
                    out_edges,
                    network.incident_edges(node),
                    network.predecessors(node),
                    network.successors(node),
                    network.adjacent_nodes(node),
                )
            else:
                incident = {
                    e: network.incident_nodes(e).adjacent_node(node)
                    for e in network.incident_edges(node)
                }
                node_connections[node] = UndirectedNetworkConnections.of_immutable(
                    incident, network.adjacent_nodes(node)
                )
        edge_to_reference_node = {e: network.incident_nodes(e).node_u for e in network.edges()}

        config = GraphConfig(
            directed=network.is_directed(),
            allows_self_loops=network.allows_self_loops(),
            allows_parallel_edges=network.allows_parallel_edges(),
            node_order=_observed_order(network.node_order()),
            incident_edge_order=_observed_order(network.incident_edge_order()),
            edge_order=_observed_order(network.edge_order()),
        )
        logger.debug(
            "Froze %s network with %d nodes and %d edges",
            "directed" if config.directed else "undirected",
            len(node_connections),
            len(edge_to_reference_node),
        )
        return cls(config, node_connections, edge_to_reference_node, _token=_CONSTRUCTION_TOKEN)

    def as_graph(self) -> ImmutableGraph:
        return self._as_graph

    class Builder:
        """Accumulates nodes and edges, then freezes them with ``build()``.

        Constraint violations raise immediately from the offending call.
        """

        def __init__(self, config: GraphConfig) -> None:
            self._mutable_network = StandardMutableNetwork(config)

        def add_node(self, node: Any) -> ImmutableNetwork.Builder:
            self._mutable_network.add_node(node)
            return self

        def add_edge(self, edge: Any, node_u: Any, node_v: Any) -> ImmutableNetwork.Builder:
            self._mutable_network.add_edge(edge, node_u, node_v)
            return self

        def build(self) -> ImmutableNetwork:
            return ImmutableNetwork.copy_of(self._mutable_network)


__all__ = ["ImmutableGraph", "ImmutableValueGraph", "ImmutableNetwork"]
