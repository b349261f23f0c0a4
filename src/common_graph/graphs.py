"""Helpers operating on whole graphs.

Public API:
    copy_of: Mutable copy of a Graph, ValueGraph or Network.
    induced_subgraph: Mutable copy restricted to a set of nodes.
    transpose: Live view of a directed graph with every edge reversed.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .builder import GraphBuilder, NetworkBuilder, ValueGraphBuilder
from .element_order import ElementOrder
from .endpoints import EndpointPair
from .graph import BaseGraph, ForwardingGraph, Graph, MutableGraph, MutableValueGraph, ValueGraph
from .network import MutableNetwork, Network
from .views import GraphView


def copy_of(graph):
    """Mutable copy of *graph* with the same configuration, nodes and edges."""
    if isinstance(graph, (Graph, ValueGraph, Network)):
        return induced_subgraph(graph, graph.nodes())
    raise TypeError(f"expected a Graph, ValueGraph or Network, got {type(graph).__name__}")


def induced_subgraph(graph, nodes: Iterable[Any]):
    """Mutable copy of *graph* holding *nodes* and every edge among them.

    Raises:
        UnknownElementError: If any of *nodes* is not in *graph*.
    """
    nodes = list(nodes)
    if isinstance(graph, Network):
        return _induced_network(graph, nodes)
    if isinstance(graph, ValueGraph):
        return _induced_value_graph(graph, nodes)
    if isinstance(graph, Graph):
        return _induced_graph(graph, nodes)
    raise TypeError(f"expected a Graph, ValueGraph or Network, got {type(graph).__name__}")


def _induced_graph(graph: Graph, nodes: list) -> MutableGraph:
    subgraph = GraphBuilder.from_graph(graph).expected_node_count(len(nodes)).build()
    for node in nodes:
        subgraph.add_node(node)
    for node in nodes:
        for successor in graph.successors(node):
            if successor in subgraph.nodes():
                subgraph.put_edge(node, successor)
    return subgraph


def _induced_value_graph(graph: ValueGraph, nodes: list) -> MutableValueGraph:
    subgraph = ValueGraphBuilder.from_graph(graph).expected_node_count(len(nodes)).build()
    for node in nodes:
        subgraph.add_node(node)
    for node in nodes:
        for successor in graph.successors(node):
            if successor in subgraph.nodes():
                subgraph.put_edge_value(node, successor, graph.edge_value(node, successor))
    return subgraph


def _induced_network(network: Network, nodes: list) -> MutableNetwork:
    subnetwork = NetworkBuilder.from_graph(network).expected_node_count(len(nodes)).build()
    for node in nodes:
        subnetwork.add_node(node)
    for node in nodes:
        for edge in network.out_edges(node):
            endpoints = network.incident_nodes(edge)
            if endpoints.adjacent_node(node) in subnetwork.nodes():
                # re-adding an undirected edge from its other end is a no-op
                subnetwork.add_edge(edge, endpoints.node_u, endpoints.node_v)
    return subnetwork


def transpose(graph):
    """Live read-only view of *graph* with every edge reversed.

    Undirected graphs are returned unchanged, and transposing a
    transposed view returns the original graph.
    """
    if not graph.is_directed():
        return graph
    if isinstance(graph, (_TransposedGraph, _TransposedValueGraph, _TransposedNetwork)):
        return graph._delegate
    if isinstance(graph, Network):
        return _TransposedNetwork(graph)
    if isinstance(graph, ValueGraph):
        return _TransposedValueGraph(graph)
    if isinstance(graph, Graph):
        return _TransposedGraph(graph)
    raise TypeError(f"expected a Graph, ValueGraph or Network, got {type(graph).__name__}")


class _TransposedGraph(ForwardingGraph):
    def predecessors(self, node: Any) -> GraphView:
        return self._delegate.successors(node)

    def successors(self, node: Any) -> GraphView:
        return self._delegate.predecessors(node)

    def in_degree(self, node: Any) -> int:
        return self._delegate.out_degree(node)

    def out_degree(self, node: Any) -> int:
        return self._delegate.in_degree(node)

    def has_edge_connecting(self, node_u: Any, node_v: Any) -> bool:
        return self._delegate.has_edge_connecting(node_v, node_u)

    # derived from the swapped primitives above
    edges = BaseGraph.edges
    incident_edges = BaseGraph.incident_edges


class _TransposedValueGraph(ValueGraph):
    def __init__(self, delegate: ValueGraph) -> None:
        self._delegate = delegate

    def is_directed(self) -> bool:
        return True

    def allows_self_loops(self) -> bool:
        return self._delegate.allows_self_loops()

    def node_order(self) -> ElementOrder:
        return self._delegate.node_order()

    def incident_edge_order(self) -> ElementOrder:
        return self._delegate.incident_edge_order()

    def nodes(self) -> GraphView:
        return self._delegate.nodes()

    def adjacent_nodes(self, node: Any) -> GraphView:
        return self._delegate.adjacent_nodes(node)

    def predecessors(self, node: Any) -> GraphView:
        return self._delegate.successors(node)

    def successors(self, node: Any) -> GraphView:
        return self._delegate.predecessors(node)

    def has_edge_connecting(self, node_u: Any, node_v: Any) -> bool:
        return self._delegate.has_edge_connecting(node_v, node_u)

    def edge_value_or_default(self, node_u: Any, node_v: Any, default: Any) -> Any:
        return self._delegate.edge_value_or_default(node_v, node_u, default)

    def _edge_count(self) -> int:
        return self._delegate._edge_count()

    def _modification_count(self) -> int:
        return self._delegate._modification_count()


class _TransposedNetwork(Network):
    def __init__(self, delegate: Network) -> None:
        self._delegate = delegate

    def is_directed(self) -> bool:
        return True

    def allows_parallel_edges(self) -> bool:
        return self._delegate.allows_parallel_edges()

    def allows_self_loops(self) -> bool:
        return self._delegate.allows_self_loops()

    def node_order(self) -> ElementOrder:
        return self._delegate.node_order()

    def edge_order(self) -> ElementOrder:
        return self._delegate.edge_order()

    def incident_edge_order(self) -> ElementOrder:
        return self._delegate.incident_edge_order()

    def nodes(self) -> GraphView:
        return self._delegate.nodes()

    def edges(self) -> GraphView:
        return self._delegate.edges()

    def adjacent_nodes(self, node: Any) -> GraphView:
        return self._delegate.adjacent_nodes(node)

    def predecessors(self, node: Any) -> GraphView:
        return self._delegate.successors(node)

    def successors(self, node: Any) -> GraphView:
        return self._delegate.predecessors(node)

    def incident_edges(self, node: Any) -> GraphView:
        return self._delegate.incident_edges(node)

    def in_edges(self, node: Any) -> GraphView:
        return self._delegate.out_edges(node)

    def out_edges(self, node: Any) -> GraphView:
        return self._delegate.in_edges(node)

    def incident_nodes(self, edge: Any) -> EndpointPair:
        endpoints = self._delegate.incident_nodes(edge)
        return EndpointPair.ordered(endpoints.target(), endpoints.source())

    def edges_connecting(self, node_u: Any, node_v: Any) -> GraphView:
        return self._delegate.edges_connecting(node_v, node_u)

    def has_edge_connecting(self, node_u: Any, node_v: Any) -> bool:
        return self._delegate.has_edge_connecting(node_v, node_u)

    def _modification_count(self) -> int:
        return self._delegate._modification_count()


__all__ = ["copy_of", "induced_subgraph", "transpose"]
