"""Builders for Graph, ValueGraph and Network instances.

A builder fixes directedness at creation (``directed()``,
``undirected()`` or ``from_graph()``), accepts further constraints and
sizing hints through chainable setters, and then either produces empty
mutable graphs with ``build()`` or hands its configuration to an
immutable builder via ``immutable()``.

Example::

    graph = GraphBuilder.directed().allows_self_loops(True).build()
    graph.put_edge("a", "b")

Public API:
    GraphBuilder: Builds MutableGraph / ImmutableGraph instances.
    ValueGraphBuilder: Builds MutableValueGraph / ImmutableValueGraph instances.
    NetworkBuilder: Builds MutableNetwork / ImmutableNetwork instances.
"""

from __future__ import annotations

import copy
import logging

from .config import GraphConfig
from .element_order import ElementOrder, OrderType
from .graph import BaseGraph, MutableGraph, MutableValueGraph
from .immutable import ImmutableGraph, ImmutableNetwork, ImmutableValueGraph
from .network import MutableNetwork, Network
from .standard_graph import StandardMutableGraph, StandardMutableValueGraph
from .standard_network import StandardMutableNetwork

logger = logging.getLogger(__name__)


def _check_order(order: ElementOrder) -> ElementOrder:
    if not isinstance(order, ElementOrder):
        raise TypeError(f"expected an ElementOrder, got {type(order).__name__}")
    return order


def _check_count(count: int, name: str) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"{name} must be an int, got {type(count).__name__}")
    if count < 0:
        raise ValueError(f"{name} must be non-negative, got {count}")
    return count


class _AbstractGraphBuilder:
    """Settings shared by every builder.

    Setters change this builder in place and return it for chaining.
    Each ``build()`` call reads the current settings, so graphs built
    earlier are unaffected by later changes.
    """

    def __init__(self, directed: bool) -> None:
        self._directed = directed
        self._allows_self_loops = False
        self._node_order = ElementOrder.insertion()
        self._incident_edge_order = ElementOrder.unordered()
        self._expected_node_count: int | None = None
        self._expected_edge_count: int | None = None

    def allows_self_loops(self, allows_self_loops: bool):
        """Whether built graphs accept edges from a node to itself (default False)."""
        self._allows_self_loops = bool(allows_self_loops)
        return self

    def node_order(self, node_order: ElementOrder):
        """Iteration order of ``nodes()`` (default insertion)."""
        self._node_order = _check_order(node_order)
        return self

    def incident_edge_order(self, incident_edge_order: ElementOrder):
        """Iteration order of per-node views (default unordered)."""
        self._incident_edge_order = _check_order(incident_edge_order)
        return self

    def expected_node_count(self, expected_node_count: int):
        """Advisory node capacity; never changes behaviour."""
        self._expected_node_count = _check_count(expected_node_count, "expected_node_count")
        return self

    def expected_edge_count(self, expected_edge_count: int):
        """Advisory edge capacity; never changes behaviour."""
        self._expected_edge_count = _check_count(expected_edge_count, "expected_edge_count")
        return self

    def copy(self):
        """Independent builder with the same settings."""
        return copy.copy(self)

    def _to_config(self) -> GraphConfig:
        return GraphConfig(
            directed=self._directed,
            allows_self_loops=self._allows_self_loops,
            node_order=self._node_order,
            incident_edge_order=self._incident_edge_order,
            expected_node_count=self._expected_node_count,
            expected_edge_count=self._expected_edge_count,
        )

    def _immutable_config(self) -> GraphConfig:
        config = self._to_config()
        if config.incident_edge_order.type is OrderType.UNORDERED:
            config = config.with_changes(incident_edge_order=ElementOrder.insertion())
        if config.node_order.type is OrderType.UNORDERED:
            config = config.with_changes(node_order=ElementOrder.insertion())
        return config

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._to_config()!r})"


class GraphBuilder(_AbstractGraphBuilder):
    """Configures and builds Graph instances."""

    @classmethod
    def directed(cls) -> GraphBuilder:
        return cls(True)

    @classmethod
    def undirected(cls) -> GraphBuilder:
        return cls(False)

    @classmethod
    def from_graph(cls, graph: BaseGraph) -> GraphBuilder:
        """Builder with the directedness, self-loop policy and orders of *graph*.

        Only the configuration is copied, never nodes or edges.
        """
        return (
            cls(graph.is_directed())
            .allows_self_loops(graph.allows_self_loops())
            .node_order(graph.node_order())
            .incident_edge_order(graph.incident_edge_order())
        )

    def build(self) -> MutableGraph:
        """A new, empty mutable graph sharing only this configuration."""
        config = self._to_config()
        logger.debug("Building mutable graph: %s", config)
        return StandardMutableGraph(config)

    def immutable(self) -> ImmutableGraph.Builder:
        """Builder that accumulates nodes and edges into an ImmutableGraph.

        Orders left unordered here become insertion order.
        """
        return ImmutableGraph.Builder(self._immutable_config())


class ValueGraphBuilder(_AbstractGraphBuilder):
    """Configures and builds ValueGraph instances."""

    @classmethod
    def directed(cls) -> ValueGraphBuilder:
        return cls(True)

    @classmethod
    def undirected(cls) -> ValueGraphBuilder:
        return cls(False)

    @classmethod
    def from_graph(cls, graph: BaseGraph) -> ValueGraphBuilder:
        """Builder with the directedness, self-loop policy and orders of *graph*."""
        return (
            cls(graph.is_directed())
            .allows_self_loops(graph.allows_self_loops())
            .node_order(graph.node_order())
            .incident_edge_order(graph.incident_edge_order())
        )

    def build(self) -> MutableValueGraph:
        config = self._to_config()
        logger.debug("Building mutable value graph: %s", config)
        return StandardMutableValueGraph(config)

    def immutable(self) -> ImmutableValueGraph.Builder:
        return ImmutableValueGraph.Builder(self._immutable_config())


class NetworkBuilder(_AbstractGraphBuilder):
    """Configures and builds Network instances."""

    def __init__(self, directed: bool) -> None:
        super().__init__(directed)
        self._allows_parallel_edges = False
        self._edge_order = ElementOrder.insertion()

    @classmethod
    def directed(cls) -> NetworkBuilder:
        return cls(True)

    @classmethod
    def undirected(cls) -> NetworkBuilder:
        return cls(False)

    @classmethod
    def from_graph(cls, network: Network) -> NetworkBuilder:
        """Builder with every constraint and order of *network*."""
        return (
            cls(network.is_directed())
            .allows_parallel_edges(network.allows_parallel_edges())
            .allows_self_loops(network.allows_self_loops())
            .node_order(network.node_order())
            .edge_order(network.edge_order())
            .incident_edge_order(network.incident_edge_order())
        )

    def allows_parallel_edges(self, allows_parallel_edges: bool) -> NetworkBuilder:
        """Whether several edges may connect the same nodes (default False)."""
        self._allows_parallel_edges = bool(allows_parallel_edges)
        return self

    def edge_order(self, edge_order: ElementOrder) -> NetworkBuilder:
        """Iteration order of ``edges()`` (default insertion)."""
        self._edge_order = _check_order(edge_order)
        return self

    def _to_config(self) -> GraphConfig:
        return super()._to_config().with_changes(
            allows_parallel_edges=self._allows_parallel_edges,
            edge_order=self._edge_order,
        )

    def _immutable_config(self) -> GraphConfig:
        config = super()._immutable_config()
        if config.edge_order.type is OrderType.UNORDERED:
            config = config.with_changes(edge_order=ElementOrder.insertion())
        return config

    def build(self) -> MutableNetwork:
        config = self._to_config()
        logger.debug("Building mutable network: %s", config)
        return StandardMutableNetwork(config)

    def immutable(self) -> ImmutableNetwork.Builder:
        return ImmutableNetwork.Builder(self._immutable_config())


__all__ = ["GraphBuilder", "ValueGraphBuilder", "NetworkBuilder"]
