"""Per-node adjacency storage shared by the standard graph implementations.

Each node in a graph owns one connections object describing its
neighbourhood. Graph and ValueGraph store node -> edge value maps;
Network stores edge -> opposite-node maps plus neighbour counts so that
parallel edges collapse into single adjacency entries.

Public API:
    GraphConnections: Neighbourhood of a node in a Graph or ValueGraph.
    DirectedGraphConnections: Separate predecessor / successor maps.
    UndirectedGraphConnections: One symmetric neighbour map.
    NetworkConnections: Neighbourhood of a node in a Network.
    DirectedNetworkConnections: Separate in-edge / out-edge maps.
    UndirectedNetworkConnections: One symmetric incident-edge map.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any

from .element_order import ElementOrder


def _increment(counts: MutableMapping, key: Any) -> None:
    counts[key] = counts.get(key, 0) + 1


def _decrement(counts: MutableMapping, key: Any) -> None:
    remaining = counts[key] - 1
    if remaining:
        counts[key] = remaining
    else:
        del counts[key]


# ---------------------------------------------------------------------------
# Graph / ValueGraph
# ---------------------------------------------------------------------------


class GraphConnections(ABC):
    """Adjacency of a single node in a Graph or ValueGraph.

    Edge values are stored on both endpoints. A value of None never
    appears in storage, so ``None`` from the accessors means "no edge".
    """

    @property
    @abstractmethod
    def adjacent_map(self) -> Mapping:
        """Mapping keyed by adjacent nodes, in incident-edge order."""

    @property
    @abstractmethod
    def predecessor_map(self) -> Mapping:
        """Mapping of predecessor -> edge value."""

    @property
    @abstractmethod
    def successor_map(self) -> Mapping:
        """Mapping of successor -> edge value."""

    def value(self, successor: Any) -> Any:
        """Value of the edge to *successor*, or None if there is none."""
        return self.successor_map.get(successor)

    @abstractmethod
    def add_predecessor(self, node: Any, value: Any) -> None:
        ...

    @abstractmethod
    def add_successor(self, node: Any, value: Any) -> Any:
        """Add or overwrite the edge to *node*; return the previous value."""

    @abstractmethod
    def remove_predecessor(self, node: Any) -> None:
        ...

    @abstractmethod
    def remove_successor(self, node: Any) -> Any:
        """Remove the edge to *node*; return its value, or None."""


class DirectedGraphConnections(GraphConnections):
    """Neighbourhood of a node in a directed Graph or ValueGraph."""

    __slots__ = ("_predecessors", "_successors", "_adjacent")

    def __init__(
        self,
        predecessors: MutableMapping,
        successors: MutableMapping,
        adjacent: MutableMapping,
    ) -> None:
        self._predecessors = predecessors
        self._successors = successors
        # node -> number of directions (1 or 2) it is adjacent in
        self._adjacent = adjacent

    @classmethod
    def of(cls, incident_edge_order: ElementOrder) -> DirectedGraphConnections:
        return cls(
            incident_edge_order.create_map(),
            incident_edge_order.create_map(),
            incident_edge_order.create_map(),
        )

    @classmethod
    def of_immutable(
        cls, predecessors: dict, successors: dict, adjacent_nodes: Iterable
    ) -> DirectedGraphConnections:
        """Frozen storage; iteration follows the insertion order of the given dicts."""
        adjacent = dict.fromkeys(adjacent_nodes, 0)
        for node in predecessors:
            adjacent[node] += 1
        for node in successors:
            adjacent[node] += 1
        return cls(predecessors, successors, adjacent)

    @property
    def adjacent_map(self) -> Mapping:
        return self._adjacent

    @property
    def predecessor_map(self) -> Mapping:
        return self._predecessors

    @property
    def successor_map(self) -> Mapping:
        return self._successors

    def add_predecessor(self, node: Any, value: Any) -> None:
        if node not in self._predecessors:
            _increment(self._adjacent, node)
        self._predecessors[node] = value

    def add_successor(self, node: Any, value: Any) -> Any:
        previous = self._successors.get(node)
        if previous is None:
            _increment(self._adjacent, node)
        self._successors[node] = value
        return previous

    def remove_predecessor(self, node: Any) -> None:
        if node in self._predecessors:
            del self._predecessors[node]
            _decrement(self._adjacent, node)

    def remove_successor(self, node: Any) -> Any:
        previous = self._successors.get(node)
        if previous is not None:
            del self._successors[node]
            _decrement(self._adjacent, node)
        return previous


class UndirectedGraphConnections(GraphConnections):
    """Neighbourhood of a node in an undirected Graph or ValueGraph."""

    __slots__ = ("_adjacent",)

    def __init__(self, adjacent: MutableMapping) -> None:
        self._adjacent = adjacent

    @classmethod
    def of(cls, incident_edge_order: ElementOrder) -> UndirectedGraphConnections:
        return cls(incident_edge_order.create_map())

    @classmethod
    def of_immutable(cls, adjacent: dict) -> UndirectedGraphConnections:
        return cls(adjacent)

    @property
    def adjacent_map(self) -> Mapping:
        return self._adjacent

    predecessor_map = adjacent_map
    successor_map = adjacent_map

    def add_predecessor(self, node: Any, value: Any) -> None:
        self._adjacent[node] = value

    def add_successor(self, node: Any, value: Any) -> Any:
        previous = self._adjacent.get(node)
        self._adjacent[node] = value
        return previous

    def remove_predecessor(self, node: Any) -> None:
        self._adjacent.pop(node, None)

    def remove_successor(self, node: Any) -> Any:
        return self._adjacent.pop(node, None)


# ---------------------------------------------------------------------------
# Network
# ---------------------------------------------------------------------------


class NetworkConnections(ABC):
    """Incident edges of a single node in a Network.

    Edge maps go from edge to the node at the other end. Node maps go
    from neighbour to the number of edges shared with it, so parallel
    edges are counted but a neighbour is listed once.
    """

    @property
    @abstractmethod
    def incident_edge_map(self) -> Mapping:
        ...

    @property
    @abstractmethod
    def in_edge_map(self) -> Mapping:
        ...

    @property
    @abstractmethod
    def out_edge_map(self) -> Mapping:
        ...

    @property
    @abstractmethod
    def adjacent_counts(self) -> Mapping:
        ...

    @property
    @abstractmethod
    def predecessor_counts(self) -> Mapping:
        ...

    @property
    @abstractmethod
    def successor_counts(self) -> Mapping:
        ...

    def adjacent_node(self, edge: Any) -> Any:
        """Node at the other end of *edge* (the node itself for a self-loop)."""
        return self.incident_edge_map[edge]

    def edges_connecting(self, node: Any) -> Iterator[Any]:
        """Out edges whose opposite endpoint is *node*."""
        for edge, target in self.out_edge_map.items():
            if target == node:
                yield edge

    @abstractmethod
    def add_in_edge(self, edge: Any, node: Any) -> None:
        ...

    @abstractmethod
    def add_out_edge(self, edge: Any, node: Any) -> None:
        ...

    @abstractmethod
    def remove_in_edge(self, edge: Any) -> Any:
        """Remove *edge* as an in-edge; return the opposite node or None."""

    @abstractmethod
    def remove_out_edge(self, edge: Any) -> Any:
        """Remove *edge* as an out-edge; return the opposite node or None."""


class DirectedNetworkConnections(NetworkConnections):
    """In-edges and out-edges of a node in a directed Network."""

    __slots__ = (
        "_in_edges",
        "_out_edges",
        "_incident",
        "_predecessors",
        "_successors",
        "_adjacent",
    )

    def __init__(
        self,
        in_edges: MutableMapping,
        out_edges: MutableMapping,
        incident: MutableMapping,
    ) -> None:
        self._in_edges = in_edges
        self._out_edges = out_edges
        # edge -> opposite node; self-loops are stored once
        self._incident = incident
        self._predecessors: dict = {}
        self._successors: dict = {}
        self._adjacent: dict = {}

    @classmethod
    def of(cls, incident_edge_order: ElementOrder) -> DirectedNetworkConnections:
        connections = cls(
            incident_edge_order.create_map(),
            incident_edge_order.create_map(),
            incident_edge_order.create_map(),
        )
        connections._predecessors = incident_edge_order.create_map()
        connections._successors = incident_edge_order.create_map()
        connections._adjacent = incident_edge_order.create_map()
        return connections

    @classmethod
    def of_immutable(
        cls,
        in_edges: dict,
        out_edges: dict,
        incident_edges: Iterable,
        predecessors: Iterable,
        successors: Iterable,
        adjacent_nodes: Iterable,
    ) -> DirectedNetworkConnections:
        """Frozen storage replicating the given iteration orders."""
        incident = {
            edge: in_edges[edge] if edge in in_edges else out_edges[edge]
            for edge in incident_edges
        }
        connections = cls(in_edges, out_edges, incident)
        connections._predecessors = dict.fromkeys(predecessors, 0)
        connections._successors = dict.fromkeys(successors, 0)
        connections._adjacent = dict.fromkeys(adjacent_nodes, 0)
        for source in in_edges.values():
            connections._predecessors[source] += 1
            connections._adjacent[source] += 1
        for target in out_edges.values():
            connections._successors[target] += 1
            connections._adjacent[target] += 1
        return connections

    @property
    def incident_edge_map(self) -> Mapping:
        return self._incident

    @property
    def in_edge_map(self) -> Mapping:
        return self._in_edges

    @property
    def out_edge_map(self) -> Mapping:
        return self._out_edges

    @property
    def adjacent_counts(self) -> Mapping:
        return self._adjacent

    @property
    def predecessor_counts(self) -> Mapping:
        return self._predecessors

    @property
    def successor_counts(self) -> Mapping:
        return self._successors

    def add_in_edge(self, edge: Any, node: Any) -> None:
        self._in_edges[edge] = node
        self._incident[edge] = node
        _increment(self._predecessors, node)
        _increment(self._adjacent, node)

    def add_out_edge(self, edge: Any, node: Any) -> None:
        self._out_edges[edge] = node
        self._incident[edge] = node
        _increment(self._successors, node)
        _increment(self._adjacent, node)

    def remove_in_edge(self, edge: Any) -> Any:
        if edge not in self._in_edges:
            return None
        node = self._in_edges.pop(edge)
        if edge not in self._out_edges:
            del self._incident[edge]
        _decrement(self._predecessors, node)
        _decrement(self._adjacent, node)
        return node

    def remove_out_edge(self, edge: Any) -> Any:
        if edge not in self._out_edges:
            return None
        node = self._out_edges.pop(edge)
        if edge not in self._in_edges:
            del self._incident[edge]
        _decrement(self._successors, node)
        _decrement(self._adjacent, node)
        return node


class UndirectedNetworkConnections(NetworkConnections):
    """Incident edges of a node in an undirected Network."""

    __slots__ = ("_incident", "_adjacent")

    def __init__(self, incident: MutableMapping) -> None:
        self._incident = incident
        self._adjacent: dict = {}

    @classmethod
    def of(cls, incident_edge_order: ElementOrder) -> UndirectedNetworkConnections:
        connections = cls(incident_edge_order.create_map())
        connections._adjacent = incident_edge_order.create_map()
        return connections

    @classmethod
    def of_immutable(
        cls, incident: dict, adjacent_nodes: Iterable
    ) -> UndirectedNetworkConnections:
        connections = cls(incident)
        connections._adjacent = dict.fromkeys(adjacent_nodes, 0)
        for node in incident.values():
            connections._adjacent[node] += 1
        return connections

    @property
    def incident_edge_map(self) -> Mapping:
        return self._incident

    in_edge_map = incident_edge_map
    out_edge_map = incident_edge_map

    @property
    def adjacent_counts(self) -> Mapping:
        return self._adjacent

    predecessor_counts = adjacent_counts
    successor_counts = adjacent_counts

    def add_in_edge(self, edge: Any, node: Any) -> None:
        self.add_out_edge(edge, node)

    def add_out_edge(self, edge: Any, node: Any) -> None:
        # a self-loop reaches here twice for the same node
        if edge in self._incident:
            return
        self._incident[edge] = node
        _increment(self._adjacent, node)

    def remove_in_edge(self, edge: Any) -> Any:
        return self.remove_out_edge(edge)

    def remove_out_edge(self, edge: Any) -> Any:
        if edge not in self._incident:
            return None
        node = self._incident.pop(edge)
        _decrement(self._adjacent, node)
        return node


__all__ = [
    "GraphConnections",
    "DirectedGraphConnections",
    "UndirectedGraphConnections",
    "NetworkConnections",
    "DirectedNetworkConnections",
    "UndirectedNetworkConnections",
]
