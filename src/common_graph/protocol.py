"""Minimal read-only graph capabilities consumed by graph algorithms.

Traversal, search and similar routines should depend on these protocols
rather than on a concrete graph kind, so they run unchanged over a
Graph, ValueGraph, Network, a view such as ``as_graph()``, or any other
object with the same shape.

Public API:
    SuccessorsFunction: Anything exposing ``successors(node)``.
    PredecessorsFunction: Anything exposing ``predecessors(node)``.
    TraversableGraph: Both of the above plus ``nodes()``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SuccessorsFunction(Protocol):
    """A function from a node to the nodes reachable over one outgoing edge."""

    def successors(self, node: Any) -> Iterable[Any]:
        """Nodes adjacent to *node* that can be reached by traversing an outgoing edge."""
        ...


@runtime_checkable
class PredecessorsFunction(Protocol):
    """A function from a node to the nodes that reach it over one edge."""

    def predecessors(self, node: Any) -> Iterable[Any]:
        """Nodes adjacent to *node* that reach it over an incoming edge."""
        ...


@runtime_checkable
class TraversableGraph(SuccessorsFunction, PredecessorsFunction, Protocol):
    """Successor and predecessor functions over a known node set."""

    def nodes(self) -> Iterable[Any]:
        ...


__all__ = ["SuccessorsFunction", "PredecessorsFunction", "TraversableGraph"]
