"""Frozen graph configuration produced by the builders.

Public API:
    GraphConfig: Constraints and sizing hints fixed for a graph's lifetime.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .element_order import ElementOrder


@dataclass(frozen=True)
class GraphConfig:
    """Everything a builder decides about the graphs it produces.

    The first group of attributes are hard constraints enforced by every
    mutation. The expected counts are sizing hints only and never change
    observable behaviour.

    Attributes:
        directed: Whether edges have a source and a target.
        allows_self_loops: Whether an edge may connect a node to itself.
        allows_parallel_edges: Whether several edges may share endpoints
            (Network only).
        node_order: Iteration order of ``nodes()``.
        incident_edge_order: Iteration order of per-node views.
        edge_order: Iteration order of ``Network.edges()``.
        expected_node_count: Advisory initial node capacity.
        expected_edge_count: Advisory initial edge capacity.
    """

    directed: bool
    allows_self_loops: bool = False
    allows_parallel_edges: bool = False
    node_order: ElementOrder = field(default_factory=ElementOrder.insertion)
    incident_edge_order: ElementOrder = field(default_factory=ElementOrder.unordered)
    edge_order: ElementOrder = field(default_factory=ElementOrder.insertion)
    expected_node_count: int | None = None
    expected_edge_count: int | None = None

    def __post_init__(self):
        for name in ("node_order", "incident_edge_order", "edge_order"):
            if not isinstance(getattr(self, name), ElementOrder):
                raise TypeError(f"{name} must be an ElementOrder")
        for name in ("expected_node_count", "expected_edge_count"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def with_changes(self, **changes) -> GraphConfig:
        """Copy of this config with *changes* applied."""
        return replace(self, **changes)


__all__ = ["GraphConfig"]
