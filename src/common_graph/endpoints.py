"""EndpointPair -- the two nodes an edge connects.

Public API:
    EndpointPair: Ordered (directed) or unordered (undirected) node pair.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .exceptions import check_not_none


class EndpointPair:
    """An immutable pair of nodes representing the endpoints of an edge.

    Ordered pairs have a distinguished ``source()`` and ``target()`` and
    compare by ``(source, target)``. Unordered pairs compare as
    two-element multisets, so ``unordered(a, b) == unordered(b, a)``. An
    ordered pair is never equal to an unordered one.

    Attributes:
        node_u: The first node (the source, for ordered pairs).
        node_v: The second node (the target, for ordered pairs).
        is_ordered: Whether the pair belongs to a directed edge.
    """

    __slots__ = ("node_u", "node_v", "is_ordered")

    def __init__(self, node_u: Any, node_v: Any, is_ordered: bool) -> None:
        self.node_u = check_not_none(node_u, "node_u")
        self.node_v = check_not_none(node_v, "node_v")
        self.is_ordered = is_ordered

    @classmethod
    def ordered(cls, source: Any, target: Any) -> EndpointPair:
        return cls(source, target, True)

    @classmethod
    def unordered(cls, node_u: Any, node_v: Any) -> EndpointPair:
        return cls(node_u, node_v, False)

    @classmethod
    def of(cls, graph: Any, node_u: Any, node_v: Any) -> EndpointPair:
        """Pair whose ordering matches the directedness of *graph*."""
        return cls(node_u, node_v, graph.is_directed())

    def source(self) -> Any:
        if not self.is_ordered:
            raise ValueError("Cannot call source()/target() on an unordered EndpointPair.")
        return self.node_u

    def target(self) -> Any:
        if not self.is_ordered:
            raise ValueError("Cannot call source()/target() on an unordered EndpointPair.")
        return self.node_v

    def adjacent_node(self, node: Any) -> Any:
        """Return the endpoint opposite *node*."""
        if node == self.node_u:
            return self.node_v
        if node == self.node_v:
            return self.node_u
        raise ValueError(f"EndpointPair {self!r} does not contain node {node!r}")

    def __iter__(self) -> Iterator[Any]:
        yield self.node_u
        yield self.node_v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EndpointPair):
            return NotImplemented
        if self.is_ordered != other.is_ordered:
            return False
        if self.is_ordered:
            return self.node_u == other.node_u and self.node_v == other.node_v
        if self.node_u == other.node_u:
            return self.node_v == other.node_v
        return self.node_u == other.node_v and self.node_v == other.node_u

    def __hash__(self) -> int:
        if self.is_ordered:
            return hash((self.node_u, self.node_v))
        # symmetric in u and v
        return hash(self.node_u) + hash(self.node_v)

    def __repr__(self) -> str:
        if self.is_ordered:
            return f"<{self.node_u!r} -> {self.node_v!r}>"
        return f"[{self.node_u!r}, {self.node_v!r}]"


__all__ = ["EndpointPair"]
