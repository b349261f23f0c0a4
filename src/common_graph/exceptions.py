"""Custom exceptions for common-graph-lib."""


class GraphError(Exception):
    """Base exception for graph operations."""


class NullElementError(GraphError, TypeError):
    """Raised when None is supplied where a node, edge or value is required."""


class UnknownElementError(GraphError, KeyError):
    """Raised when an accessor references a node or edge not in the graph."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return Exception.__str__(self)


class SelfLoopNotAllowedError(GraphError, ValueError):
    """Raised when adding a self-loop to a graph that disallows them."""


class ParallelEdgeNotAllowedError(GraphError, ValueError):
    """Raised when adding a parallel edge to a network that disallows them."""


class EdgeReusedError(GraphError, ValueError):
    """Raised when an existing edge object is reused for different endpoints."""


class AmbiguousEdgeError(GraphError, ValueError):
    """Raised when a single-edge query matches more than one edge."""


class IterationInvalidatedError(GraphError, RuntimeError):
    """Raised when a live view is used after its graph changed underneath it."""


# Message templates shared by the graph implementations.
NODE_NOT_IN_GRAPH = "Node %r is not an element of this graph."
EDGE_NOT_IN_GRAPH = "Edge %r is not an element of this graph."
NODE_REMOVED_FROM_GRAPH = (
    "Node %r that was used to generate this view is no longer in the graph."
)
CONCURRENT_MODIFICATION = "Graph was structurally modified while this view was being iterated."
SELF_LOOPS_NOT_ALLOWED = (
    "Cannot add self-loop edge on node %r, as self-loops are not allowed. To construct "
    "a graph that allows self-loops, call allows_self_loops(True) on the builder."
)
PARALLEL_EDGES_NOT_ALLOWED = (
    "Nodes %r and %r are already connected by a different edge. To construct a graph "
    "that allows parallel edges, call allows_parallel_edges(True) on the builder."
)
REUSING_EDGE = (
    "Edge %r already exists between the following nodes: %r, so it cannot be reused "
    "to connect the following nodes: %r."
)
MULTIPLE_EDGES_CONNECTING = (
    "Cannot call edge_connecting() when parallel edges exist between %r and %r. "
    "Consider calling edges_connecting() instead."
)


def check_not_none(element, name: str = "element"):
    """Return *element*, raising NullElementError if it is None."""
    if element is None:
        raise NullElementError(f"{name} must not be None")
    return element


__all__ = [
    "GraphError",
    "NullElementError",
    "UnknownElementError",
    "SelfLoopNotAllowedError",
    "ParallelEdgeNotAllowedError",
    "EdgeReusedError",
    "AmbiguousEdgeError",
    "IterationInvalidatedError",
    "check_not_none",
]
