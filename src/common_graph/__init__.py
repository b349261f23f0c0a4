"""common-graph-lib: Graph, ValueGraph and Network data structures."""

__version__ = "0.1.0"

from .builder import GraphBuilder, NetworkBuilder, ValueGraphBuilder
from .config import GraphConfig
from .element_order import ElementOrder, OrderType
from .endpoints import EndpointPair
from .exceptions import (
    AmbiguousEdgeError,
    EdgeReusedError,
    GraphError,
    IterationInvalidatedError,
    NullElementError,
    ParallelEdgeNotAllowedError,
    SelfLoopNotAllowedError,
    UnknownElementError,
)
from .graph import BaseGraph, Graph, MutableGraph, MutableValueGraph, ValueGraph
from .graphs import copy_of, induced_subgraph, transpose
from .immutable import ImmutableGraph, ImmutableNetwork, ImmutableValueGraph
from .network import MutableNetwork, Network
from .protocol import PredecessorsFunction, SuccessorsFunction, TraversableGraph
from .views import GraphView

__all__ = [
    # Graph kinds
    "BaseGraph",
    "Graph",
    "ValueGraph",
    "Network",
    "MutableGraph",
    "MutableValueGraph",
    "MutableNetwork",
    # Immutable variants
    "ImmutableGraph",
    "ImmutableValueGraph",
    "ImmutableNetwork",
    # Builders and configuration
    "GraphBuilder",
    "ValueGraphBuilder",
    "NetworkBuilder",
    "GraphConfig",
    "ElementOrder",
    "OrderType",
    # Values and views
    "EndpointPair",
    "GraphView",
    # Algorithm boundary
    "SuccessorsFunction",
    "PredecessorsFunction",
    "TraversableGraph",
    # Helpers
    "copy_of",
    "induced_subgraph",
    "transpose",
    # Exceptions
    "GraphError",
    "NullElementError",
    "UnknownElementError",
    "SelfLoopNotAllowedError",
    "ParallelEdgeNotAllowedError",
    "EdgeReusedError",
    "AmbiguousEdgeError",
    "IterationInvalidatedError",
]
