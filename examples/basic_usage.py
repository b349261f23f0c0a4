"""Basic usage example for common-graph-lib."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from common_graph import (
    ElementOrder,
    GraphBuilder,
    ImmutableGraph,
    NetworkBuilder,
    ValueGraphBuilder,
    transpose,
)


def main():
    print("=" * 60)
    print("common-graph-lib - Basic Usage Example")
    print("=" * 60)

    # 1. Build a mutable directed graph
    print("\n1. Building a directed Graph...")
    graph = GraphBuilder.directed().node_order(ElementOrder.natural()).build()
    for source, target in [("parse", "lex"), ("lex", "read"), ("parse", "read"), ("emit", "parse")]:
        graph.put_edge(source, target)
    print(f"   Nodes: {list(graph.nodes())}")
    print(f"   Edges: {list(graph.edges())}")
    print(f"   Successors of 'parse': {set(graph.successors('parse'))}")

    # 2. Live views
    print("\n2. Watching a live view...")
    dependents = graph.predecessors("read")
    print(f"   Predecessors of 'read': {dependents}")
    graph.put_edge("check", "read")
    print(f"   After adding 'check -> read': {dependents}")

    # 3. Reversed view
    print("\n3. Transposing...")
    reversed_graph = transpose(graph)
    print(f"   'read' now points to: {set(reversed_graph.successors('read'))}")

    # 4. Weighted graph
    print("\n4. Building an undirected ValueGraph...")
    distances = ValueGraphBuilder.undirected().build()
    distances.put_edge_value("Oslo", "Bergen", 463)
    distances.put_edge_value("Oslo", "Trondheim", 494)
    print(f"   Bergen <-> Oslo: {distances.edge_value('Bergen', 'Oslo')} km")
    print(f"   Bergen <-> Trondheim: {distances.edge_value_or_default('Bergen', 'Trondheim', 'n/a')}")

    # 5. Network with parallel edges
    print("\n5. Building a Network with parallel edges...")
    routes = NetworkBuilder.directed().allows_parallel_edges(True).build()
    routes.add_edge("ferry", "Oslo", "Kiel")
    routes.add_edge("flight", "Oslo", "Kiel")
    print(f"   Oslo -> Kiel by: {set(routes.edges_connecting('Oslo', 'Kiel'))}")
    print(f"   Out-degree of Oslo: {routes.out_degree('Oslo')}")
    print(f"   As a Graph, out-degree of Oslo: {routes.as_graph().out_degree('Oslo')}")

    # 6. Freeze
    print("\n6. Freezing the dependency graph...")
    frozen = ImmutableGraph.copy_of(graph)
    graph.remove_node("check")
    print(f"   Frozen still has 'check': {'check' in frozen.nodes()}")
    print(f"   Mutable copy has 'check': {'check' in graph.nodes()}")

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
