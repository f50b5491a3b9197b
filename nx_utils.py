import random

from typing import Any, Callable

import networkx as nx

from kruskal import Edge, Graph


def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rand = random.Random(seed)
    return lambda _a, _b: rand.randint(low, high)


def from_nx_graph(g: nx.Graph,
                  decide_weight: Callable[[Any, Any], int],
                  nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Graph:
    edges = []
    for (a, b) in g.edges():
        # Convert edge names to index
        u = nodename_to_idx(a)
        v = nodename_to_idx(b)
        edges.append(Edge(u, v, decide_weight(a, b)))

    return Graph(g.number_of_nodes(), edges)


def to_nx_graph(graph: Graph) -> nx.Graph:
    """Build a simple networkx graph, keeping the lightest of any parallel
    edges and dropping self-loops (neither can be part of a spanning forest)."""
    g = nx.Graph()
    g.add_nodes_from(range(graph.n_vertices))

    for edge in graph.edges:
        if edge.source == edge.dest:
            continue
        if g.has_edge(edge.source, edge.dest) and g[edge.source][edge.dest]['weight'] <= edge.weight:
            continue
        g.add_edge(edge.source, edge.dest, weight=edge.weight)

    return g


def reference_mst_weight(graph: Graph) -> int:
    forest = nx.minimum_spanning_tree(to_nx_graph(graph), weight='weight', algorithm='kruskal')
    return int(forest.size(weight='weight'))


def n_components(graph: Graph) -> int:
    return nx.number_connected_components(to_nx_graph(graph))
