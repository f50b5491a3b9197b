import logging

import numpy as np

from kruskal import Edge, Graph

logger = logging.getLogger(__name__)

MAX_FUZZ_VERTICES = 255


def _check_weights(min_weight: int, max_weight: int) -> None:
    if min_weight > max_weight:
        raise ValueError(f'min_weight ({min_weight}) is larger than max_weight ({max_weight})')


def random_graph(n_vertices: int,
                 n_edges: int,
                 min_weight: int = 1,
                 max_weight: int = 100,
                 seed: int | None = None) -> Graph:
    """Generate a multigraph with uniformly random endpoints and weights.

    Self-loops and parallel edges are not filtered out.
    """
    if n_vertices < 0 or n_edges < 0:
        raise ValueError('Vertex and edge counts must be non-negative')
    if n_vertices == 0 and n_edges > 0:
        raise ValueError('Cannot place edges on a graph with no vertices')
    _check_weights(min_weight, max_weight)

    rng = np.random.default_rng(seed)
    sources = rng.integers(0, n_vertices, size=n_edges) if n_edges else []
    dests = rng.integers(0, n_vertices, size=n_edges) if n_edges else []
    weights = rng.integers(min_weight, max_weight + 1, size=n_edges)

    edges = [Edge(int(u), int(v), int(w)) for u, v, w in zip(sources, dests, weights)]

    logger.info(f'Generated random graph on {n_vertices} vertices with {n_edges} edges')
    return Graph(n_vertices, edges)


def dense_graph(n_vertices: int,
                density: float = 0.5,
                min_weight: int = 1,
                max_weight: int = 100,
                seed: int | None = None) -> Graph:
    """Generate a simple graph (no self-loops, no parallel edges) where
    `density` is the fraction of all V*(V-1)/2 vertex pairs that get an edge.
    """
    if n_vertices < 0:
        raise ValueError('Vertex count must be non-negative')
    if not 0.0 <= density <= 1.0:
        raise ValueError(f'Density must lie in [0, 1], got {density}')
    _check_weights(min_weight, max_weight)

    total_edges = int(density * n_vertices * (n_vertices - 1) / 2)
    rng = np.random.default_rng(seed)

    # Only the upper triangle is used, so every pair appears once
    rows, cols = np.triu_indices(n_vertices, k=1)
    chosen = rng.choice(len(rows), size=total_edges, replace=False)

    adj_matrix = np.zeros((n_vertices, n_vertices), dtype=int)
    occupied = np.zeros((n_vertices, n_vertices), dtype=np.bool_)
    adj_matrix[rows[chosen], cols[chosen]] = rng.integers(min_weight, max_weight + 1, size=total_edges)
    occupied[rows[chosen], cols[chosen]] = True

    edges = []
    for i in range(n_vertices):
        for j in range(i+1, n_vertices):
            if occupied[i, j]:
                edges.append(Edge(i, j, int(adj_matrix[i, j])))

    logger.info(f'Generated graph on {n_vertices} vertices, density {density} ({total_edges} edges)')
    return Graph(n_vertices, edges)


def graph_from_bytes(data: bytes, max_vertices: int = MAX_FUZZ_VERTICES) -> Graph | None:
    """Decode an arbitrary byte string into a graph, for fuzzing.

    Byte 0 is the vertex count (at least 2, at most `max_vertices`). Every
    following group of three bytes is an edge (source, dest, weight); the
    endpoints are taken modulo the vertex count and self-loops are dropped.
    A trailing incomplete group is ignored. Returns None for empty input.
    """
    if len(data) < 1:
        return None

    n_vertices = min(max(data[0], 2), max_vertices)

    raw_edges = data[1:]
    edges = []
    for i in range(0, len(raw_edges) - 2, 3):
        u = raw_edges[i] % n_vertices
        v = raw_edges[i+1] % n_vertices
        w = raw_edges[i+2]

        if u != v:
            edges.append(Edge(u, v, w))

    return Graph(n_vertices, edges)


if __name__ == '__main__':
    import argparse

    from kruskal import kruskal_mst
    from logging_config import setup_logging

    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate random graphs and report their MST weight')
    parser.add_argument('nvertices', type=int)
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-e', '--edges', default=None, type=int,
                       help='number of uniformly random edges (self-loops and duplicates allowed)')
    group.add_argument('-d', '--density', default=0.5, type=float,
                       help='fraction of vertex pairs connected in a simple graph')
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()
    setup_logging(args.verbose)

    if args.edges is not None:
        graph = random_graph(args.nvertices, args.edges, args.min_weight, args.max_weight, args.seed)
    else:
        graph = dense_graph(args.nvertices, args.density, args.min_weight, args.max_weight, args.seed)

    if not args.quiet:
        print(f'Graph on {graph.n_vertices} vertices, {len(graph.edges)} edges')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    if args.verbose:
        print()
        print('Edges:')
        print(graph.edges)

    mst, total_weight = kruskal_mst(graph)
    print(f'MST: {len(mst)} edges, total weight {total_weight}')
