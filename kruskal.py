import logging
from dataclasses import dataclass, field
from typing import NamedTuple

logger = logging.getLogger(__name__)


class GraphError(ValueError):
    """Raised when a graph is malformed."""


class InvalidVertexError(GraphError):
    """Raised when an edge references a vertex outside [0, n_vertices)."""

    def __init__(self, edge: 'Edge', n_vertices: int) -> None:
        self.edge = edge
        self.n_vertices = n_vertices
        super().__init__(f'Edge {edge} references a vertex outside [0, {n_vertices})')


class UnionFind:
    """Disjoint-set forest over the vertex indices 0..n_verts-1.

    Uses path compression in `find` and union by rank in `union`, which gives
    near-constant amortized cost per operation.
    """

    def __init__(self, n_verts: int) -> None:
        self.parent = list(range(n_verts))
        self.rank = [0] * n_verts
        self.n_components = n_verts

    def find(self, index: int) -> int:
        parent = self.parent

        root = index
        while parent[root] != root:
            root = parent[root]

        # point everything on the path directly at the root
        while index != root:
            next_index = parent[index]
            parent[index] = root
            index = next_index

        return root

    def union(self, root_a: int, root_b: int) -> None:
        """Merge the classes of two distinct roots (both already found).

        On equal rank `root_a` becomes the parent.
        """
        rank = self.rank

        if rank[root_a] < rank[root_b]:
            self.parent[root_a] = root_b
        elif rank[root_a] > rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            rank[root_a] += 1

        self.n_components -= 1

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)


class Edge(NamedTuple):
    source: int
    dest: int
    weight: int

    def __repr__(self):
        return f'({self.source}, {self.dest}, {self.weight})'


@dataclass
class Graph:
    n_vertices: int
    edges: list[Edge] = field(default_factory=list)

    @classmethod
    def from_triples(cls, n_vertices: int, triples) -> 'Graph':
        return cls(n_vertices, [Edge(*t) for t in triples])


def validate_graph(graph: Graph) -> None:
    if graph.n_vertices < 0:
        raise GraphError(f'Vertex count must be non-negative, got {graph.n_vertices}')

    n = graph.n_vertices
    for edge in graph.edges:
        if not (0 <= edge.source < n and 0 <= edge.dest < n):
            raise InvalidVertexError(edge, n)


def kruskal_mst(graph: Graph, inplace: bool = True) -> tuple[list[Edge], int]:
    """Compute a minimum spanning forest of `graph` with Kruskal's algorithm.

    Returns the accepted edges, in the order they were accepted (non-decreasing
    weight), and their total weight. On a disconnected graph the result is a
    forest with one tree per connected component.

    With `inplace=True` the caller's `graph.edges` list is sorted by weight in
    place; pass `inplace=False` (or copy the list beforehand) to keep the
    original order. Equal-weight edges keep their relative input order, but
    which of them ends up in the forest is not part of the contract.

    Raises:
        GraphError: the vertex count is negative.
        InvalidVertexError: an edge endpoint lies outside [0, n_vertices).
    """
    validate_graph(graph)

    # a spanning tree has at most V-1 edges
    tree_size = max(graph.n_vertices - 1, 0)

    if inplace:
        edges = graph.edges
        edges.sort(key=lambda e: e.weight)
    else:
        edges = sorted(graph.edges, key=lambda e: e.weight)

    uf = UnionFind(graph.n_vertices)
    mst = []
    total_weight = 0

    for edge in edges:
        if len(mst) == tree_size:
            break

        root_u = uf.find(edge.source)
        root_v = uf.find(edge.dest)

        if root_u != root_v:
            mst.append(edge)
            total_weight += edge.weight
            uf.union(root_u, root_v)

    logger.debug('kruskal: accepted %d of %d edges on %d vertices (%d components), weight %d',
                 len(mst), len(edges), graph.n_vertices, uf.n_components, total_weight)

    return mst, total_weight


if __name__ == '__main__':
    import argparse

    import graphgen
    from logging_config import setup_logging

    parser = argparse.ArgumentParser(prog='kruskal',
                                     description='Compute a minimum spanning forest of a random graph')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('nedges', type=int)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-v', '--verbose', action='store_true')

    args = parser.parse_args()
    setup_logging(args.verbose)

    graph = graphgen.random_graph(args.nvertices, args.nedges,
                                  min_weight=args.min_weight,
                                  max_weight=args.max_weight,
                                  seed=args.seed)
    mst, total_weight = kruskal_mst(graph)

    print('Final MST sum:', total_weight)
    if args.verbose:
        print(mst)
