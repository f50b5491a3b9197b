from kruskal import Edge, UnionFind


def has_cycle(n_vertices: int, edges: list[Edge]) -> bool:
    """True if uniting the endpoints of `edges` ever joins a class to itself."""
    uf = UnionFind(n_vertices)
    for edge in edges:
        root_u = uf.find(edge.source)
        root_v = uf.find(edge.dest)
        if root_u == root_v:
            return True
        uf.union(root_u, root_v)
    return False
