from kruskal import UnionFind


def test_singletons():
    uf = UnionFind(5)

    assert [uf.find(i) for i in range(5)] == [0, 1, 2, 3, 4]
    assert uf.rank == [0] * 5
    assert uf.n_components == 5


def test_empty():
    uf = UnionFind(0)

    assert uf.parent == []
    assert uf.n_components == 0


def test_union_equal_rank_first_root_wins():
    uf = UnionFind(2)
    uf.union(1, 0)

    assert uf.parent == [1, 1]
    assert uf.rank == [0, 1]
    assert uf.n_components == 1


def test_union_by_rank():
    uf = UnionFind(3)
    uf.union(0, 1)  # rank[0] becomes 1

    # lower rank root goes under the higher one regardless of argument order
    uf.union(2, 0)

    assert uf.parent[2] == 0
    assert uf.rank == [1, 0, 0]
    assert uf.find(2) == 0


def test_path_compression():
    uf = UnionFind(5)
    # build the chain 4 -> 3 -> 2 -> 1 -> 0 by hand
    uf.parent = [0, 0, 1, 2, 3]

    assert uf.find(4) == 0
    assert uf.parent == [0, 0, 0, 0, 0]


def test_find_does_not_touch_other_paths():
    uf = UnionFind(6)
    uf.parent = [0, 0, 1, 3, 3, 4]

    assert uf.find(2) == 0
    assert uf.parent == [0, 0, 0, 3, 3, 4]


def test_connected():
    uf = UnionFind(4)
    uf.union(uf.find(0), uf.find(1))
    uf.union(uf.find(2), uf.find(3))

    assert uf.connected(0, 1)
    assert uf.connected(3, 2)
    assert not uf.connected(1, 2)

    uf.union(uf.find(1), uf.find(3))

    assert uf.connected(0, 2)
    assert uf.n_components == 1


def test_roots_are_their_own_parent():
    uf = UnionFind(100)
    for i in range(0, 99, 3):
        root_a, root_b = uf.find(i), uf.find(i + 1)
        if root_a != root_b:
            uf.union(root_a, root_b)

    for i in range(100):
        root = uf.find(i)
        assert uf.parent[root] == root


def test_long_chain_no_recursion_limit():
    n = 50000
    uf = UnionFind(n)
    uf.parent = [max(i - 1, 0) for i in range(n)]

    assert uf.find(n - 1) == 0
    assert uf.parent[n - 1] == 0
