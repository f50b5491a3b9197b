import pytest

from kruskal import Graph


@pytest.fixture()
def small_graph() -> Graph:
    return Graph.from_triples(4, [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)])
