from hypothesis import given
from hypothesis import strategies as st

from algocollection.graphs import Graph

EDGES = [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]


def _graph(edges):
    graph = Graph()
    for source, target in edges:
        graph.add_edge(source, target)
    return graph


def test_bfs_driver_example():
    assert _graph(EDGES).bfs(2) == [2, 0, 3, 1]


def test_dfs_driver_example():
    assert _graph(EDGES).dfs(2) == [2, 0, 1, 3]


def test_isolated_start_visits_only_itself():
    graph = _graph(EDGES)
    assert graph.bfs(9) == [9]
    assert graph.dfs(9) == [9]


def test_edges_are_directed():
    graph = _graph([("a", "b")])
    assert graph.bfs("b") == ["b"]
    assert graph.dfs("a") == ["a", "b"]


def _reachable(edges, start):
    adjacency = {}
    for source, target in edges:
        adjacency.setdefault(source, []).append(target)
    seen = {start}
    pending = [start]
    while pending:
        for neighbour in adjacency.get(pending.pop(), []):
            if neighbour not in seen:
                seen.add(neighbour)
                pending.append(neighbour)
    return seen


edge_lists = st.lists(st.tuples(st.integers(0, 8), st.integers(0, 8)), max_size=30)


@given(edge_lists, st.integers(0, 8))
def test_walks_visit_each_reachable_vertex_once(edges, start):
    graph = _graph(edges)
    expected = _reachable(edges, start)
    for order in (graph.bfs(start), graph.dfs(start)):
        assert order[0] == start
        assert len(order) == len(set(order))
        assert set(order) == expected


@given(edge_lists, st.integers(0, 8))
def test_dfs_each_vertex_follows_an_earlier_one(edges, start):
    graph = _graph(edges)
    order = graph.dfs(start)
    edge_set = set(edges)
    for position, vertex in enumerate(order[1:], start=1):
        assert any((earlier, vertex) in edge_set for earlier in order[:position])