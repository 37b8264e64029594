import pytest

from algobox.graphs import (
    Graph,
    bfs_order,
    can_reach,
    dijkstra,
    format_distances,
    maximal_network_rank,
)

DIJKSTRA_EDGES = [
    (0, 1, 4),
    (0, 7, 8),
    (1, 2, 8),
    (1, 7, 11),
    (2, 3, 7),
    (2, 8, 2),
    (2, 5, 4),
    (3, 4, 9),
    (3, 5, 14),
    (4, 5, 10),
    (5, 6, 2),
    (6, 7, 1),
    (6, 8, 6),
    (7, 8, 7),
]

BRIDGE_GRAPHS = [
    (5, [(1, 0), (0, 2), (2, 1), (0, 3), (3, 4)]),
    (4, [(0, 1), (1, 2), (2, 3)]),
    (7, [(0, 1), (1, 2), (2, 0), (1, 3), (1, 4), (1, 6), (3, 5), (4, 5)]),
]


def _build(n, edges):
    graph = Graph(n)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def _adjacency(n, edges):
    adjacency = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def test_bridges_first_graph():
    n, edges = BRIDGE_GRAPHS[0]
    assert _build(n, edges).bridges() == [(3, 4), (0, 3)]


def test_path_graph_every_edge_is_a_bridge():
    n, edges = BRIDGE_GRAPHS[1]
    found = _build(n, edges).bridges()
    assert {frozenset(e) for e in found} == {frozenset(e) for e in edges}


@pytest.mark.parametrize(("n", "edges"), BRIDGE_GRAPHS)
def test_bridges_are_exactly_the_disconnecting_edges(n, edges):
    found = {frozenset(e) for e in _build(n, edges).bridges()}
    for index, (u, v) in enumerate(edges):
        rest = edges[:index] + edges[index + 1 :]
        disconnects = v not in bfs_order(_adjacency(n, rest), u)
        assert (frozenset((u, v)) in found) == disconnects


def test_cycle_has_no_bridges():
    assert _build(3, [(0, 1), (1, 2), (2, 0)]).bridges() == []


def test_add_edge_rejects_unknown_vertex():
    graph = Graph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2)


def test_dijkstra_classic_example():
    assert dijkstra(9, DIJKSTRA_EDGES, 0) == [0, 4, 12, 19, 21, 11, 9, 8, 14]


def test_dijkstra_distances_are_consistent():
    dist = dijkstra(9, DIJKSTRA_EDGES, 3)
    assert dist[3] == 0
    for u, v, w in DIJKSTRA_EDGES:
        assert abs(dist[u] - dist[v]) <= w
    for vertex in range(9):
        if vertex == 3:
            continue
        assert any(
            dist[vertex] == dist[other] + w
            for a, b, w in DIJKSTRA_EDGES
            for x, other in ((a, b), (b, a))
            if x == vertex
        )


def test_dijkstra_unreachable_is_none():
    dist = dijkstra(4, [(0, 1, 3)], 0)
    assert dist == [0, 3, None, None]


def test_dijkstra_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra(2, [(0, 1, -1)], 0)


def test_dijkstra_rejects_bad_source():
    with pytest.raises(ValueError):
        dijkstra(2, [], 5)


def test_format_distances_layout():
    text = format_distances([0, 3, None], 0)
    lines = text.splitlines()
    assert lines[0] == "Vertex\t Distance from Source 0"
    assert lines[1] == "------\t ----------------------"
    assert lines[2:] == ["0\t\t0", "1\t\t3", "2\t\tINF"]


def test_bfs_order_visits_reachable_once():
    adjacency = _adjacency(6, [(0, 1), (0, 2), (1, 3), (2, 3), (4, 5)])
    order = bfs_order(adjacency, 0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3]
    assert order.index(3) > order.index(1)


def test_bfs_order_neighbour_order():
    adjacency = _adjacency(4, [(0, 2), (0, 1), (2, 3)])
    assert bfs_order(adjacency, 0) == [0, 2, 1, 3]


def test_bfs_order_rejects_bad_start():
    with pytest.raises(ValueError):
        bfs_order([[]], 3)


def test_maximal_network_rank_example():
    assert maximal_network_rank(4, [[0, 1], [0, 3], [1, 2], [1, 3]]) == 4


def test_maximal_network_rank_disjoint_roads():
    assert maximal_network_rank(4, [(0, 1), (2, 3)]) == 2


def test_maximal_network_rank_no_roads():
    assert maximal_network_rank(3, []) == 0
    assert maximal_network_rank(1, []) == 0


def test_can_reach_examples():
    assert can_reach([4, 2, 3, 0, 3, 1, 2], 5) is True
    assert can_reach([4, 2, 3, 0, 3, 1, 2], 0) is True
    assert can_reach([3, 0, 2, 1, 2], 2) is False


def test_can_reach_start_on_zero_and_out_of_range():
    assert can_reach([0], 0) is True
    assert can_reach([1, 0], 5) is False