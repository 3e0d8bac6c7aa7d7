"""
Unit tests for dijkstra() on Graph.
"""

from pathlib import Path

import pytest

from routegraph.domain.errors import KeyNotFoundError, KeySpaceError, NegativeWeightError
from routegraph.domain.models import Route, Unreachable
from routegraph.graph.digraph import Graph
from routegraph.graph.dijkstra import dijkstra
from routegraph.graph.load_graph import read_graph


DATA_DIR = Path(__file__).resolve().parent / "data"


def make_graph(size, edges):
    g = Graph([(key, None) for key in range(size)])
    for source, target, weight in edges:
        g.insert_edge(source, target, weight)
    return g


@pytest.fixture
def four_nodes():
    # 0->2 (7), 0->3 (4), 1->0 (2), 3->2 (5)
    return make_graph(4, [(0, 2, 7), (0, 3, 4), (1, 0, 2), (3, 2, 5)])


def test_direct_edge_beats_longer_detour(four_nodes):
    result = dijkstra(four_nodes, 0, 2)

    assert result == Route(weight=7, path=(0, 2))


def test_node_without_outgoing_edges_cannot_reach(four_nodes):
    result = dijkstra(four_nodes, 2, 0)

    assert result == Unreachable(source=2, destination=0)
    assert not result.is_reachable


def test_multi_hop_route_is_chosen_when_shorter():
    g = make_graph(3, [(0, 1, 3.0), (0, 2, 10.0), (1, 2, 4.0)])

    result = dijkstra(g, 0, 2)

    assert result.path == (0, 1, 2)
    assert result.weight == 7.0
    assert result.num_hops == 2


def test_route_through_several_nodes():
    g = read_graph(DATA_DIR / "chain.txt")

    result = dijkstra(g, 0, 4)

    assert result.path == (0, 1, 2, 3, 4)
    assert result.weight == 7.0


def test_source_equals_destination():
    g = make_graph(2, [(0, 1, 1.0)])

    result = dijkstra(g, 1, 1)

    assert result == Route(weight=0, path=(1,))


def test_repeated_queries_are_identical(four_nodes):
    first = dijkstra(four_nodes, 1, 2)
    second = dijkstra(four_nodes, 1, 2)

    assert first == second
    assert first.path == (1, 0, 2)
    assert first.weight == 9


def test_ties_go_to_lowest_key():
    # Both 0->1->3 and 0->2->3 weigh 2; node 1 is finalized first.
    g = make_graph(4, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1)])

    assert dijkstra(g, 0, 3).path == (0, 1, 3)


def test_negative_weight_off_the_optimal_path_raises():
    g = make_graph(4, [(0, 1, 1), (0, 2, 5), (2, 3, -1), (1, 3, 1)])

    with pytest.raises(NegativeWeightError) as excinfo:
        dijkstra(g, 0, 3)

    assert excinfo.value.source == 2
    assert excinfo.value.target == 3
    assert excinfo.value.weight == -1


def test_negative_weight_unreachable_from_source_is_ignored():
    g = make_graph(3, [(0, 1, 2), (2, 0, -4)])

    assert dijkstra(g, 0, 1) == Route(weight=2, path=(0, 1))


def test_negative_weight_read_from_file_raises():
    g = read_graph(DATA_DIR / "negative.txt")

    with pytest.raises(NegativeWeightError):
        dijkstra(g, 0, 2)


def test_self_loop_does_not_affect_route():
    g = make_graph(2, [(0, 0, 1), (0, 1, 3)])

    assert dijkstra(g, 0, 1) == Route(weight=3, path=(0, 1))


def test_dangling_edge_is_skipped():
    g = make_graph(2, [(0, 9, 1), (0, 1, 2)])

    assert dijkstra(g, 0, 1) == Route(weight=2, path=(0, 1))


def test_unknown_endpoint_raises(four_nodes):
    with pytest.raises(KeyNotFoundError) as excinfo:
        dijkstra(four_nodes, 0, 4)

    assert excinfo.value.key == 4


def test_non_contiguous_keys_are_rejected():
    g = Graph([(0, None), (2, None)])

    with pytest.raises(KeySpaceError) as excinfo:
        dijkstra(g, 0, 2)

    assert excinfo.value.keys == (0, 2)


def test_non_integer_keys_are_rejected():
    g = Graph([("a", None), ("b", None)])
    g.insert_edge("a", "b", 1)

    with pytest.raises(KeySpaceError):
        dijkstra(g, "a", "b")


def test_float_keys_are_rejected():
    g = Graph([(0.0, None), (1.0, None)])
    g.insert_edge(0.0, 1.0, 1)

    with pytest.raises(KeySpaceError):
        dijkstra(g, 0, 1)


def test_float_endpoint_is_rejected(four_nodes):
    with pytest.raises(KeySpaceError) as excinfo:
        dijkstra(four_nodes, 0.0, 2)

    assert excinfo.value.keys == (0.0,)


def test_float_dangling_target_is_skipped():
    g = make_graph(2, [(0, 0.5, 1), (0, 1, 2)])

    assert dijkstra(g, 0, 1) == Route(weight=2, path=(0, 1))


def test_route_endpoints(four_nodes):
    route = dijkstra(four_nodes, 1, 2)

    assert route.source == 1
    assert route.destination == 2
