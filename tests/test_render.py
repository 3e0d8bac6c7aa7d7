from routegraph.domain.models import Route, Unreachable
from routegraph.graph.digraph import Graph
from routegraph.io.render import format_graph, format_route, format_weight


def test_format_route():
    text = format_route(Route(weight=7.0, path=(0, 2)))

    assert text == "weight: 7\nroute: 0 2"


def test_format_route_keeps_fractional_weight():
    assert format_route(Route(weight=2.5, path=(1, 0))).splitlines()[0] == "weight: 2.5"


def test_format_unreachable():
    assert format_route(Unreachable(source=2, destination=0)) == "no way"


def test_format_weight_falls_back_to_str():
    assert format_weight("heavy") == "heavy"


def test_format_empty_graph():
    assert format_graph(Graph()) == "> This graph is empty!"


def test_format_graph_lists_nodes_and_edges():
    g = Graph([(0, "a"), (1, "b")])
    g.insert_edge(0, 1, 3.0)

    assert format_graph(g).splitlines() == [
        "> Number of nodes: 2",
        "[0] stores: a and matches with:",
        "\t[1]\t with weight: 3",
        "[1] stores: b and matches with:",
    ]
