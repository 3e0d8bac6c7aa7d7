"""Tests for the Dijkstra route solver adapter."""

import logging

import pytest

from routegraph.adapters.graph import DijkstraRouteSolver
from routegraph.domain.errors import KeyNotFoundError, NoRouteFoundError
from routegraph.domain.models import Route, Unreachable
from routegraph.graph.digraph import Graph


@pytest.fixture
def graph():
    g = Graph([(key, None) for key in range(4)])
    g.insert_edge(0, 2, 7.0)
    g.insert_edge(0, 3, 4.0)
    g.insert_edge(1, 0, 2.0)
    g.insert_edge(3, 2, 5.0)
    return g


class TestDijkstraRouteSolver:
    """Test suite for DijkstraRouteSolver."""

    def test_solve_returns_route(self, graph):
        result = DijkstraRouteSolver().solve(graph, 0, 2)

        assert result == Route(weight=7.0, path=(0, 2))

    def test_solve_returns_unreachable_and_warns(self, graph, caplog):
        with caplog.at_level(logging.WARNING):
            result = DijkstraRouteSolver().solve(graph, 2, 0)

        assert result == Unreachable(source=2, destination=0)
        assert "No route found" in caplog.text

    def test_solve_logs_found_route(self, graph, caplog):
        with caplog.at_level(logging.INFO):
            DijkstraRouteSolver().solve(graph, 1, 2)

        record = next(r for r in caplog.records if r.getMessage() == "Route found")
        assert record.hops == 2
        assert record.weight == 9.0

    def test_solve_strict_returns_route(self, graph):
        assert DijkstraRouteSolver().solve_strict(graph, 1, 3).path == (1, 0, 3)

    def test_solve_strict_raises_when_unreachable(self, graph):
        with pytest.raises(NoRouteFoundError) as excinfo:
            DijkstraRouteSolver().solve_strict(graph, 2, 0)

        assert excinfo.value.source == 2
        assert excinfo.value.destination == 0

    def test_unknown_key_propagates(self, graph):
        with pytest.raises(KeyNotFoundError):
            DijkstraRouteSolver().solve(graph, 0, 7)
