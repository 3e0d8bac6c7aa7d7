"""Route query service - Main orchestrator.

This service wires graph loading and route computation together for a
single source/destination query, as used by the command surface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Hashable

from ..domain.models import ShortestPath
from ..ports.graph import GraphRepositoryPort, GraphView, RouteSolverPort


@dataclass
class RouteQueryService:
    """Main service for answering shortest-path queries.

    This service orchestrates:
    1. Graph loading
    2. Route computation

    Attributes:
        graph_repository: Loads the graph
        route_solver: Computes shortest paths
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def graph(self) -> GraphView:
        """Return the graph queries run against."""
        return self.graph_repository.load()

    def query(self, source: Hashable, destination: Hashable) -> ShortestPath:
        """Answer a shortest-path query.

        Args:
            source: Source key.
            destination: Destination key.

        Returns:
            Route on success, Unreachable when no path exists.

        Raises:
            GraphLoadError: If the graph cannot be loaded.
            KeyNotFoundError: If source or destination is not in the graph.
            NegativeWeightError: If a reachable edge has a negative weight.
        """
        graph = self.graph()
        self._logger.debug("Graph loaded", extra={"nodes": len(graph)})

        result = self.route_solver.solve(graph, source, destination)
        self._logger.info(
            "Query answered",
            extra={
                "source": source,
                "destination": destination,
                "reachable": result.is_reachable,
            },
        )
        return result
