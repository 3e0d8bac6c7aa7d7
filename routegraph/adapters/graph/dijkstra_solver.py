"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Logging of each query and its outcome
- A strict variant raising NoRouteFoundError for callers that treat
  unreachability as a failure
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Hashable

from ...domain.errors import NoRouteFoundError
from ...domain.models import Route, ShortestPath
from ...graph.dijkstra import dijkstra
from ...ports.graph import GraphView


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    Implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: GraphView,
        source: Hashable,
        destination: Hashable,
    ) -> ShortestPath:
        """Find the shortest path between two keys.

        Args:
            graph: Graph keyed 0..N-1.
            source: Source key.
            destination: Destination key.

        Returns:
            Route on success, Unreachable when no path exists.

        Raises:
            KeyNotFoundError: If source or destination is not in the graph.
            KeySpaceError: If the graph keys are not 0..N-1.
            NegativeWeightError: If a reachable edge has a negative weight.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "destination": destination, "nodes": len(graph)},
        )

        result = dijkstra(graph, source, destination)  # type: ignore[arg-type]

        if not result.is_reachable:
            self._logger.warning(
                "No route found",
                extra={"source": source, "destination": destination},
            )
            return result

        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "destination": destination,
                "hops": result.num_hops,
                "weight": result.weight,
            },
        )
        return result

    def solve_strict(
        self,
        graph: GraphView,
        source: Hashable,
        destination: Hashable,
    ) -> Route:
        """Find the shortest path, raising if there is none.

        Like solve(), but turns an Unreachable outcome into an error.

        Raises:
            NoRouteFoundError: If no path exists.
        """
        result = self.solve(graph, source, destination)
        if isinstance(result, Route):
            return result
        raise NoRouteFoundError(
            f"No path from {source} to {destination}",
            source=source,
            destination=destination,
        )
