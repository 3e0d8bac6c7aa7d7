"""Graph ports - Abstractions for matrices, graph loading and routing.

These protocols define the contracts between the graph core and its
collaborators: the matrix supplier used at construction time, the read
contract the shortest-path algorithm relies on, and the loader/solver
pair used by the command surface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Hashable, Iterable, Iterator, Protocol, Tuple

if TYPE_CHECKING:
    from ..domain.models import ShortestPath


class MatrixPort(Protocol):
    """Rectangular numeric grid.

    Implementation: graph/matrix.py (AdjacencyMatrix)
    """

    def row_count(self) -> int:
        ...

    def col_count(self) -> int:
        ...

    def __getitem__(self, index: Tuple[int, int]) -> Any:
        """Return the cell at (row, column)."""
        ...


class EdgeView(Protocol):
    """Outgoing edges of a single node."""

    def __iter__(self) -> Iterator[Tuple[Hashable, Any]]:
        """Iterate over (target, weight) pairs in target order."""
        ...


class GraphView(Protocol):
    """Read contract consumed by the shortest-path algorithm.

    Implementation: graph/digraph.py (Graph)
    """

    def __len__(self) -> int:
        ...

    def __contains__(self, key: object) -> bool:
        ...

    def keys(self) -> Iterable[Hashable]:
        """Iterate over node keys in ascending order."""
        ...

    def get_node(self, key: Hashable) -> EdgeView:
        """Return the node stored under key, raising if absent."""
        ...


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/matrix_repository.py
    """

    def load(self) -> GraphView:
        """Load the graph.

        Returns:
            The graph built from persistent storage.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        graph: GraphView,
        source: Hashable,
        destination: Hashable,
    ) -> ShortestPath:
        """Find the shortest path between two keys.

        Args:
            graph: The graph to search.
            source: Source key.
            destination: Destination key.

        Returns:
            Route on success, Unreachable when no path exists.
        """
        ...
