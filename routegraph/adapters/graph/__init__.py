"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextMatrixGraphRepository: Loads a graph from an adjacency matrix file
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .matrix_repository import TextMatrixGraphRepository

__all__ = ["TextMatrixGraphRepository", "DijkstraRouteSolver"]
