"""Graph container, matrix collaborator and shortest-path algorithm.

This subpackage contains the in-memory weighted directed graph, the
adjacency-matrix reader/writer used to build it, and Dijkstra's
algorithm running on top of it.
"""

from .digraph import Graph
from .dijkstra import dijkstra
from .load_graph import read_graph
from .matrix import AdjacencyMatrix, matrix_from_graph, read_matrix, write_matrix
from .node import Node

__all__ = [
    "Graph",
    "Node",
    "AdjacencyMatrix",
    "read_matrix",
    "write_matrix",
    "matrix_from_graph",
    "read_graph",
    "dijkstra",
]
