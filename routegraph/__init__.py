"""Top-level package for routegraph.

A small in-memory algorithms library: a generic weighted directed graph
container, an adjacency-matrix collaborator to build it from text files,
and Dijkstra's single-source/single-destination shortest-path query.
"""

from .domain.models import Route, ShortestPath, Unreachable
from .graph import AdjacencyMatrix, Graph, Node, dijkstra, read_graph

__all__ = [
    "Graph",
    "Node",
    "AdjacencyMatrix",
    "read_graph",
    "dijkstra",
    "Route",
    "Unreachable",
    "ShortestPath",
]
