"""Ports layer - Abstract interfaces (Protocols) for the library.

Ports define the contracts between the graph core and external
collaborators. They enable dependency injection and make the system
testable.
"""

from .graph import (
    EdgeView,
    GraphRepositoryPort,
    GraphView,
    MatrixPort,
    RouteSolverPort,
)

__all__ = [
    "MatrixPort",
    "EdgeView",
    "GraphView",
    "GraphRepositoryPort",
    "RouteSolverPort",
]
