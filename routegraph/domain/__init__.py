"""Domain layer - Result models and errors.

This module contains immutable result models and typed errors
used throughout the library. No external dependencies.
"""

from .errors import (
    GraphLibError,
    GraphLoadError,
    KeyNotFoundError,
    KeySpaceError,
    MatrixFormatError,
    NegativeWeightError,
    NoRouteFoundError,
    NotSquareMatrixError,
    SizeMismatchError,
    StructuralError,
)
from .models import Route, ShortestPath, Unreachable

__all__ = [
    # Models
    "Route",
    "Unreachable",
    "ShortestPath",
    # Errors
    "GraphLibError",
    "StructuralError",
    "NotSquareMatrixError",
    "SizeMismatchError",
    "KeyNotFoundError",
    "NegativeWeightError",
    "KeySpaceError",
    "MatrixFormatError",
    "GraphLoadError",
    "NoRouteFoundError",
]
