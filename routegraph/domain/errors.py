"""Typed errors for the routegraph library.

Every error raised by the graph container, the shortest-path algorithm,
the matrix collaborator and the command surface inherits from
GraphLibError and can optionally wrap a root cause exception.

Errors fall in three groups:
- Structural violations (bad matrix shape) are fatal to construction.
- Missing keys are raised at the call site; callers may recover.
- Negative weights abort a shortest-path computation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class GraphLibError(Exception):
    """Base error for the routegraph library.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class StructuralError(GraphLibError):
    """Adjacency matrix does not fit the graph being built.

    Attributes:
        rows: Number of rows of the offending matrix
        cols: Number of columns of the offending matrix
    """

    rows: int = 0
    cols: int = 0


@dataclass
class NotSquareMatrixError(StructuralError):
    """Adjacency matrix has a different number of rows and columns."""


@dataclass
class SizeMismatchError(StructuralError):
    """Adjacency matrix dimension differs from the number of nodes.

    Attributes:
        node_count: Number of (key, value) pairs supplied with the matrix
    """

    node_count: int = 0


@dataclass
class KeyNotFoundError(GraphLibError, KeyError):
    """Node key is not present in the graph.

    Also a KeyError, so mapping-style callers can catch it as usual.

    Attributes:
        key: The key that was looked up
    """

    key: Any = None


@dataclass
class NegativeWeightError(GraphLibError):
    """Shortest-path computation met an edge with a negative weight.

    Attributes:
        source: Key the edge leaves from
        target: Key the edge points to
        weight: The negative weight
    """

    source: Any = None
    target: Any = None
    weight: Any = None


@dataclass
class KeySpaceError(GraphLibError):
    """Graph keys are not the contiguous integer range 0..N-1.

    Attributes:
        keys: The keys actually found in the graph
    """

    keys: tuple[Any, ...] = field(default_factory=tuple)


@dataclass
class MatrixFormatError(GraphLibError):
    """Data cannot be interpreted as a 2-D numeric grid.

    Attributes:
        file_path: Path to the matrix file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class GraphLoadError(GraphLibError):
    """Graph could not be loaded from persistent storage.

    Attributes:
        file_path: Path to the matrix file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class NoRouteFoundError(GraphLibError):
    """No path exists between the requested keys.

    Only raised by callers that ask for a strict answer; the algorithm
    itself reports unreachability as a normal result.

    Attributes:
        source: Source key
        destination: Destination key
    """

    source: Any = None
    destination: Any = None

