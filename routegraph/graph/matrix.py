"""Adjacency matrices and their plain-text persisted format.

The persisted format is a square numeric grid, row-major, one row per
line with whitespace-delimited cells (or a configured delimiter).
A cell equal to 0 means "no edge".
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

from ..domain.errors import KeySpaceError, MatrixFormatError
from ..ports.graph import GraphView


class AdjacencyMatrix:
    """Rectangular numeric grid backed by a 2-D numpy array.

    Implements MatrixPort. Cells are returned as plain Python scalars.
    """

    def __init__(self, data: ArrayLike) -> None:
        try:
            array = np.asarray(data, dtype=float)
        except (TypeError, ValueError) as e:
            raise MatrixFormatError("Matrix data is not a numeric grid", cause=e)
        if array.size == 0 and array.ndim != 2:
            array = array.reshape(0, 0)
        if array.ndim != 2:
            raise MatrixFormatError(
                f"Matrix data must be 2-D, got {array.ndim} dimension(s)"
            )
        self._data = array

    def row_count(self) -> int:
        return int(self._data.shape[0])

    def col_count(self) -> int:
        return int(self._data.shape[1])

    def is_square(self) -> bool:
        return self.row_count() == self.col_count()

    def __getitem__(self, index: Tuple[int, int]) -> float:
        return self._data[index].item()

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the underlying array."""
        return self._data.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyMatrix):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AdjacencyMatrix({self._data.tolist()!r})"


def read_matrix(
    path: Union[str, Path], delimiter: Optional[str] = None
) -> AdjacencyMatrix:
    """Read a matrix from a text file.

    Args:
        path: Path to the matrix file.
        delimiter: Cell delimiter; None splits on any whitespace.

    Raises:
        OSError: If the file cannot be opened.
        MatrixFormatError: If the content is not a rectangular numeric grid.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MatrixFormatError(
            f"Matrix file is not UTF-8 text: {path}", file_path=str(path), cause=e
        )
    if not text.strip():
        return AdjacencyMatrix(np.empty((0, 0)))

    try:
        data = np.loadtxt(text.splitlines(), delimiter=delimiter, ndmin=2, dtype=float)
    except ValueError as e:
        raise MatrixFormatError(
            f"Malformed matrix file: {path}", file_path=str(path), cause=e
        )
    return AdjacencyMatrix(data)


def write_matrix(
    path: Union[str, Path],
    matrix: Union[AdjacencyMatrix, ArrayLike],
    delimiter: str = " ",
) -> None:
    """Write a matrix to a text file, one row per line.

    Cells are written with 17 significant digits so they read back exactly.
    """
    if not isinstance(matrix, AdjacencyMatrix):
        matrix = AdjacencyMatrix(matrix)
    np.savetxt(Path(path), matrix.to_numpy(), fmt="%.17g", delimiter=delimiter)


def matrix_from_graph(graph: GraphView) -> AdjacencyMatrix:
    """Convert a graph keyed 0..N-1 back into an adjacency matrix.

    Absent edges become 0; edges pointing outside 0..N-1 are dropped.

    Raises:
        KeySpaceError: If the keys are not exactly 0..N-1.
    """
    keys = list(graph.keys())
    size = len(keys)
    if not all(_is_position(key, size) for key in keys) or keys != list(range(size)):
        raise KeySpaceError(
            "Graph keys must be the integers 0..N-1 to form a matrix",
            keys=tuple(keys),
        )

    data = np.zeros((size, size))
    for source in keys:
        for target, weight in graph.get_node(source):
            if _is_position(target, size):
                data[source, target] = weight
    return AdjacencyMatrix(data)


def _is_position(key: Any, size: int) -> bool:
    return (
        isinstance(key, (int, np.integer)) and not isinstance(key, bool) and 0 <= key < size
    )
