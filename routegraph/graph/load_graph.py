"""Graph loading from adjacency-matrix text files.

Row/column i of the matrix becomes the node keyed i, so a loaded graph
always satisfies the 0..N-1 key space the shortest-path algorithm needs.
"""

from pathlib import Path
from typing import Any, Optional, Union

from .digraph import Graph
from .matrix import read_matrix

MatrixGraph = Graph[int, Any, float]


def read_graph(
    path: Union[str, Path],
    value: Any = False,
    delimiter: Optional[str] = None,
) -> MatrixGraph:
    """Build a graph from the square matrix stored in path.

    Every node holds ``value``; cell (i, j) != 0 becomes edge i -> j.

    Raises:
        OSError: If the file cannot be opened.
        MatrixFormatError: If the file is not a numeric grid.
        NotSquareMatrixError: If the grid is not square.
    """
    matrix = read_matrix(path, delimiter=delimiter)
    # Sized on rows so that a non-square grid fails as "not square".
    nodes = [(i, value) for i in range(matrix.row_count())]
    return Graph.from_matrix(nodes, matrix)
