"""Adjacency-matrix graph repository adapter.

This adapter wraps graph/load_graph.py and adds:
- Configuration injection (path and delimiter from config)
- Caching of the loaded graph
- Wrapping of I/O and parse failures into GraphLoadError
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError, MatrixFormatError
from ...graph.load_graph import MatrixGraph, read_graph


@dataclass
class TextMatrixGraphRepository:
    """Graph repository that loads from a plain-text adjacency matrix.

    Implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (data dir, file name, delimiter)
        path: Explicit matrix file, overriding config.matrix_path
        node_value: Value stored in every loaded node
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    path: Optional[Path] = None
    node_value: Any = False
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[MatrixGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is not None:
            self.path = Path(self.path)

    @property
    def matrix_path(self) -> Path:
        """The file this repository reads."""
        return self.path if self.path is not None else self.config.matrix_path

    def load(self) -> MatrixGraph:
        """Load the graph from the matrix file.

        Returns:
            The graph keyed 0..N-1.

        Raises:
            GraphLoadError: If the file cannot be read or parsed.
            NotSquareMatrixError: If the matrix is not square.
        """
        if self._graph is not None:
            return self._graph

        path = self.matrix_path
        self._logger.debug("Loading graph", extra={"matrix_path": str(path)})

        try:
            graph = read_graph(path, value=self.node_value, delimiter=self.config.delimiter)
        except (OSError, MatrixFormatError) as e:
            raise GraphLoadError(
                f"Failed to load graph from {path}",
                file_path=str(path),
                cause=e,
            )

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph), "edges": sum(1 for _ in graph.edges())},
        )
        return graph

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
