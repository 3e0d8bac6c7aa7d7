"""Generic weighted directed graph container.

Nodes are stored under unique keys and iterate in ascending key order,
so keys must be mutually orderable. Each node owns its outgoing edges.

Invariants:
- An edge u -> v can only be inserted while u is a node of the graph.
- The target v is not validated: edges may point at absent keys.
- Erasing a node also erases every edge that targets it.

Value access comes in two flavours that differ on absent keys:
``graph.at(key)`` raises KeyNotFoundError and never creates anything,
while ``graph[key]`` creates a node holding the default value (as
produced by ``default_factory``) and returns that value.
"""

from __future__ import annotations

import copy
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from ..domain.errors import (
    KeyNotFoundError,
    NotSquareMatrixError,
    SizeMismatchError,
)
from ..ports.graph import MatrixPort
from .node import Node

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
W = TypeVar("W")


class Graph(Generic[K, V, W]):
    """Directed, weighted graph backed by a key -> Node mapping.

    Example:
        graph = Graph([(0, "a"), (1, "b")])
        graph.insert_edge(0, 1, 2.5)
        graph.degree_in(1)  # 1
    """

    def __init__(
        self,
        nodes: Optional[Iterable[Tuple[K, V]]] = None,
        *,
        default_factory: Optional[Callable[[], V]] = None,
    ) -> None:
        self._nodes: Dict[K, Node[K, V, W]] = {}
        self.default_factory = default_factory
        for key, value in nodes or ():
            self.insert_node(key, value)

    @classmethod
    def from_matrix(
        cls,
        nodes: Sequence[Tuple[K, V]],
        matrix: MatrixPort,
        *,
        default_factory: Optional[Callable[[], V]] = None,
    ) -> Graph[K, V, W]:
        """Build a graph from (key, value) pairs and a square weight matrix.

        Cell (i, j) different from zero creates the edge
        ``nodes[i] key -> nodes[j] key`` with that weight.

        Raises:
            NotSquareMatrixError: If the matrix is not square.
            SizeMismatchError: If the matrix dimension differs from len(nodes).
        """
        rows, cols = matrix.row_count(), matrix.col_count()
        if rows != cols:
            raise NotSquareMatrixError(
                f"Adjacency matrix is not square: {rows}x{cols}",
                rows=rows,
                cols=cols,
            )
        if rows != len(nodes):
            raise SizeMismatchError(
                f"Adjacency matrix is {rows}x{cols} but {len(nodes)} nodes were given",
                rows=rows,
                cols=cols,
                node_count=len(nodes),
            )

        graph: Graph[K, V, W] = cls(nodes, default_factory=default_factory)
        keys = [key for key, _ in nodes]
        for i in range(rows):
            for j in range(cols):
                weight = matrix[i, j]
                if weight != 0:
                    graph.insert_edge(keys[i], keys[j], weight)
        return graph

    # --- Support methods -----------------------------------------------------

    def empty(self) -> bool:
        return not self._nodes

    def size(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def clear(self) -> None:
        """Remove every node (and therefore every edge)."""
        self._nodes.clear()

    def swap(self, other: Graph[K, V, W]) -> None:
        """Exchange contents with another graph."""
        self._nodes, other._nodes = other._nodes, self._nodes
        self.default_factory, other.default_factory = other.default_factory, self.default_factory

    def copy(self) -> Graph[K, V, W]:
        """Return an independent copy of the whole structure."""
        return copy.deepcopy(self)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._nodes == other._nodes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        nodes = {key: node for key, node in self}
        return f"Graph({nodes!r})"

    # --- Iteration -----------------------------------------------------------

    def keys(self) -> List[K]:
        """Return node keys in ascending order."""
        return sorted(self._nodes)

    def __iter__(self) -> Iterator[Tuple[K, Node[K, V, W]]]:
        for key in sorted(self._nodes):
            yield key, self._nodes[key]

    def edges(self) -> Iterator[Tuple[K, K, W]]:
        """Iterate over (source, target, weight) triples in key order."""
        for key, node in self:
            for target, weight in node:
                yield key, target, weight

    # --- Node features -------------------------------------------------------

    def degree_in(self, key: K) -> int:
        """Count the nodes holding an edge that targets key."""
        self._require(key)
        return sum(1 for node in self._nodes.values() if key in node)

    def degree_out(self, key: K) -> int:
        """Count the outgoing edges of key."""
        return self._require(key).size()

    def loop(self, key: K) -> bool:
        """Return True if key has a self-edge."""
        return key in self._require(key)

    # --- Accessors -----------------------------------------------------------

    def at(self, key: K) -> V:
        """Return the value stored under key.

        Raises:
            KeyNotFoundError: If key is absent. Never creates a node.
        """
        return self._require(key).value

    def __getitem__(self, key: K) -> V:
        # Creates a default-valued node when key is absent.
        node = self._nodes.get(key)
        if node is None:
            node = self._nodes[key] = Node(self._default_value())
        return node.value

    def __setitem__(self, key: K, value: V) -> None:
        node = self._nodes.get(key)
        if node is None:
            self._nodes[key] = Node(value)
        else:
            node.value = value

    def get_node(self, key: K) -> Node[K, V, W]:
        """Return the node stored under key, raising if absent."""
        return self._require(key)

    # --- Insertion & erasing nodes -------------------------------------------

    def insert_node(self, key: K, value: V) -> bool:
        """Add a node unless key exists; return whether it was inserted."""
        if key in self._nodes:
            return False
        self._nodes[key] = Node(value)
        return True

    def insert_or_assign_node(self, key: K, value: V) -> bool:
        """Store a fresh node under key, replacing any existing one.

        The replaced node's edges are dropped with it.

        Returns:
            True if inserted, False if an existing node was replaced.
        """
        inserted = key not in self._nodes
        self._nodes[key] = Node(value)
        return inserted

    def erase_node(self, key: K) -> bool:
        """Remove key and every edge targeting it; return whether it existed."""
        for node in self._nodes.values():
            node.erase_edge(key)
        return self._nodes.pop(key, None) is not None

    # --- Insertion & erasing edges -------------------------------------------

    def insert_edge(self, source: K, target: K, weight: W) -> bool:
        """Add source -> target unless that edge exists.

        Raises:
            KeyNotFoundError: If source is absent.
        """
        return self._require(source).insert_edge(target, weight)

    def insert_or_assign_edge(self, source: K, target: K, weight: W) -> bool:
        """Add source -> target or overwrite its weight.

        Raises:
            KeyNotFoundError: If source is absent.
        """
        return self._require(source).insert_or_assign_edge(target, weight)

    def clear_edges(self) -> None:
        """Remove all edges from all nodes, keeping values."""
        for node in self._nodes.values():
            node.clear()

    def erase_edges_go_from(self, key: K) -> bool:
        """Remove all outgoing edges of key; False if key is absent."""
        node = self._nodes.get(key)
        if node is None:
            return False
        node.clear()
        return True

    def erase_edges_go_to(self, key: K) -> bool:
        """Remove all edges targeting key; False if key is absent.

        Edges dangling to an absent key are removed all the same.
        """
        for node in self._nodes.values():
            node.erase_edge(key)
        return key in self._nodes

    # --- Internals -----------------------------------------------------------

    def _require(self, key: K) -> Node[K, V, W]:
        node = self._nodes.get(key)
        if node is None:
            raise KeyNotFoundError(f"No such key: {key!r}", key=key)
        return node

    def _default_value(self) -> Any:
        if self.default_factory is None:
            return None
        return self.default_factory()
