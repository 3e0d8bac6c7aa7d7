"""Graph node: a payload value plus its outgoing edges.

A Node does not know its own key; the owning Graph's mapping key is
authoritative. Edges are unique by target key and iterate in ascending
target order.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

from ..domain.errors import KeyNotFoundError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
W = TypeVar("W")


class Node(Generic[K, V, W]):
    """Payload value and outgoing edge set (target key -> weight)."""

    __slots__ = ("value", "_edges")

    def __init__(self, value: Optional[V] = None) -> None:
        self.value = value
        self._edges: Dict[K, W] = {}

    # --- Support methods -----------------------------------------------------

    def empty(self) -> bool:
        """Return True if the node has no outgoing edges."""
        return not self._edges

    def size(self) -> int:
        """Return the number of outgoing edges."""
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def clear(self) -> None:
        """Remove every outgoing edge, keeping the value."""
        self._edges.clear()

    def __contains__(self, target: object) -> bool:
        return target in self._edges

    def __iter__(self) -> Iterator[Tuple[K, W]]:
        for target in sorted(self._edges):
            yield target, self._edges[target]

    def targets(self) -> List[K]:
        """Return the edge targets in ascending order."""
        return sorted(self._edges)

    def weight(self, target: K) -> W:
        """Return the weight of the edge to target.

        Raises:
            KeyNotFoundError: If there is no edge to target.
        """
        try:
            return self._edges[target]
        except KeyError:
            raise KeyNotFoundError(f"No edge to key: {target!r}", key=target)

    # --- Insertion & erasing edges -------------------------------------------

    def insert_edge(self, target: K, weight: W) -> bool:
        """Add an edge to target unless one exists.

        Returns:
            True if inserted, False if an edge to target was already present
            (its weight is left untouched).
        """
        if target in self._edges:
            return False
        self._edges[target] = weight
        return True

    def insert_or_assign_edge(self, target: K, weight: W) -> bool:
        """Add an edge to target or overwrite its weight.

        Returns:
            True if inserted, False if an existing weight was overwritten.
        """
        inserted = target not in self._edges
        self._edges[target] = weight
        return inserted

    def erase_edge(self, target: K) -> bool:
        """Remove the edge to target; return whether it existed."""
        return self._edges.pop(target, _MISSING) is not _MISSING

    # --- Value semantics -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.value == other.value and self._edges == other._edges

    __hash__ = None  # type: ignore[assignment]

    def __deepcopy__(self, memo: Dict[int, Any]) -> Node[K, V, W]:
        clone: Node[K, V, W] = Node(copy.deepcopy(self.value, memo))
        clone._edges = dict(self._edges)
        return clone

    def __repr__(self) -> str:
        return f"Node(value={self.value!r}, edges={dict(self)!r})"


_MISSING = object()
