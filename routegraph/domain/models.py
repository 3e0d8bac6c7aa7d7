"""Immutable result models for shortest-path queries.

All models are frozen dataclasses with slots for memory efficiency.
A query either yields a Route or an Unreachable marker; unreachability
is a normal outcome, not an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Route:
    """Shortest route between two keys.

    Attributes:
        weight: Total weight of the route
        path: Ordered tuple of keys from source to destination (inclusive)
    """

    weight: Any
    path: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def is_reachable(self) -> bool:
        return True

    @property
    def source(self) -> Any:
        """Return the first key of the route."""
        return self.path[0]

    @property
    def destination(self) -> Any:
        """Return the last key of the route."""
        return self.path[-1]

    @property
    def num_hops(self) -> int:
        """Return the number of edges traversed."""
        return len(self.path) - 1


@dataclass(frozen=True, slots=True)
class Unreachable:
    """Destination cannot be reached from the source.

    Attributes:
        source: Source key of the query
        destination: Destination key of the query
    """

    source: Any
    destination: Any

    @property
    def is_reachable(self) -> bool:
        return False


ShortestPath = Union[Route, Unreachable]
