"""Shortest-path computation using Dijkstra's algorithm.

The algorithm indexes its distance and predecessor tables by position,
so the graph's keys must be exactly the integers 0..N-1. This is checked
up front and reported with KeySpaceError rather than assumed.

Minimum selection is a linear scan, giving O(V^2) overall.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, List, Optional

from ..domain.errors import KeyNotFoundError, KeySpaceError, NegativeWeightError
from ..domain.models import Route, ShortestPath, Unreachable
from ..ports.graph import GraphView


def dijkstra(graph: GraphView, source: int, destination: int) -> ShortestPath:
    """Compute the shortest path between two keys.

    Parameters
    ----------
    graph:
        Graph whose keys are the integers ``0..len(graph) - 1``.
    source:
        Key of the departure node.
    destination:
        Key of the arrival node.

    Returns
    -------
    Route or Unreachable
        ``Route(weight, path)`` with the path from ``source`` to
        ``destination`` (inclusive), or ``Unreachable`` if no path exists.

    Raises
    ------
    KeySpaceError
        If the keys are not the contiguous range ``0..N-1``, or an
        endpoint is not an integer.
    KeyNotFoundError
        If ``source`` or ``destination`` is not a node of the graph.
    NegativeWeightError
        If an edge with a negative weight leaves a node reachable from
        ``source``, whether or not it lies on the shortest path.
    """
    size = _check_key_space(graph)
    for key in (source, destination):
        if not _is_position(key):
            raise KeySpaceError(
                f"Dijkstra requires integer keys, got {key!r}", keys=(key,)
            )
        if key not in graph:
            raise KeyNotFoundError(f"No such key: {key!r}", key=key)

    distances: List[Any] = [math.inf] * size
    visited: List[bool] = [False] * size
    previous: List[Optional[int]] = [None] * size
    distances[source] = 0

    while True:
        current = _min_not_visited(distances, visited)
        if current is None:
            break

        for target, weight in graph.get_node(current):
            if weight < 0:
                raise NegativeWeightError(
                    f"Negative weight on edge {current} -> {target}: {weight}",
                    source=current,
                    target=target,
                    weight=weight,
                )
            # Dangling edge: the target is not a node, so no route uses it.
            if not _is_position(target) or target not in graph:
                continue
            candidate = distances[current] + weight
            if candidate < distances[target]:
                distances[target] = candidate
                previous[target] = current

        visited[current] = True

    if destination != source and previous[destination] is None:
        return Unreachable(source=source, destination=destination)

    path: List[int] = [destination]
    while path[-1] != source:
        hop = previous[path[-1]]
        assert hop is not None
        path.append(hop)
    path.reverse()

    return Route(weight=distances[destination], path=tuple(path))


def _min_not_visited(distances: List[Any], visited: List[bool]) -> Optional[int]:
    """Return the unvisited position with the smallest finite distance.

    Ties go to the lowest position. None when every remaining node is
    visited or unreachable.
    """
    best: Optional[int] = None
    for index, distance in enumerate(distances):
        if visited[index] or distance == math.inf:
            continue
        if best is None or distance < distances[best]:
            best = index
    return best


def _check_key_space(graph: GraphView) -> int:
    keys = list(graph.keys())
    if not all(map(_is_position, keys)) or keys != list(range(len(keys))):
        raise KeySpaceError(
            "Dijkstra requires graph keys to be the integers 0..N-1",
            keys=tuple(keys),
        )
    return len(keys)


def _is_position(key: Any) -> bool:
    return isinstance(key, numbers.Integral) and not isinstance(key, bool)
