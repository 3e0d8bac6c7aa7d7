"""Text rendering of graphs and shortest-path results.

These helpers produce the exact text printed by the command surface,
kept separate from printing so they can be reused and tested.
"""

import numbers
from typing import Any, List

from ..domain.models import Route, ShortestPath
from ..ports.graph import GraphView

NO_ROUTE_TEXT = "no way"
EMPTY_GRAPH_TEXT = "> This graph is empty!"


def format_weight(weight: Any) -> str:
    """Format a numeric weight the way a C-style ``%g`` would."""
    if isinstance(weight, numbers.Real):
        return f"{float(weight):g}"
    return str(weight)


def format_route(result: ShortestPath) -> str:
    """Render a query result.

    Returns
    -------
    str
        ``"no way"`` for an unreachable destination, otherwise two lines:
        ``"weight: <w>"`` and ``"route: <k0> <k1> ... <kn>"``.
    """
    if not isinstance(result, Route):
        return NO_ROUTE_TEXT
    route = " ".join(str(key) for key in result.path)
    return f"weight: {format_weight(result.weight)}\nroute: {route}"


def format_graph(graph: GraphView) -> str:
    """Render every node with its value and outgoing edges."""
    if len(graph) == 0:
        return EMPTY_GRAPH_TEXT

    lines: List[str] = [f"> Number of nodes: {len(graph)}"]
    for key in graph.keys():
        node: Any = graph.get_node(key)
        lines.append(f"[{key}] stores: {node.value} and matches with:")
        for target, weight in node:
            lines.append(f"\t[{target}]\t with weight: {format_weight(weight)}")
    return "\n".join(lines)
