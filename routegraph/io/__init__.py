"""Input/output helpers for routegraph.

Reading and writing the persisted matrix format lives in graph/matrix.py;
this subpackage renders graphs and query results as text.
"""

from .render import format_graph, format_route

__all__ = ["format_graph", "format_route"]
