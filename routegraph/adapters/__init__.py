"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph core to external systems like:
- Graph storage (plain-text adjacency matrix files)
- Route solvers (Dijkstra)
"""
