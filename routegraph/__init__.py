"""Top-level package for the route graph project.

This package exposes a generic directed graph engine (vertex/edge store
with depth-first, breadth-first and Dijkstra searches) together with the
road-network adapters used to plan routes between junctions.
"""

from .graph import (
    DirectedGraph,
    GraphPath,
    breadth_first_search,
    depth_first_search,
    dijkstra_shortest_path,
)

__all__ = [
    "DirectedGraph",
    "GraphPath",
    "depth_first_search",
    "breadth_first_search",
    "dijkstra_shortest_path",
]
