"""Generic directed graph engine.

This subpackage contains the graph store and the three searches that
run on top of it: depth-first, breadth-first and Dijkstra.
"""

from .bfs import breadth_first_search
from .dfs import depth_first_search
from .dijkstra import DijkstraStrategy, dijkstra_shortest_path
from .directed_graph import DirectedGraph
from .path import GraphPath

__all__ = [
    "DirectedGraph",
    "GraphPath",
    "DijkstraStrategy",
    "depth_first_search",
    "breadth_first_search",
    "dijkstra_shortest_path",
]
