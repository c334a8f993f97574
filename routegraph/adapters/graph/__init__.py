"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads a road network from CSV files
- GraphSearchSolver: Runs DFS, BFS or Dijkstra by name
"""

from .csv_repository import CSVGraphRepository
from .search_solver import SEARCH_ALGORITHMS, GraphSearchSolver

__all__ = ["CSVGraphRepository", "GraphSearchSolver", "SEARCH_ALGORITHMS"]
