"""High-level route planning on the sample road network.

The pipeline is organized in a few stages:

1. Graph loading (from CSV files to an in-memory DirectedGraph).
2. Search selection (DFS, BFS or Dijkstra with a weight mapper).
3. Formatting of the result for display.

This module wires these stages together. Each step delegates work to
dedicated, testable modules.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from .adapters.graph import CSVGraphRepository, GraphSearchSolver
from .config import configure_logging, get_config
from .domain.errors import ConfigurationError, GraphLoadError, NoPathFoundError, VertexNotFoundError
from .domain.models import Road, road_length, road_travel_time
from .ports.graph import GraphRepositoryPort

WEIGHT_MAPPERS: Dict[str, Callable[[Road], float]] = {
    "length": road_length,
    "travel_time": road_travel_time,
}


def plan_route(
    start_id: str,
    target_id: str,
    algorithm: Optional[str] = None,
    weight: Optional[str] = None,
    *,
    repository: Optional[GraphRepositoryPort] = None,
) -> str:
    """Plan a route between two junctions and return a message.

    Algorithm and weight default to the search configuration. This
    helper is designed to be reused from other front-ends (CLI, tests,
    etc.).
    """
    config = get_config()
    algorithm = algorithm or config.search.default_algorithm
    weight = weight or config.search.default_weight

    weight_mapper = WEIGHT_MAPPERS.get(weight)
    if weight_mapper is None:
        return f"Unknown weight: {weight!r}"

    repository = repository if repository is not None else CSVGraphRepository(config.graph)
    solver = GraphSearchSolver(
        weight_mapper=weight_mapper,
        dijkstra_strategy=config.search.dijkstra_strategy,
    )

    try:
        graph = repository.load()
        path = solver.solve(graph, start_id, target_id, algorithm)
    except ConfigurationError as e:
        return f"Error: {e.message}"
    except GraphLoadError as e:
        return f"Error: {e}"
    except VertexNotFoundError as e:
        return f"Error: Unknown junction {e.vertex_id!r}"
    except NoPathFoundError as e:
        return f"No path found between {e.start} and {e.target}."

    path_str = " -> ".join(path.ids)
    result = f"Shortest path: {path_str}\nHops: {path.num_edges}"
    if algorithm == "dijkstra":
        result += f"\nTotal weight: {path.total_weight:g}"
    return result


def run_pipeline() -> None:
    """Plan a demo route on the sample network and print it."""
    configure_logging()

    start_id, target_id = "Amsterdam", "Maastricht"
    print(f"Route: {start_id} -> {target_id}")
    for algorithm in ("dfs", "bfs", "dijkstra"):
        print(f"[{algorithm}]")
        print(plan_route(start_id, target_id, algorithm))


if __name__ == "__main__":
    run_pipeline()
