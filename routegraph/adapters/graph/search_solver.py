"""Graph search solver adapter.

This adapter puts one interface over the three searches of the graph
engine and adds:
- Algorithm selection by name
- Strict (raising) and safe (None-returning) variants
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Union

from ...domain.errors import ConfigurationError, NoPathFoundError, VertexNotFoundError
from ...graph.bfs import breadth_first_search
from ...graph.dfs import depth_first_search
from ...graph.dijkstra import DijkstraStrategy, dijkstra_shortest_path
from ...graph.directed_graph import DirectedGraph
from ...graph.path import GraphPath
from ...ports.graph import PathFinder, WeightMapper

SEARCH_ALGORITHMS: Dict[str, Optional[PathFinder]] = {
    "dfs": depth_first_search,
    "bfs": breadth_first_search,
    # weighted, dispatched with the solver's weight mapper
    "dijkstra": None,
}


def _unit_weight(edge: Any) -> float:
    return 1.0


@dataclass
class GraphSearchSolver:
    """Runs a named search on a graph.

    Attributes:
        weight_mapper: Edge weight function for Dijkstra (default: every
            edge weighs 1)
        dijkstra_strategy: Selection strategy passed to Dijkstra
    """

    weight_mapper: Optional[WeightMapper[Any]] = None
    dijkstra_strategy: DijkstraStrategy = "scan"
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: DirectedGraph[Any, Any],
        start: Union[Any, str],
        target: Union[Any, str],
        algorithm: str = "dijkstra",
    ) -> GraphPath[Any]:
        """Find a path between two vertices.

        Args:
            graph: The graph to search.
            start: Start vertex or its identity.
            target: Target vertex or its identity.
            algorithm: One of ``dfs``, ``bfs`` or ``dijkstra``.

        Returns:
            The path found by the search.

        Raises:
            ConfigurationError: If the algorithm name is unknown.
            VertexNotFoundError: If start or target is not in the graph.
            NoPathFoundError: If the target cannot be reached.
        """
        search = self._search_for(algorithm)
        start_id = _vertex_id(start)
        target_id = _vertex_id(target)

        self._logger.debug(
            "Solving path",
            extra={"start": start_id, "target": target_id, "algorithm": algorithm},
        )

        for vertex_id in (start_id, target_id):
            if vertex_id not in graph:
                raise VertexNotFoundError(
                    f"Vertex not in graph: {vertex_id}",
                    vertex_id=vertex_id,
                )

        path = search(graph, start_id, target_id)
        if path is None:
            self._logger.warning(
                "No path found",
                extra={"start": start_id, "target": target_id, "algorithm": algorithm},
            )
            raise NoPathFoundError(
                f"No path from {start_id} to {target_id}",
                start=start_id,
                target=target_id,
                algorithm=algorithm,
            )

        self._logger.info(
            "Path found",
            extra={
                "start": start_id,
                "target": target_id,
                "algorithm": algorithm,
                "hops": path.num_edges,
                "total_weight": path.total_weight,
                "visited": len(path.visited),
            },
        )
        return path

    def solve_safe(
        self,
        graph: DirectedGraph[Any, Any],
        start: Union[Any, str],
        target: Union[Any, str],
        algorithm: str = "dijkstra",
    ) -> Optional[GraphPath[Any]]:
        """Find a path, returning None when there is none.

        Like solve(), but unknown vertices and unreachable targets give
        None instead of an exception. Unknown algorithm names still
        raise ConfigurationError.
        """
        search = self._search_for(algorithm)
        return search(graph, _vertex_id(start), _vertex_id(target))

    def _search_for(
        self, algorithm: str
    ) -> Callable[[DirectedGraph[Any, Any], str, str], Optional[GraphPath[Any]]]:
        if algorithm not in SEARCH_ALGORITHMS:
            raise ConfigurationError(
                f"Unknown search algorithm: {algorithm!r}",
                setting_name="algorithm",
                expected_type=", ".join(sorted(SEARCH_ALGORITHMS)),
            )

        search = SEARCH_ALGORITHMS[algorithm]
        if search is not None:
            return search

        weight_mapper = self.weight_mapper or _unit_weight
        strategy = self.dijkstra_strategy

        def weighted(
            graph: DirectedGraph[Any, Any], start: str, target: str
        ) -> Optional[GraphPath[Any]]:
            return dijkstra_shortest_path(graph, start, target, weight_mapper, strategy)

        return weighted


def _vertex_id(vertex: Union[Any, str]) -> str:
    return vertex if isinstance(vertex, str) else vertex.id
