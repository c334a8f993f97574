"""CSV Graph Repository adapter.

Loads a road network from two CSV files into a
``DirectedGraph[Junction, Road]``:

- junctions: ``name,x,y,population``
- roads: ``from,to,length_km,max_speed_kmh,one_way``

Two-way roads become a connection (one edge per direction), one-way
roads a single directed edge.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError, VertexNotFoundError
from ...domain.models import Junction, Road
from ...graph.directed_graph import DirectedGraph

_TRUTHY = {"1", "true", "yes", "y"}


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[DirectedGraph[Junction, Road]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> DirectedGraph[Junction, Road]:
        """Load the road network from CSV files.

        Returns:
            The graph of junctions connected by roads.

        Raises:
            GraphLoadError: If the graph cannot be loaded.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "junctions_path": str(self.config.junctions_path),
                "roads_path": str(self.config.roads_path),
            },
        )

        graph: DirectedGraph[Junction, Road] = DirectedGraph()
        try:
            self._load_junctions(graph)
        except (OSError, KeyError, ValueError) as e:
            raise GraphLoadError(
                "Failed to load junctions",
                file_path=str(self.config.junctions_path),
                cause=e,
            )
        try:
            self._load_roads(graph)
        except (OSError, KeyError, ValueError) as e:
            raise GraphLoadError(
                "Failed to load roads",
                file_path=str(self.config.roads_path),
                cause=e,
            )

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"vertices": graph.num_vertices(), "edges": graph.num_edges()},
        )
        return graph

    def _load_junctions(self, graph: DirectedGraph[Junction, Road]) -> None:
        with self.config.junctions_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                name = (row.get("name") or "").strip()
                if not name:
                    continue

                junction = Junction(
                    name=name,
                    location_x=float(row.get("x") or 0.0),
                    location_y=float(row.get("y") or 0.0),
                    population=int(row.get("population") or 0),
                )
                if graph.add_or_get_vertex(junction) is not junction:
                    self._logger.warning(
                        "Duplicate junction skipped", extra={"junction": name}
                    )

    def _load_roads(self, graph: DirectedGraph[Junction, Road]) -> None:
        with self.config.roads_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for line_number, row in enumerate(reader, start=2):
                from_id = (row.get("from") or "").strip()
                to_id = (row.get("to") or "").strip()
                length_str = (row.get("length_km") or "").strip()

                if not from_id or not to_id or not length_str:
                    continue

                if from_id not in graph or to_id not in graph:
                    self._logger.warning(
                        "Road references unknown junction",
                        extra={"line": line_number, "from": from_id, "to": to_id},
                    )
                    continue

                speed_str = (row.get("max_speed_kmh") or "").strip()
                road = Road(
                    length_km=float(length_str),
                    max_speed_kmh=float(speed_str) if speed_str else 100.0,
                )

                one_way = (row.get("one_way") or "").strip().lower() in _TRUTHY
                if one_way:
                    added = graph.add_edge(from_id, to_id, road)
                else:
                    added = graph.add_connection(from_id, to_id, road)

                if not added:
                    self._logger.debug(
                        "Duplicate road skipped",
                        extra={"line": line_number, "from": from_id, "to": to_id},
                    )

    def get_junction(self, name: str) -> Optional[Junction]:
        """Get junction details by name.

        Args:
            name: The junction name to look up.

        Returns:
            The junction, or None if not found.
        """
        return self.load().get_vertex(name)

    def get_junction_or_raise(self, name: str) -> Junction:
        """Get junction details by name, raising if not found.

        Raises:
            VertexNotFoundError: If the junction is not found.
        """
        junction = self.get_junction(name)
        if junction is None:
            raise VertexNotFoundError(
                f"Junction not found: {name}",
                vertex_id=name,
            )
        return junction

    def list_junctions(self) -> Sequence[Junction]:
        """List all junctions, in file order."""
        return self.load().vertices

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
