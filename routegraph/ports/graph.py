"""Graph ports - Abstractions for vertices, graph loading and searching.

These protocols define the contracts between the graph engine, the
payload types it stores and the adapters that feed or query it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Protocol, Sequence, TypeVar, Union

if TYPE_CHECKING:
    from ..domain.models import Junction, Road
    from ..graph.directed_graph import DirectedGraph
    from ..graph.path import GraphPath

E = TypeVar("E")


class Identifiable(Protocol):
    """Capability required from every vertex payload.

    The identity must be stable and unique within a graph; the graph
    never changes it.
    """

    @property
    def id(self) -> str:
        ...


# Maps an edge payload to its non-negative weight
WeightMapper = Callable[[E], float]

# A vertex object or its identity string
VertexRef = Union[Identifiable, str]


class PathFinder(Protocol):
    """Signature shared by the unweighted searches.

    Implementations: graph/dfs.py, graph/bfs.py
    """

    def __call__(
        self,
        graph: DirectedGraph,
        start: VertexRef,
        target: VertexRef,
    ) -> Optional[GraphPath]:
        ...


class GraphRepositoryPort(Protocol):
    """Port for loading road networks.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the road
    network from persistent storage.
    """

    def load(self) -> DirectedGraph[Junction, Road]:
        """Load the road network.

        Returns:
            The graph of junctions connected by roads.
        """
        ...

    def get_junction(self, name: str) -> Optional[Junction]:
        """Get junction details by name.

        Args:
            name: The junction name to look up.

        Returns:
            The junction, or None if not found.
        """
        ...

    def list_junctions(self) -> Sequence[Junction]:
        """List all junctions of the network.

        Returns:
            Sequence of all junctions.
        """
        ...
