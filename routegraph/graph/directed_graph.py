"""Generic directed graph store.

Vertices are kept in a table keyed by their identity and edges in a
nested mapping from-identity -> to-identity -> edge payload, so vertex
and edge objects never reference each other.

Representation invariants (hold after every public mutation):

1. every vertex is stored once, under its identity
2. every edge endpoint is present in the vertex table
3. a from-identity has an adjacency entry only while it has at least
   one outgoing edge
4. at most one edge exists per ordered (from, to) pair
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, TypeVar, Union

from ..ports.graph import Identifiable

V = TypeVar("V", bound=Identifiable)
E = TypeVar("E")


@dataclass(eq=False)
class DirectedGraph(Generic[V, E]):
    """Directed graph with at most one edge per ordered vertex pair.

    Query operations accept either a vertex object or its identity
    string and return None when the vertex cannot be resolved, so
    callers can tell "no such vertex" apart from "no neighbours".

    Example:
        graph: DirectedGraph[Junction, Road] = DirectedGraph()
        graph.add_connection(Junction("Amsterdam"), Junction("Haarlem"), Road(20.0))
        graph.get_neighbours("Amsterdam")
    """

    _vertices: Dict[str, V] = field(default_factory=dict, repr=False)
    _edges: Dict[str, Dict[str, E]] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    @property
    def vertices(self) -> List[V]:
        """All vertices, in insertion order."""
        return list(self._vertices.values())

    def get_vertex(self, vertex_id: str) -> Optional[V]:
        """Find the vertex identified by ``vertex_id``.

        Returns:
            The stored vertex, or None if no vertex has that identity.
        """
        return self._vertices.get(vertex_id)

    def add_or_get_vertex(self, vertex: Optional[V]) -> Optional[V]:
        """Add a vertex unless one with the same identity is present.

        The stored vertex is never replaced: inserting a duplicate
        identity returns the original instance.

        Args:
            vertex: The candidate vertex.

        Returns:
            The vertex already stored under the same identity, or the
            candidate itself if it has been added. None for None.
        """
        if vertex is None:
            return None
        existing = self._vertices.get(vertex.id)
        if existing is not None:
            return existing
        self._vertices[vertex.id] = vertex
        return vertex

    def resolve(self, vertex: Union[V, str, None]) -> Optional[V]:
        """Resolve a vertex object or identity to the stored vertex."""
        if vertex is None:
            return None
        if isinstance(vertex, str):
            return self._vertices.get(vertex)
        return self._vertices.get(vertex.id)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(
        self,
        from_vertex: Union[V, str, None],
        to_vertex: Union[V, str, None],
        edge: E,
    ) -> bool:
        """Add a directed edge from ``from_vertex`` to ``to_vertex``.

        Vertex objects that are not yet in the graph are admitted first.
        Identity strings must resolve to existing vertices.

        Args:
            from_vertex: Start of the edge (vertex or identity).
            to_vertex: End of the edge (vertex or identity).
            edge: The edge payload.

        Returns:
            True if the edge was added. False if an endpoint could not be
            resolved or an edge already exists for the ordered pair; the
            graph is left unchanged in both cases.
        """
        for ref in (from_vertex, to_vertex):
            if ref is None or (isinstance(ref, str) and ref not in self._vertices):
                self._logger.debug("Edge endpoint not found", extra={"vertex": ref})
                return False

        source = self._admit(from_vertex)
        destination = self._admit(to_vertex)
        assert source is not None and destination is not None

        outgoing = self._edges.get(source.id)
        if outgoing is not None and destination.id in outgoing:
            self._logger.debug(
                "Duplicate edge ignored",
                extra={"from_id": source.id, "to_id": destination.id},
            )
            return False

        self._edges.setdefault(source.id, {})[destination.id] = edge
        return True

    def add_connection(
        self,
        vertex1: Union[V, str, None],
        vertex2: Union[V, str, None],
        edge: E,
    ) -> bool:
        """Connect two vertices in both directions with the same edge.

        The second direction is only attempted when the first succeeded.
        A first direction that succeeded is kept even if the second one
        fails.

        Returns:
            True only if both directed edges have been added.
        """
        return self.add_edge(vertex1, vertex2, edge) and self.add_edge(
            vertex2, vertex1, edge
        )

    def remove_edge(
        self,
        from_vertex: Union[V, str, None],
        to_vertex: Union[V, str, None],
    ) -> Optional[E]:
        """Remove the directed edge between two vertices.

        Returns:
            The removed edge payload, or None if there was no such edge.
        """
        source = self.resolve(from_vertex)
        destination = self.resolve(to_vertex)
        if source is None or destination is None:
            return None

        outgoing = self._edges.get(source.id)
        if outgoing is None or destination.id not in outgoing:
            return None

        edge = outgoing.pop(destination.id)
        if not outgoing:
            del self._edges[source.id]
        return edge

    def get_edge(
        self,
        from_vertex: Union[V, str, None],
        to_vertex: Union[V, str, None],
    ) -> Optional[E]:
        """Return the edge payload for the ordered pair, or None."""
        source = self.resolve(from_vertex)
        destination = self.resolve(to_vertex)
        if source is None or destination is None:
            return None
        return self._edges.get(source.id, {}).get(destination.id)

    def get_neighbours(self, vertex: Union[V, str, None]) -> Optional[List[V]]:
        """Vertices reachable through one outgoing edge.

        Returns:
            None if the vertex is not in the graph, an empty list if it
            has no outgoing edges.
        """
        source = self.resolve(vertex)
        if source is None:
            return None
        return [self._vertices[to_id] for to_id in self._edges.get(source.id, {})]

    def get_edges(self, vertex: Union[V, str, None]) -> Optional[List[E]]:
        """Payloads of the outgoing edges of a vertex.

        Returns:
            None if the vertex is not in the graph, an empty list if it
            has no outgoing edges.
        """
        source = self.resolve(vertex)
        if source is None:
            return None
        return list(self._edges.get(source.id, {}).values())

    # ------------------------------------------------------------------
    # Counts and maintenance
    # ------------------------------------------------------------------

    def num_vertices(self) -> int:
        return len(self._vertices)

    def num_edges(self) -> int:
        return sum(len(outgoing) for outgoing in self._edges.values())

    def remove_unconnected_vertices(self) -> int:
        """Remove every vertex without outgoing edges.

        Edges that pointed at a removed vertex are dropped with it. The
        removal is a single pass: vertices that lose their last outgoing
        edge this way are kept.

        Returns:
            Number of vertices removed.
        """
        self._edges = {
            from_id: outgoing for from_id, outgoing in self._edges.items() if outgoing
        }
        removed = [vertex_id for vertex_id in self._vertices if vertex_id not in self._edges]
        for vertex_id in removed:
            del self._vertices[vertex_id]

        if removed:
            gone = set(removed)
            for from_id in list(self._edges):
                outgoing = self._edges[from_id]
                for to_id in gone.intersection(outgoing):
                    del outgoing[to_id]
                if not outgoing:
                    del self._edges[from_id]

        self._logger.debug(
            "Unconnected vertices removed",
            extra={"removed": len(removed), "remaining": len(self._vertices)},
        )
        return len(removed)

    def _admit(self, vertex: Union[V, str]) -> Optional[V]:
        if isinstance(vertex, str):
            return self._vertices.get(vertex)
        return self.add_or_get_vertex(vertex)

    def __contains__(self, vertex: object) -> bool:
        if isinstance(vertex, str):
            return vertex in self._vertices
        vertex_id = getattr(vertex, "id", None)
        return isinstance(vertex_id, str) and vertex_id in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __str__(self) -> str:
        lines = []
        for vertex_id, vertex in self._vertices.items():
            outgoing = self._edges.get(vertex_id, {})
            connections = ",".join(
                f"{self._vertices[to_id]}({edge})" for to_id, edge in outgoing.items()
            )
            lines.append(f"{vertex}: [{connections}]")
        return "{ " + ",\n  ".join(lines) + "\n}"
