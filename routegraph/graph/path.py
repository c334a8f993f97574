"""Search results.

A GraphPath is built once by a search and never changes afterwards, so
mutating the graph later does not affect results already handed out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from ..ports.graph import Identifiable

V = TypeVar("V", bound=Identifiable)


@dataclass(frozen=True, slots=True)
class GraphPath(Generic[V]):
    """A path of connected vertices found by a search.

    Consecutive vertices are joined by a directed edge of the graph the
    search ran on. A path with one vertex has no edges.

    Attributes:
        vertices: Vertices from start to target
        visited: Every vertex the search visited, in visiting order
        total_weight: Sum of edge weights (weighted search only)
    """

    vertices: tuple[V, ...]
    visited: tuple[V, ...] = field(default_factory=tuple)
    total_weight: float = 0.0

    @property
    def ids(self) -> tuple[str, ...]:
        """Identities of the path vertices, in order."""
        return tuple(vertex.id for vertex in self.vertices)

    @property
    def visited_ids(self) -> frozenset[str]:
        return frozenset(vertex.id for vertex in self.visited)

    @property
    def start(self) -> Optional[V]:
        return self.vertices[0] if self.vertices else None

    @property
    def target(self) -> Optional[V]:
        return self.vertices[-1] if self.vertices else None

    @property
    def num_edges(self) -> int:
        """Number of edges (hops) along the path."""
        return max(len(self.vertices) - 1, 0)

    @property
    def is_empty(self) -> bool:
        return len(self.vertices) == 0

    def __len__(self) -> int:
        return len(self.vertices)

    def __str__(self) -> str:
        return "Weight=%f Length=%d visited=%d (%s)" % (
            self.total_weight,
            len(self.vertices),
            len(self.visited),
            ", ".join(self.ids),
        )
