"""Typed domain errors for the route graph engine.

The engine itself reports absence (unknown vertex, duplicate edge,
unreachable target) through return values. These error types are raised
by the strict adapter layer, where a missing vertex or route is a real
failure for the caller.

All errors inherit from RouteGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RouteGraphError(Exception):
    """Base error for the route graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class VertexNotFoundError(RouteGraphError):
    """Vertex identity not found in the graph.

    Attributes:
        vertex_id: The identity that could not be resolved
    """

    vertex_id: str = ""


@dataclass
class NoPathFoundError(RouteGraphError):
    """No path exists between the requested vertices.

    Attributes:
        start: Start vertex identity
        target: Target vertex identity
        algorithm: Name of the search that exhausted its frontier
    """

    start: str = ""
    target: str = ""
    algorithm: str = ""


@dataclass
class InvalidWeightError(RouteGraphError):
    """An edge weight violates the non-negative weight precondition.

    Attributes:
        from_id: Identity of the edge's from-vertex
        to_id: Identity of the edge's to-vertex
        weight: The offending weight
    """

    from_id: str = ""
    to_id: str = ""
    weight: float = 0.0


@dataclass
class GraphLoadError(RouteGraphError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(RouteGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
