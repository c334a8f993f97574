"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph engine and external
adapters. They enable dependency injection and make the system testable.
"""

from .graph import GraphRepositoryPort, Identifiable, PathFinder, VertexRef, WeightMapper

__all__ = [
    "Identifiable",
    "VertexRef",
    "WeightMapper",
    "PathFinder",
    "GraphRepositoryPort",
]
