"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphLoadError,
    InvalidWeightError,
    NoPathFoundError,
    RouteGraphError,
    VertexNotFoundError,
)
from .models import Junction, Road, road_length, road_travel_time

__all__ = [
    # Models
    "Junction",
    "Road",
    "road_length",
    "road_travel_time",
    # Errors
    "RouteGraphError",
    "VertexNotFoundError",
    "NoPathFoundError",
    "InvalidWeightError",
    "GraphLoadError",
    "ConfigurationError",
]
