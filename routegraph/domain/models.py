"""Immutable domain models for road networks.

Junctions are the vertices and roads the edges of the networks the
route planner works on. All models are frozen dataclasses with slots and
have no external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Junction:
    """A named junction in a road network.

    Attributes:
        name: Unique junction name, used as its identity
        location_x: RD x-coordinate in km
        location_y: RD y-coordinate in km
        population: Importance of the junction (number of inhabitants)
    """

    name: str
    location_x: float = 0.0
    location_y: float = 0.0
    population: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Junction name must not be empty")
        if self.population < 0:
            raise ValueError(
                f"Population must not be negative, got {self.population}"
            )

    @property
    def id(self) -> str:
        """Identity of the junction within a graph."""
        return self.name

    def distance_to(self, other: Junction) -> float:
        """Return the Cartesian distance in km to another junction."""
        dx = other.location_x - self.location_x
        dy = other.location_y - self.location_y
        return math.sqrt(dx * dx + dy * dy)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Road:
    """A road segment between two junctions.

    Attributes:
        length_km: Length of the road in kilometers
        max_speed_kmh: Speed limit on the road in km/h
    """

    length_km: float
    max_speed_kmh: float = 100.0

    def __post_init__(self) -> None:
        if self.length_km < 0:
            raise ValueError(
                f"Road length must not be negative, got {self.length_km}"
            )
        if self.max_speed_kmh <= 0:
            raise ValueError(
                f"Max speed must be positive, got {self.max_speed_kmh}"
            )

    @property
    def travel_time_hours(self) -> float:
        """Time needed to drive the road at its speed limit."""
        return self.length_km / self.max_speed_kmh

    def __str__(self) -> str:
        return f"{self.length_km:g}km@{self.max_speed_kmh:g}"


def road_length(road: Road) -> float:
    """Weight mapper: shortest distance."""
    return road.length_km


def road_travel_time(road: Road) -> float:
    """Weight mapper: fastest route."""
    return road.travel_time_hours
