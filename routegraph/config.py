"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
where the road network is read from, which search the route planner
runs by default, and how logging is set up.

Configuration can be overridden via environment variables:
- RG_GRAPH_DATA_DIR=/path/to/data
- RG_SEARCH_DEFAULT_ALGORITHM=bfs
- RG_SEARCH_DIJKSTRA_STRATEGY=heap
- RG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Road network data configuration.

    Environment variables prefixed with RG_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RG_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    junctions_file: str = "junctions.csv"
    roads_file: str = "roads.csv"

    @property
    def junctions_path(self) -> Path:
        """Full path to junctions CSV file."""
        return self.data_dir / self.junctions_file

    @property
    def roads_path(self) -> Path:
        """Full path to roads CSV file."""
        return self.data_dir / self.roads_file


class SearchConfig(BaseSettings):
    """Route search configuration.

    Environment variables prefixed with RG_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="RG_SEARCH_")

    default_algorithm: Literal["dfs", "bfs", "dijkstra"] = "dijkstra"
    dijkstra_strategy: Literal["scan", "heap"] = "scan"
    default_weight: Literal["length", "travel_time"] = "length"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RG_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.search.default_algorithm)
        print(config.graph.roads_path)

    Environment variables prefixed with RG_.
    """

    model_config = SettingsConfigDict(env_prefix="RG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging configuration to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)
