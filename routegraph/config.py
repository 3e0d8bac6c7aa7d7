"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration:
where the default adjacency matrix lives, how its cells are delimited,
and how logging is set up for the command surface.

Configuration can be overridden via environment variables:
- ROUTEGRAPH_GRAPH_DATA_DIR=/path/to/data
- ROUTEGRAPH_GRAPH_MATRIX_FILE=graph.txt
- ROUTEGRAPH_GRAPH_DELIMITER=,
- ROUTEGRAPH_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with ROUTEGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTEGRAPH_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    matrix_file: str = "graph.txt"
    delimiter: Optional[str] = None  # None = any whitespace

    @property
    def matrix_path(self) -> Path:
        """Full path to the adjacency matrix file."""
        return self.data_dir / self.matrix_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ROUTEGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTEGRAPH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.matrix_path)
        print(config.observability.level)

    Environment variables prefixed with ROUTEGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTEGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
