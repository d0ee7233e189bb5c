"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
default edge weights, export/rendering settings and logging.

Configuration can be overridden via environment variables:
- FIGHTNET_GRAPH_DEFAULT_EDGE_WEIGHT=2.5
- FIGHTNET_EXPORT_ENGINE=neato
- FIGHTNET_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

import graphviz
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class GraphConfig(BaseSettings):
    """Graph construction configuration.

    Environment variables prefixed with FIGHTNET_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="FIGHTNET_GRAPH_")

    default_edge_weight: float = Field(default=1.0, ge=0.0, allow_inf_nan=False)


class ExportConfig(BaseSettings):
    """Diagram export configuration.

    Environment variables prefixed with FIGHTNET_EXPORT_.
    """

    model_config = SettingsConfigDict(env_prefix="FIGHTNET_EXPORT_")

    graph_name: str = "UFC"
    dot_file: str = "fightnet.dot"
    image_format: str = "png"
    engine: str = "dot"
    output_dir: Path = Field(default_factory=Path.cwd)

    @field_validator("engine")
    @classmethod
    def _known_engine(cls, value: str) -> str:
        if value not in graphviz.ENGINES:
            raise ValueError(f"Unknown Graphviz engine: {value}")
        return value

    @field_validator("image_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        value = value.lower()
        if value not in graphviz.FORMATS:
            raise ValueError(f"Unknown Graphviz output format: {value}")
        return value

    @property
    def dot_path(self) -> Path:
        """Full path to the exported DOT file."""
        return self.output_dir / self.dot_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with FIGHTNET_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="FIGHTNET_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.default_edge_weight)
        print(config.export.dot_path)

    Environment variables prefixed with FIGHTNET_.
    """

    model_config = SettingsConfigDict(env_prefix="FIGHTNET_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Raises:
        ConfigurationError: If an environment override is invalid.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        errors = e.errors()
        loc = errors[0]["loc"] if errors else ()
        raise ConfigurationError(
            f"Invalid configuration: {e.title}",
            setting_name=".".join(str(part) for part in loc) or e.title,
            cause=e,
        )
    except ValueError as e:
        raise ConfigurationError("Invalid configuration", cause=e)


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure root logging from the observability settings."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level, format=config.format, force=True)
