"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from src.config.registry_config import RegistryConfig
from src.infrastructure.observability import configure_structlog as _configure_structlog


def configure_logging(config: RegistryConfig) -> None:
    """Configure structlog for the environment named in config.

    Production gets JSON lines; every other environment gets the
    colored console renderer.
    """
    _configure_structlog(environment=config.environment, log_level=config.log_level)


__all__ = ["configure_logging"]
