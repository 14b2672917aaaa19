"""Configuration module for the Student ID Registry.

Available Configurations:
- RegistryConfig: Institutional constants and startup seeding
"""

from src.config.registry_config import (
    DEFAULT_REGISTRY_CONFIG,
    TEST_REGISTRY_CONFIG,
    RegistryConfig,
)

__all__ = [
    "RegistryConfig",
    "DEFAULT_REGISTRY_CONFIG",
    "TEST_REGISTRY_CONFIG",
]
