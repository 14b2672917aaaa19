"""API dependencies for dependency injection."""

from src.api.dependencies.registry import (
    CALLER_HEADER,
    get_caller_address,
    get_optional_caller_address,
    get_registry_service,
)

__all__: list[str] = [
    "CALLER_HEADER",
    "get_caller_address",
    "get_optional_caller_address",
    "get_registry_service",
]
