"""FastAPI application entry point for the Student ID Registry.

Run with:
    uvicorn src.api.main:create_app --factory
"""

from fastapi import FastAPI

from src import __version__
from src.api.middleware import LoggingMiddleware
from src.api.routes import (
    admins_router,
    health_router,
    students_router,
    tokens_router,
)
from src.application.services.student_registry_service import StudentRegistryService
from src.bootstrap.logging import configure_logging
from src.bootstrap.student_registry import build_student_registry
from src.config.registry_config import RegistryConfig


def create_app(
    service: StudentRegistryService | None = None,
    config: RegistryConfig | None = None,
) -> FastAPI:
    """Create the API application around one registry instance.

    Args:
        service: Registry to serve (default: built from config).
        config: Registry configuration (default: service's config, else
            read from the environment).

    Returns:
        The configured FastAPI application.
    """
    if config is None:
        config = service.config if service is not None else RegistryConfig.from_environment()
    if service is None:
        service = build_student_registry(config)

    configure_logging(config)

    app = FastAPI(
        title="Student ID Registry API",
        description="Non-transferable student ID tokens with an admin-governed lifecycle",
        version=__version__,
    )
    app.state.registry = service

    app.add_middleware(LoggingMiddleware)

    app.include_router(health_router)
    app.include_router(students_router)
    app.include_router(admins_router)
    app.include_router(tokens_router)

    return app
