"""Health check endpoint for the Student ID Registry API."""

from fastapi import APIRouter, Depends

from src.api.dependencies.registry import get_registry_service
from src.api.models.health import HealthResponse
from src.application.services.student_registry_service import StudentRegistryService

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    registry: StudentRegistryService = Depends(get_registry_service),
) -> HealthResponse:
    """Return health status with registry counters."""
    return HealthResponse(
        status="healthy",
        admin_count=len(registry.list_admins()),
        total_supply=registry.tokens.total_supply(),
    )
