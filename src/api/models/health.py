"""Health check response models."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Health status string (e.g., "healthy").
        admin_count: Number of admins in the registry.
        total_supply: Number of issued student ID tokens.
    """

    status: str
    admin_count: int
    total_supply: int
