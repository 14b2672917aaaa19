"""Admin set API models."""

from pydantic import BaseModel, Field


class AddAdminRequest(BaseModel):
    address: str = Field(min_length=1, description="Address to grant admin rights")


class AdminListResponse(BaseModel):
    """Current admin set in ascending address order."""

    admins: list[str]
    total_count: int
