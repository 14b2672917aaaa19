"""
API models (Pydantic DTOs) for the Student ID Registry.

This module contains all Pydantic request/response models
used by API endpoints.
"""

from src.api.models.admin import AddAdminRequest, AdminListResponse
from src.api.models.health import HealthResponse
from src.api.models.student import (
    IssueStudentRequest,
    IssueStudentResponse,
    SetStatusRequest,
    StudentListResponse,
    StudentRecordResponse,
    StudentSummaryResponse,
    TransferDepartmentRequest,
    UpdateYearRequest,
)
from src.api.models.token import (
    ApproveRequest,
    BalanceResponse,
    EnrollmentResponse,
    TokenOwnerResponse,
    TokenURIResponse,
    TransferRequest,
)

__all__: list[str] = [
    "AddAdminRequest",
    "AdminListResponse",
    "ApproveRequest",
    "BalanceResponse",
    "EnrollmentResponse",
    "HealthResponse",
    "IssueStudentRequest",
    "IssueStudentResponse",
    "SetStatusRequest",
    "StudentListResponse",
    "StudentRecordResponse",
    "StudentSummaryResponse",
    "TokenOwnerResponse",
    "TokenURIResponse",
    "TransferDepartmentRequest",
    "TransferRequest",
    "UpdateYearRequest",
]
