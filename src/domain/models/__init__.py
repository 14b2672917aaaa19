"""Domain models for the Student ID Registry.

Contains value objects and domain models that represent core registry
concepts. These models are immutable and contain no infrastructure
dependencies.
"""

from src.domain.models.student_record import (
    SETTABLE_STATUSES,
    TERMINAL_STATUSES,
    StudentApplication,
    StudentRecord,
    StudentStatus,
    derive_token_id,
    is_valid_year,
)

__all__: list[str] = [
    "SETTABLE_STATUSES",
    "TERMINAL_STATUSES",
    "StudentApplication",
    "StudentRecord",
    "StudentStatus",
    "derive_token_id",
    "is_valid_year",
]
