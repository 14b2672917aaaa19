"""
Domain layer - Pure business logic for the Student ID Registry.

This layer contains:
- Domain models (student records, lifecycle status, token identifiers)
- Domain events (audit event payloads)
- Primitives (atomic write context)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
"""

from src.domain.exceptions import RegistryError
from src.domain.models import StudentRecord, StudentStatus, derive_token_id

__all__: list[str] = [
    "RegistryError",
    "StudentRecord",
    "StudentStatus",
    "derive_token_id",
]
