"""Domain errors for the Student ID Registry.

Provides specific exception classes for every rejected operation.
All exceptions inherit from RegistryError and are grouped by category:

- Authorization: UnauthorizedError
- Not found: InvalidTokenError, InvalidStudentError, AdminNotFoundError
- Conflict: EmailExistsError, ExternalIDExistsError, AdminExistsError
- Invariant violation: LastAdminProtectedError, SelfRemovalError
- Invalid input: InvalidEmailError, InvalidStatusError, NotFinalYearError,
  InvalidYearError
- Terminal state: AlreadyGraduatedError
- Unsupported: NonTransferableError
"""

from src.domain.errors.authorization import UnauthorizedError
from src.domain.errors.conflict import (
    AdminExistsError,
    EmailExistsError,
    ExternalIDExistsError,
    RegistryConflictError,
)
from src.domain.errors.invalid_input import (
    InvalidEmailError,
    InvalidStatusError,
    InvalidYearError,
    NotFinalYearError,
    RegistryInvalidInputError,
)
from src.domain.errors.invariant import (
    LastAdminProtectedError,
    RegistryInvariantViolationError,
    SelfRemovalError,
)
from src.domain.errors.lifecycle import AlreadyGraduatedError, TerminalStateError
from src.domain.errors.not_found import (
    AdminNotFoundError,
    InvalidStudentError,
    InvalidTokenError,
    RegistryNotFoundError,
)
from src.domain.errors.transfer import NonTransferableError, UnsupportedOperationError

__all__: list[str] = [
    # Authorization
    "UnauthorizedError",
    # Not found
    "RegistryNotFoundError",
    "InvalidTokenError",
    "InvalidStudentError",
    "AdminNotFoundError",
    # Conflict
    "RegistryConflictError",
    "EmailExistsError",
    "ExternalIDExistsError",
    "AdminExistsError",
    # Invariant violation
    "RegistryInvariantViolationError",
    "LastAdminProtectedError",
    "SelfRemovalError",
    # Invalid input
    "RegistryInvalidInputError",
    "InvalidEmailError",
    "InvalidStatusError",
    "InvalidYearError",
    "NotFinalYearError",
    # Terminal state
    "TerminalStateError",
    "AlreadyGraduatedError",
    # Unsupported
    "UnsupportedOperationError",
    "NonTransferableError",
]
