"""Lookup errors for tokens, student records and administrators."""

from __future__ import annotations

from src.domain.exceptions import RegistryError


class RegistryNotFoundError(RegistryError):
    """Base class for lookups that found nothing.

    HTTP Status: 404 Not Found
    """

    HTTP_STATUS = 404


class InvalidTokenError(RegistryNotFoundError):
    """Raised when a token identifier has never been issued.

    Attributes:
        token_id: The unknown token identifier.
    """

    ERROR_CODE = "INVALID_TOKEN"
    URN_SUFFIX = "token:not-found"
    TITLE = "Invalid Token"

    def __init__(self, token_id: str) -> None:
        self.token_id = token_id
        super().__init__(f"Token {token_id!r} does not exist")


class InvalidStudentError(RegistryNotFoundError):
    """Raised when no student record exists for an external ID.

    Attributes:
        external_id: The unknown external identifier.
    """

    ERROR_CODE = "INVALID_STUDENT"
    URN_SUFFIX = "student:not-found"
    TITLE = "Student Not Found"

    def __init__(self, external_id: str) -> None:
        self.external_id = external_id
        super().__init__(f"No student record for external ID {external_id!r}")


class AdminNotFoundError(RegistryNotFoundError):
    """Raised when removing an address that is not an administrator.

    Attributes:
        address: The address that is not in the admin set.
    """

    ERROR_CODE = "ADMIN_NOT_FOUND"
    URN_SUFFIX = "admin:not-found"
    TITLE = "Admin Not Found"

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Address {address!r} is not an admin")
