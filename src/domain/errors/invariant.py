"""Admin set invariant violations.

The administrator set must never become empty, and an administrator
may not remove themselves.
"""

from __future__ import annotations

from src.domain.exceptions import RegistryError


class RegistryInvariantViolationError(RegistryError):
    """Base class for rejected operations that would break an invariant.

    HTTP Status: 409 Conflict
    """

    HTTP_STATUS = 409


class LastAdminProtectedError(RegistryInvariantViolationError):
    """Raised when a removal would leave the admin set empty.

    Attributes:
        address: The admin targeted for removal.
    """

    ERROR_CODE = "LAST_ADMIN_PROTECTED"
    URN_SUFFIX = "admin:last-admin-protected"
    TITLE = "Last Admin Protected"

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(
            f"Cannot remove {address!r}: the registry must keep at least one admin"
        )


class SelfRemovalError(RegistryInvariantViolationError):
    """Raised when an admin attempts to remove themselves.

    Attributes:
        address: The admin that attempted self-removal.
    """

    ERROR_CODE = "SELF_REMOVAL"
    URN_SUFFIX = "admin:self-removal"
    TITLE = "Self Removal Forbidden"

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Admin {address!r} cannot remove themselves")
