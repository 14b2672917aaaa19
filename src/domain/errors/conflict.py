"""Uniqueness conflict errors.

Uniqueness index entries are never released, so a value that produced
one of these errors will keep producing it for the lifetime of the
registry.
"""

from __future__ import annotations

from src.domain.exceptions import RegistryError


class RegistryConflictError(RegistryError):
    """Base class for duplicate-value rejections.

    HTTP Status: 409 Conflict
    """

    HTTP_STATUS = 409


class EmailExistsError(RegistryConflictError):
    """Raised when issuing a record whose email is already indexed.

    Attributes:
        email: The duplicate email address.
        token_id: Token already holding the email.
    """

    ERROR_CODE = "EMAIL_EXISTS"
    URN_SUFFIX = "student:email-exists"
    TITLE = "Email Already Registered"

    def __init__(self, email: str, token_id: str) -> None:
        self.email = email
        self.token_id = token_id
        super().__init__(f"Email {email!r} is already registered to token {token_id!r}")


class ExternalIDExistsError(RegistryConflictError):
    """Raised when issuing a record whose external ID is already indexed.

    Attributes:
        external_id: The duplicate external identifier.
    """

    ERROR_CODE = "EXTERNAL_ID_EXISTS"
    URN_SUFFIX = "student:external-id-exists"
    TITLE = "External ID Already Registered"

    def __init__(self, external_id: str) -> None:
        self.external_id = external_id
        super().__init__(f"External ID {external_id!r} is already registered")


class AdminExistsError(RegistryConflictError):
    """Raised when adding an address that is already an administrator.

    Attributes:
        address: The duplicate admin address.
    """

    ERROR_CODE = "ADMIN_EXISTS"
    URN_SUFFIX = "admin:exists"
    TITLE = "Admin Already Exists"

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Address {address!r} is already an admin")
