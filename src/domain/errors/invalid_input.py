"""Input validation errors for issuance and lifecycle transitions."""

from __future__ import annotations

from src.domain.exceptions import RegistryError


class RegistryInvalidInputError(RegistryError):
    """Base class for rejected input values.

    HTTP Status: 422 Unprocessable Entity
    """

    HTTP_STATUS = 422


class InvalidEmailError(RegistryInvalidInputError):
    """Raised when an email is outside the institutional domain.

    Attributes:
        email: The rejected email.
        required_suffix: The institutional suffix every email must carry.
    """

    ERROR_CODE = "INVALID_EMAIL"
    URN_SUFFIX = "student:invalid-email"
    TITLE = "Invalid Email"

    def __init__(self, email: str, required_suffix: str) -> None:
        self.email = email
        self.required_suffix = required_suffix
        super().__init__(f"Email {email!r} must end with {required_suffix!r}")


class InvalidStatusError(RegistryInvalidInputError):
    """Raised when set_status receives anything but Active or Probation.

    Graduation has its own operation and cannot be reached through
    set_status.

    Attributes:
        status: The rejected status value, as given.
    """

    ERROR_CODE = "INVALID_STATUS"
    URN_SUFFIX = "student:invalid-status"
    TITLE = "Invalid Status"

    def __init__(self, status: object) -> None:
        self.status = str(getattr(status, "value", status))
        super().__init__(
            f"Invalid status {self.status!r}: only Active and Probation can be set"
        )


class NotFinalYearError(RegistryInvalidInputError):
    """Raised when graduating a student who is not in the final year.

    Attributes:
        external_id: The student's external identifier.
        year: The student's current year.
        final_year: The configured final year of the program.
    """

    ERROR_CODE = "NOT_FINAL_YEAR"
    URN_SUFFIX = "student:not-final-year"
    TITLE = "Not In Final Year"

    def __init__(self, external_id: str, year: int, final_year: int) -> None:
        self.external_id = external_id
        self.year = year
        self.final_year = final_year
        super().__init__(
            f"Student {external_id!r} is in year {year}; "
            f"graduation requires year {final_year}"
        )


class InvalidYearError(RegistryInvalidInputError):
    """Raised when a study year is not a positive integer.

    Attributes:
        year: The rejected year.
    """

    ERROR_CODE = "INVALID_YEAR"
    URN_SUFFIX = "student:invalid-year"
    TITLE = "Invalid Year"

    def __init__(self, year: int) -> None:
        self.year = year
        super().__init__(f"Year must be a positive integer, got {year!r}")
