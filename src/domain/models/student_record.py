"""Student record domain model and lifecycle state machine.

A student record is the identity carried by one non-transferable token.
Identity fields are fixed at issuance; lifecycle fields change only by
replacing the whole record with a new frozen value.

State Machine:
    ACTIVE -> PROBATION (set_status)
    PROBATION -> ACTIVE (set_status)
    ACTIVE / PROBATION -> ACTIVE / PROBATION (set_status is idempotent)
    ACTIVE / PROBATION -> GRADUATED (graduate, final year only)

Terminal States:
    GRADUATED is terminal. Every mutating method on a graduated record
    raises AlreadyGraduatedError.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class StudentStatus(Enum):
    """Lifecycle status of a student record.

    States:
        ACTIVE: Enrolled and in good standing (initial state)
        PROBATION: Enrolled under probation, with a recorded reason
        GRADUATED: Graduated (terminal)
    """

    ACTIVE = "Active"
    PROBATION = "Probation"
    GRADUATED = "Graduated"

    def is_terminal(self) -> bool:
        """Check if this status accepts no further mutation.

        Returns:
            True for GRADUATED, False otherwise.
        """
        return self in TERMINAL_STATUSES

    def is_settable(self) -> bool:
        """Check if this status may be assigned through set_status.

        Returns:
            True for ACTIVE and PROBATION.
        """
        return self in SETTABLE_STATUSES


TERMINAL_STATUSES: frozenset[StudentStatus] = frozenset({StudentStatus.GRADUATED})

SETTABLE_STATUSES: frozenset[StudentStatus] = frozenset(
    {StudentStatus.ACTIVE, StudentStatus.PROBATION}
)


def derive_token_id(external_id: str) -> str:
    """Derive the token identifier for an external ID.

    The token identifier equals the external ID. It is stable for the
    lifetime of the record and keys the record, ownership and token URI
    collections.

    Args:
        external_id: Caller-supplied unique student identifier.

    Returns:
        The token identifier.
    """
    return external_id


def is_valid_year(year: object) -> bool:
    """Check that a study year is a positive int (bool excluded)."""
    return isinstance(year, int) and not isinstance(year, bool) and year >= 1


@dataclass(frozen=True, eq=True)
class StudentApplication:
    """Caller-supplied data for issuing a student ID.

    image_url is accepted for interface compatibility only. Issuance
    always replaces it with the registry's default image.

    Attributes:
        full_name: Student's full name.
        date_of_birth: Date of birth (opaque string).
        email: Institutional email address.
        external_id: Unique student identifier (e.g. "2021/0001").
        department: Department the student is enrolled in.
        year: Current year of study (positive).
        enrolled_at: Opaque ordering key for enrollment (e.g. ISO date).
        image_url: Ignored by issuance.
    """

    full_name: str
    date_of_birth: str
    email: str
    external_id: str
    department: str
    year: int
    enrolled_at: str
    image_url: str = field(default="")

    def __post_init__(self) -> None:
        """Validate application fields."""
        if not self.external_id or not self.external_id.strip():
            raise ValueError("external_id must be a non-blank string")
        if not self.email:
            raise ValueError("email must be provided")


@dataclass(frozen=True, eq=True)
class StudentRecord:
    """Canonical identity record held by the registry.

    Invariant: graduated_at is set if and only if status is GRADUATED.

    Attributes:
        full_name: Student's full name.
        date_of_birth: Date of birth (opaque string).
        email: Institutional email address (unique).
        external_id: Unique student identifier, also the token identifier.
        enrolled_at: Opaque ordering key for enrollment.
        department: Current department.
        year: Current year of study.
        image_url: System-assigned image URL.
        status: Current lifecycle status.
        probation_reason: Reason for probation, only while on PROBATION.
        graduated_at: Logical height of graduation, only when GRADUATED.
    """

    full_name: str
    date_of_birth: str
    email: str
    external_id: str
    enrolled_at: str
    department: str
    year: int
    image_url: str
    status: StudentStatus = field(default=StudentStatus.ACTIVE)
    probation_reason: str | None = field(default=None)
    graduated_at: int | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate lifecycle invariants."""
        graduated = self.status is StudentStatus.GRADUATED
        if graduated != (self.graduated_at is not None):
            raise ValueError("graduated_at must be set if and only if status is Graduated")
        if self.probation_reason is not None and self.status is not StudentStatus.PROBATION:
            raise ValueError("probation_reason is only allowed while on Probation")

    @classmethod
    def from_application(
        cls, application: StudentApplication, image_url: str
    ) -> StudentRecord:
        """Build a fresh ACTIVE record from an application.

        Args:
            application: Caller-supplied issuance data.
            image_url: System default image, replacing any supplied URL.

        Returns:
            New StudentRecord in ACTIVE status.
        """
        return cls(
            full_name=application.full_name,
            date_of_birth=application.date_of_birth,
            email=application.email,
            external_id=application.external_id,
            enrolled_at=application.enrolled_at,
            department=application.department,
            year=application.year,
            image_url=image_url,
        )

    @property
    def token_id(self) -> str:
        """Token identifier derived from the external ID."""
        return derive_token_id(self.external_id)

    @property
    def is_graduated(self) -> bool:
        return self.status.is_terminal()

    def _ensure_mutable(self) -> None:
        # Import here to avoid circular dependency
        from src.domain.errors.lifecycle import AlreadyGraduatedError

        if self.status.is_terminal():
            raise AlreadyGraduatedError(
                external_id=self.external_id,
                graduated_at=self.graduated_at,
            )

    def with_year(self, year: int) -> StudentRecord:
        """Create new record with an updated year of study.

        Args:
            year: The new year (positive).

        Returns:
            New StudentRecord with year replaced.

        Raises:
            AlreadyGraduatedError: If the record is GRADUATED.
            InvalidYearError: If year is not positive.
        """
        from src.domain.errors.invalid_input import InvalidYearError

        self._ensure_mutable()
        if not is_valid_year(year):
            raise InvalidYearError(year)
        return replace(self, year=year)

    def with_status(self, status: StudentStatus, reason: str = "") -> StudentRecord:
        """Create new record with ACTIVE or PROBATION status.

        The probation reason is kept only when moving to PROBATION. An
        empty reason is stored as None.

        Args:
            status: Target status (ACTIVE or PROBATION).
            reason: Probation reason, ignored for ACTIVE.

        Returns:
            New StudentRecord with status and probation_reason replaced.

        Raises:
            AlreadyGraduatedError: If the record is GRADUATED.
            InvalidStatusError: If status cannot be set directly.
        """
        from src.domain.errors.invalid_input import InvalidStatusError

        self._ensure_mutable()
        if not status.is_settable():
            raise InvalidStatusError(status)
        probation_reason = (reason or None) if status is StudentStatus.PROBATION else None
        return replace(self, status=status, probation_reason=probation_reason)

    def with_department(self, department: str) -> StudentRecord:
        """Create new record transferred to another department.

        Raises:
            AlreadyGraduatedError: If the record is GRADUATED.
        """
        self._ensure_mutable()
        return replace(self, department=department)

    def graduated(self, height: int, final_year: int) -> StudentRecord:
        """Create new GRADUATED record.

        Args:
            height: Current logical height recorded as graduated_at.
            final_year: Year a student must be in to graduate.

        Returns:
            New StudentRecord in the terminal GRADUATED status.

        Raises:
            AlreadyGraduatedError: If the record is already GRADUATED.
            NotFinalYearError: If year differs from final_year.
        """
        from src.domain.errors.invalid_input import NotFinalYearError

        self._ensure_mutable()
        if self.year != final_year:
            raise NotFinalYearError(
                external_id=self.external_id,
                year=self.year,
                final_year=final_year,
            )
        return replace(
            self,
            status=StudentStatus.GRADUATED,
            probation_reason=None,
            graduated_at=height,
        )
