"""Terminal lifecycle state errors.

Once a student record reaches GRADUATED no further mutation is
accepted. Reads remain available.
"""

from __future__ import annotations

from src.domain.exceptions import RegistryError


class TerminalStateError(RegistryError):
    """Base class for mutations attempted on a record in a terminal state.

    HTTP Status: 409 Conflict
    """

    HTTP_STATUS = 409


class AlreadyGraduatedError(TerminalStateError):
    """Raised when mutating a record that has already graduated.

    Attributes:
        external_id: The graduated student's external identifier.
        graduated_at: Logical height at which graduation was recorded.
    """

    ERROR_CODE = "ALREADY_GRADUATED"
    URN_SUFFIX = "student:already-graduated"
    TITLE = "Already Graduated"

    def __init__(self, external_id: str, graduated_at: int | None = None) -> None:
        self.external_id = external_id
        self.graduated_at = graduated_at
        super().__init__(
            f"Student {external_id!r} has graduated. "
            "Graduated records cannot be modified."
        )
