"""Authorization errors for registry mutations.

Every mutating registry operation requires the caller to be a member of
the administrator set. Read-only operations never raise these errors.
"""

from __future__ import annotations

from typing import Optional

from src.domain.exceptions import RegistryError


class UnauthorizedError(RegistryError):
    """Raised when a caller without admin rights attempts a mutation.

    HTTP Status: 403 Forbidden (the caller is identified by the host,
    but is not permitted to mutate the registry).

    Attributes:
        caller: The address that attempted the operation.
        operation: Name of the rejected operation.
    """

    ERROR_CODE = "UNAUTHORIZED"
    HTTP_STATUS = 403
    URN_SUFFIX = "auth:unauthorized"
    TITLE = "Unauthorized"

    def __init__(
        self,
        caller: str,
        operation: str,
        message: Optional[str] = None,
    ) -> None:
        """Initialize unauthorized error.

        Args:
            caller: The address that attempted the operation.
            operation: Name of the rejected operation.
            message: Optional custom message.
        """
        self.caller = caller
        self.operation = operation
        if message is None:
            message = f"Caller {caller!r} is not an admin and cannot {operation}"
        super().__init__(message)

    def to_rfc7807(self, instance: str) -> dict:
        """Convert to RFC 7807 problem details with caller extension."""
        result = super().to_rfc7807(instance)
        result["caller"] = self.caller
        result["operation"] = self.operation
        return result
