"""Errors for the disabled token transfer surface.

Student ID tokens are bound to their holder at issuance. The transfer
and approval entry points exist only to satisfy the token interface and
always raise NonTransferableError.
"""

from __future__ import annotations

from src.domain.exceptions import RegistryError


class UnsupportedOperationError(RegistryError):
    """Base class for operations the registry never performs.

    HTTP Status: 405 Method Not Allowed
    """

    HTTP_STATUS = 405


class NonTransferableError(UnsupportedOperationError):
    """Raised by every transfer, approval and operator entry point.

    Attributes:
        operation: Name of the rejected token operation.
    """

    ERROR_CODE = "NON_TRANSFERABLE"
    URN_SUFFIX = "token:non-transferable"
    TITLE = "Token Is Non-Transferable"

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Student ID tokens are non-transferable: {operation} is disabled")
