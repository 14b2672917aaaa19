"""Token views over the ownership index.

Student ID tokens follow the usual non-fungible token read interface
(balance, owner, URI, name, symbol). Their mutation surface (transfer,
approve, operator approval) exists only to satisfy that interface and
always raises NonTransferableError without touching any store.
"""

from __future__ import annotations

from src.application.services.base import LoggingMixin
from src.application.services.registry_stores import (
    IdentityRecordStore,
    OwnershipIndex,
    TokenURIStore,
)
from src.domain.errors import InvalidTokenError, NonTransferableError

# Address reported when no approval exists
EMPTY_ADDRESS: str = ""


class NonTransferableTokenService(LoggingMixin):
    """Read-only token queries plus the disabled transfer surface."""

    def __init__(
        self,
        records: IdentityRecordStore,
        ownership: OwnershipIndex,
        token_uris: TokenURIStore,
        token_name: str,
        token_symbol: str,
    ) -> None:
        """Initialize the token view service.

        Args:
            records: Record store, used for total supply.
            ownership: Ownership index.
            token_uris: Per-token URI store.
            token_name: Collection name.
            token_symbol: Collection symbol.
        """
        self._records = records
        self._ownership = ownership
        self._token_uris = token_uris
        self._token_name = token_name
        self._token_symbol = token_symbol
        self._init_logger(component="token")

    def name(self) -> str:
        return self._token_name

    def symbol(self) -> str:
        return self._token_symbol

    def total_supply(self) -> int:
        """Number of tokens ever issued (tokens are never burned)."""
        return len(self._records)

    def balance_of(self, holder: str) -> int:
        """Count tokens held by an address (linear scan).

        Args:
            holder: Address to count for.

        Returns:
            Number of tokens held, 0 for unknown addresses.
        """
        return self._ownership.balance_of(holder)

    def owner_of(self, token_id: str) -> str:
        """Get the holder of a token.

        Raises:
            InvalidTokenError: If the token was never issued.
        """
        owner = self._ownership.owner_of(token_id)
        if owner is None:
            raise InvalidTokenError(token_id)
        return owner

    def token_uri(self, token_id: str) -> str:
        """Get the image URI of a token.

        Raises:
            InvalidTokenError: If the token was never issued.
        """
        uri = self._token_uris.get(token_id)
        if uri is None:
            raise InvalidTokenError(token_id)
        return uri

    def get_approved(self, token_id: str) -> str:
        """Approvals never exist; returns the empty address.

        Raises:
            InvalidTokenError: If the token was never issued.
        """
        self.owner_of(token_id)
        return EMPTY_ADDRESS

    def is_approved_for_all(self, owner: str, operator: str) -> bool:
        return False

    def transfer_from(self, caller: str, from_address: str, to_address: str, token_id: str) -> None:
        self._reject("transfer_from", caller=caller, token_id=token_id)

    def safe_transfer_from(
        self,
        caller: str,
        from_address: str,
        to_address: str,
        token_id: str,
        data: bytes = b"",
    ) -> None:
        self._reject("safe_transfer_from", caller=caller, token_id=token_id)

    def approve(self, caller: str, approved: str, token_id: str) -> None:
        self._reject("approve", caller=caller, token_id=token_id)

    def set_approval_for_all(self, caller: str, operator: str, approved: bool) -> None:
        self._reject("set_approval_for_all", caller=caller, operator=operator)

    def _reject(self, operation: str, **context: object) -> None:
        error = NonTransferableError(operation)
        self._log_rejection(self._log_operation(operation, **context), operation, error)
        raise error
