"""Typed registry collections built on the ordered store port.

The registry keeps six independent ordered collections:

- records: token_id -> StudentRecord
- ownership: token_id -> holder address
- email index: email -> token_id
- external-ID index: external_id -> token_id
- admins: address -> True
- token URIs: token_id -> image URI

Only StudentRegistryService (and the AdminSet it owns) may write to
these wrappers. Entries are created at issuance and are never removed
in normal operation; the release/discard methods exist solely so an
interrupted atomic write can be rolled back.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from src.application.ports.ordered_store import OrderedStoreProtocol
from src.domain.models import StudentRecord


@dataclass(frozen=True)
class RegistryCollections:
    """The six ordered collections backing one registry instance.

    Attributes:
        records: Canonical student records keyed by token ID.
        ownership: Holder address keyed by token ID.
        email_index: Token ID keyed by email.
        external_id_index: Token ID keyed by external ID.
        admins: Admin membership keyed by address.
        token_uris: Token image URI keyed by token ID.
    """

    records: OrderedStoreProtocol[StudentRecord]
    ownership: OrderedStoreProtocol[str]
    email_index: OrderedStoreProtocol[str]
    external_id_index: OrderedStoreProtocol[str]
    admins: OrderedStoreProtocol[bool]
    token_uris: OrderedStoreProtocol[str]


class IdentityRecordStore:
    """Canonical student records keyed by token identifier.

    Records are written whole. There is no partial field update, so a
    reader always sees either the old or the new record.
    """

    def __init__(self, store: OrderedStoreProtocol[StudentRecord]) -> None:
        self._store = store

    def get(self, token_id: str) -> StudentRecord | None:
        return self._store.get(token_id)

    def contains(self, token_id: str) -> bool:
        return self._store.has(token_id)

    def put(self, record: StudentRecord) -> StudentRecord | None:
        """Write a record, replacing any previous version.

        Args:
            record: The complete record to store.

        Returns:
            The replaced record, or None for a first write.
        """
        previous = self._store.get(record.token_id)
        self._store.set(record.token_id, record)
        return previous

    def restore(self, token_id: str, previous: StudentRecord | None) -> None:
        """Undo a put by restoring the previous version (rollback only)."""
        if previous is None:
            self._store.remove(token_id)
        else:
            self._store.set(token_id, previous)

    def records(self) -> Iterator[StudentRecord]:
        """Iterate records in token identifier order."""
        for _, record in self._store.items():
            yield record

    def __len__(self) -> int:
        return len(self._store)


class OwnershipIndex:
    """Holder address per token identifier.

    balance_of is a linear scan over every ownership entry. This is an
    accepted O(n) cost at registry scale, not an oversight.
    """

    def __init__(self, store: OrderedStoreProtocol[str]) -> None:
        self._store = store

    def owner_of(self, token_id: str) -> str | None:
        return self._store.get(token_id)

    def assign(self, token_id: str, holder: str) -> None:
        self._store.set(token_id, holder)

    def release(self, token_id: str) -> None:
        """Remove an ownership entry (rollback only)."""
        self._store.remove(token_id)

    def balance_of(self, holder: str) -> int:
        """Count tokens held by an address.

        Args:
            holder: The address to count for.

        Returns:
            Number of ownership entries naming holder.
        """
        return sum(1 for _, owner in self._store.items() if owner == holder)


class UniquenessIndex:
    """Maps an attribute value to the single token that claimed it.

    Claims are permanent: a value that was claimed once can never be
    claimed again.
    """

    def __init__(self, store: OrderedStoreProtocol[str], attribute: str) -> None:
        """Initialize the index.

        Args:
            store: Backing ordered store.
            attribute: Name of the indexed attribute (e.g. "email").
        """
        self._store = store
        self.attribute = attribute

    def contains(self, value: str) -> bool:
        return self._store.has(value)

    def token_for(self, value: str) -> str | None:
        return self._store.get(value)

    def claim(self, value: str, token_id: str) -> None:
        """Record that value belongs to token_id.

        Raises:
            ValueError: If value is already claimed. Callers must check
                contains() first and raise the matching domain error.
        """
        if self._store.has(value):
            raise ValueError(f"{self.attribute} {value!r} is already claimed")
        self._store.set(value, token_id)

    def release(self, value: str) -> None:
        """Drop a claim (rollback only)."""
        self._store.remove(value)


class TokenURIStore:
    """Image URI per token identifier."""

    def __init__(self, store: OrderedStoreProtocol[str]) -> None:
        self._store = store

    def get(self, token_id: str) -> str | None:
        return self._store.get(token_id)

    def set(self, token_id: str, uri: str) -> None:
        self._store.set(token_id, uri)

    def discard(self, token_id: str) -> None:
        self._store.remove(token_id)
