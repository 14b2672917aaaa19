"""Ordered Store Port - typed sorted key-value collections.

The registry is built entirely on several independent instances of this
primitive: records, ownership, the two uniqueness indexes, the admin set
and token URIs. Each instance holds exactly one value type, so reads
never need a runtime type check.

Keys are strings and iterate in ascending lexicographic order.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar, runtime_checkable

V = TypeVar("V")


@runtime_checkable
class OrderedStoreProtocol(Protocol[V]):
    """Port for a sorted mapping from string keys to values of one type.

    Implementations need not be thread-safe. The hosting process is
    responsible for serializing mutating calls.
    """

    def get(self, key: str) -> V | None:
        """Get the value stored under key.

        Args:
            key: The key to look up.

        Returns:
            The stored value, or None if absent.
        """
        ...

    def set(self, key: str, value: V) -> None:
        """Store value under key, replacing any existing value.

        Args:
            key: The key to write.
            value: The value to store.
        """
        ...

    def remove(self, key: str) -> bool:
        """Remove key from the store.

        Args:
            key: The key to remove.

        Returns:
            True if the key was present, False otherwise.
        """
        ...

    def has(self, key: str) -> bool:
        """Check whether key is present."""
        ...

    def items(
        self, start: str | None = None, end: str | None = None
    ) -> Iterator[tuple[str, V]]:
        """Iterate entries in ascending key order.

        Args:
            start: Inclusive lower bound, or None for the first key.
            end: Exclusive upper bound, or None for past the last key.

        Yields:
            (key, value) pairs within [start, end).
        """
        ...

    def __len__(self) -> int:
        """Return number of stored keys."""
        ...
