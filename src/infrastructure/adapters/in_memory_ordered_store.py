"""In-memory ordered store adapter.

Implements OrderedStoreProtocol with a dict for point lookups and a
sorted key list (maintained with bisect) for ordered range iteration.
Each instance holds a single value type.
"""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Iterator
from typing import TypeVar

from src.application.ports.ordered_store import OrderedStoreProtocol

V = TypeVar("V")


class InMemoryOrderedStore(OrderedStoreProtocol[V]):
    """Sorted in-memory mapping from string keys to values of type V.

    Point operations are O(1) for reads and O(n) for inserts/removals
    (list insertion). Range iteration is O(log n + k).

    Iteration works on a snapshot of the matching keys, so mutating the
    store while iterating does not raise.

    Example:
        >>> store: InMemoryOrderedStore[str] = InMemoryOrderedStore("ownership")
        >>> store.set("2021/0001", "0xabc")
        >>> list(store.items())
        [('2021/0001', '0xabc')]
    """

    def __init__(self, name: str = "") -> None:
        """Initialize an empty store.

        Args:
            name: Collection name, used in repr and logs.
        """
        self._name = name
        self._values: dict[str, V] = {}
        self._keys: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    def get(self, key: str) -> V | None:
        return self._values.get(key)

    def set(self, key: str, value: V) -> None:
        if key not in self._values:
            insort(self._keys, key)
        self._values[key] = value

    def remove(self, key: str) -> bool:
        if key not in self._values:
            return False
        del self._values[key]
        index = bisect_left(self._keys, key)
        del self._keys[index]
        return True

    def has(self, key: str) -> bool:
        return key in self._values

    def items(
        self, start: str | None = None, end: str | None = None
    ) -> Iterator[tuple[str, V]]:
        lo = 0 if start is None else bisect_left(self._keys, start)
        hi = len(self._keys) if end is None else bisect_left(self._keys, end)
        for key in self._keys[lo:hi]:
            # Skip keys removed after the snapshot was taken
            if key in self._values:
                yield key, self._values[key]

    def keys(self) -> list[str]:
        """Return all keys in ascending order."""
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        return f"InMemoryOrderedStore(name={self._name!r}, size={len(self)})"
