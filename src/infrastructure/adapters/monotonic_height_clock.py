"""Monotonic logical height clock adapter.

Stands in for the host chain height when the registry runs as a plain
service: every read returns the next height.
"""

from __future__ import annotations

import threading

from src.application.ports.logical_clock import LogicalClockProtocol


class MonotonicHeightClock(LogicalClockProtocol):
    """Counter that advances by one on every read.

    Example:
        >>> clock = MonotonicHeightClock()
        >>> clock.current_height()
        1
        >>> clock.current_height()
        2
    """

    def __init__(self, start: int = 1) -> None:
        """Initialize the clock.

        Args:
            start: Height returned by the first read (>= 1).
        """
        if start < 1:
            raise ValueError(f"start must be at least 1, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def current_height(self) -> int:
        with self._lock:
            height = self._next
            self._next += 1
            return height


class FixedHeightClock(LogicalClockProtocol):
    """Clock pinned to a height the host sets explicitly."""

    def __init__(self, height: int = 1) -> None:
        self.height = height

    def current_height(self) -> int:
        return self.height

    def advance(self, blocks: int = 1) -> int:
        """Move the height forward and return the new value."""
        if blocks < 0:
            raise ValueError("a logical clock cannot move backwards")
        self.height += blocks
        return self.height
