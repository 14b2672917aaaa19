"""Logical clock port.

The host environment supplies a monotonically increasing, chain-height
like counter. The registry records it as the graduation timestamp.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LogicalClockProtocol(Protocol):
    """Port for reading the host's logical height."""

    def current_height(self) -> int:
        """Return the current logical height.

        Successive calls never return a smaller value.

        Returns:
            Height, always >= 1.
        """
        ...
