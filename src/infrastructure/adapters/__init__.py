"""Infrastructure adapters for the Student ID Registry.

Adapters implement the ports defined in the application layer,
providing concrete implementations for storage, audit and time.
"""

from src.infrastructure.adapters.in_memory_audit_log import InMemoryAuditLog
from src.infrastructure.adapters.in_memory_ordered_store import InMemoryOrderedStore
from src.infrastructure.adapters.monotonic_height_clock import (
    FixedHeightClock,
    MonotonicHeightClock,
)

__all__: list[str] = [
    "FixedHeightClock",
    "InMemoryAuditLog",
    "InMemoryOrderedStore",
    "MonotonicHeightClock",
]
