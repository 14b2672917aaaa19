"""Port definition for the registry audit trail.

The registry PUBLISHES one event per successful mutation. Events are
append-only and never consumed by the registry itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.events import AuditEvent


class AuditEventSink(ABC):
    """Port for appending audit events.

    The registry's responsibility ends at emitting. Whether and how the
    trail is stored or shipped is up to the implementation.
    """

    @abstractmethod
    def emit(self, name: str, fields: dict[str, str]) -> AuditEvent:
        """Append an event to the audit trail.

        Args:
            name: Event type.
            fields: Flat key=value attributes.

        Returns:
            The recorded event, with its sequence assigned.
        """
        ...
