"""In-memory audit log adapter.

Append-only implementation of AuditEventSink. Every recorded event is
also written to the structured log so the trail survives in log
aggregation even though the in-memory list does not.
"""

from __future__ import annotations

import structlog

from src.application.ports.audit_event_sink import AuditEventSink
from src.domain.events import AuditEvent

logger = structlog.get_logger()


class InMemoryAuditLog(AuditEventSink):
    """Append-only in-memory audit trail.

    Sequence numbers start at 1 and increase by one per event.

    Attributes:
        _events: Recorded events in emission order.
    """

    def __init__(self) -> None:
        """Initialize an empty audit log."""
        self._events: list[AuditEvent] = []

    def emit(self, name: str, fields: dict[str, str]) -> AuditEvent:
        """Append an event and log it.

        Args:
            name: Event type.
            fields: Flat key=value attributes (copied).

        Returns:
            The recorded AuditEvent.
        """
        event = AuditEvent(
            name=name,
            fields=dict(fields),
            sequence=len(self._events) + 1,
        )
        self._events.append(event)
        logger.info(
            "audit_event_recorded",
            audit_event=name,
            sequence=event.sequence,
            **event.fields,
        )
        return event

    def events(self, name: str | None = None) -> list[AuditEvent]:
        """Return recorded events, optionally filtered by type.

        Args:
            name: Event type to filter on, or None for all.

        Returns:
            Events in emission order.
        """
        if name is None:
            return list(self._events)
        return [event for event in self._events if event.name == name]

    def __len__(self) -> int:
        return len(self._events)
