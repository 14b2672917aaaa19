"""Application ports - Abstract interfaces for infrastructure adapters.

Available ports:
- OrderedStoreProtocol: Typed sorted key-value collection
- AuditEventSink: Append-only audit trail
- LogicalClockProtocol: Host-supplied logical height
"""

from src.application.ports.audit_event_sink import AuditEventSink
from src.application.ports.logical_clock import LogicalClockProtocol
from src.application.ports.ordered_store import OrderedStoreProtocol

__all__: list[str] = [
    "AuditEventSink",
    "LogicalClockProtocol",
    "OrderedStoreProtocol",
]
