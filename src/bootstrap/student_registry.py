"""Bootstrap wiring for the student registry.

The hosting process builds one registry instance here and passes it by
reference to every caller (the API stores it on app.state). Nothing is
cached at module level, so tests can build as many independent
registries as they need.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.application.ports.audit_event_sink import AuditEventSink
from src.application.ports.logical_clock import LogicalClockProtocol
from src.application.services.registry_stores import RegistryCollections
from src.application.services.student_registry_service import StudentRegistryService
from src.config.registry_config import RegistryConfig
from src.domain.models import StudentRecord
from src.infrastructure.adapters import (
    InMemoryAuditLog,
    InMemoryOrderedStore,
    MonotonicHeightClock,
)


def create_in_memory_collections() -> RegistryCollections:
    """Create the six independent in-memory collections of a registry."""
    return RegistryCollections(
        records=InMemoryOrderedStore[StudentRecord]("records"),
        ownership=InMemoryOrderedStore[str]("ownership"),
        email_index=InMemoryOrderedStore[str]("email_index"),
        external_id_index=InMemoryOrderedStore[str]("external_id_index"),
        admins=InMemoryOrderedStore[bool]("admins"),
        token_uris=InMemoryOrderedStore[str]("token_uris"),
    )


def build_student_registry(
    config: RegistryConfig | None = None,
    *,
    initial_admins: Iterable[str] | None = None,
    clock: LogicalClockProtocol | None = None,
    audit_sink: AuditEventSink | None = None,
    collections: RegistryCollections | None = None,
) -> StudentRegistryService:
    """Build a fully wired registry.

    Args:
        config: Registry configuration (default: from environment).
        initial_admins: Seed admins (default: config.initial_admins).
        clock: Logical clock (default: MonotonicHeightClock).
        audit_sink: Audit trail (default: InMemoryAuditLog).
        collections: Backing collections (default: fresh in-memory stores).

    Returns:
        A new StudentRegistryService.

    Raises:
        ValueError: If no initial admin is available.
    """
    if config is None:
        config = RegistryConfig.from_environment()
    return StudentRegistryService(
        collections=(
            collections if collections is not None else create_in_memory_collections()
        ),
        config=config,
        clock=clock if clock is not None else MonotonicHeightClock(),
        audit_sink=audit_sink if audit_sink is not None else InMemoryAuditLog(),
        initial_admins=initial_admins,
    )
