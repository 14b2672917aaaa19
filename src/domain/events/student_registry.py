"""Audit event payloads for the Student ID Registry.

Every successful mutation emits exactly one audit event. Events are
append-only and form the registry's sole audit trail; the registry
never reads them back.

Each payload renders to a flat mapping of string keys to string values
naming the actor, the subject and the changed attribute(s).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

# Event type constants
ADMIN_ADDED_EVENT_TYPE: str = "admin_added"
ADMIN_REMOVED_EVENT_TYPE: str = "admin_removed"
TRANSFER_EVENT_TYPE: str = "transfer"
STUDENT_YEAR_UPDATED_EVENT_TYPE: str = "student_year_updated"
STUDENT_STATUS_UPDATED_EVENT_TYPE: str = "student_status_updated"
STUDENT_DEPARTMENT_TRANSFERRED_EVENT_TYPE: str = "student_department_transferred"
STUDENT_GRADUATED_EVENT_TYPE: str = "student_graduated"

# Sender of a mint-style transfer
MINT_FROM_ADDRESS: str = ""


@dataclass(frozen=True, eq=True)
class AuditEvent:
    """An audit event recorded by an AuditEventSink.

    Attributes:
        name: Event type (one of the *_EVENT_TYPE constants).
        fields: Flat key=value attributes of the event.
        sequence: Position in the audit log, assigned by the sink (1-based).
    """

    name: str
    fields: dict[str, str] = field(default_factory=dict)
    sequence: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "fields": dict(self.fields),
            "sequence": self.sequence,
        }


@dataclass(frozen=True, eq=True)
class AdminChangedEventPayload:
    """Payload for admin_added and admin_removed.

    Attributes:
        event_type: ADMIN_ADDED_EVENT_TYPE or ADMIN_REMOVED_EVENT_TYPE.
        actor: Admin that performed the change.
        admin: Address added to or removed from the admin set.
    """

    event_type: str
    actor: str
    admin: str

    def __post_init__(self) -> None:
        if self.event_type not in (ADMIN_ADDED_EVENT_TYPE, ADMIN_REMOVED_EVENT_TYPE):
            raise ValueError(f"Not an admin event type: {self.event_type!r}")

    def to_fields(self) -> dict[str, str]:
        return {"actor": self.actor, "admin": self.admin}


@dataclass(frozen=True, eq=True)
class TransferEventPayload:
    """Payload for the mint-style transfer emitted on issuance.

    Tokens are only ever minted, so from_address is always empty.

    Attributes:
        to_address: Holder the token was issued to.
        token_id: Issued token identifier.
        from_address: Always MINT_FROM_ADDRESS.
    """

    to_address: str
    token_id: str
    from_address: str = MINT_FROM_ADDRESS

    event_type: str = field(default=TRANSFER_EVENT_TYPE, init=False)

    def to_fields(self) -> dict[str, str]:
        return {
            "from": self.from_address,
            "to": self.to_address,
            "token_id": self.token_id,
        }


@dataclass(frozen=True, eq=True)
class StudentYearUpdatedEventPayload:
    """Payload for student_year_updated."""

    actor: str
    token_id: str
    year: int

    event_type: str = field(default=STUDENT_YEAR_UPDATED_EVENT_TYPE, init=False)

    def to_fields(self) -> dict[str, str]:
        return {"actor": self.actor, "token_id": self.token_id, "year": str(self.year)}


@dataclass(frozen=True, eq=True)
class StudentStatusUpdatedEventPayload:
    """Payload for student_status_updated.

    Attributes:
        actor: Admin that changed the status.
        token_id: Subject token.
        status: New status value ("Active" or "Probation").
        reason: Probation reason, empty when moving to Active.
    """

    actor: str
    token_id: str
    status: str
    reason: str = ""

    event_type: str = field(default=STUDENT_STATUS_UPDATED_EVENT_TYPE, init=False)

    def to_fields(self) -> dict[str, str]:
        return {
            "actor": self.actor,
            "token_id": self.token_id,
            "status": self.status,
            "reason": self.reason,
        }


@dataclass(frozen=True, eq=True)
class StudentDepartmentTransferredEventPayload:
    """Payload for student_department_transferred."""

    actor: str
    token_id: str
    from_department: str
    to_department: str

    event_type: str = field(
        default=STUDENT_DEPARTMENT_TRANSFERRED_EVENT_TYPE, init=False
    )

    def to_fields(self) -> dict[str, str]:
        return {
            "actor": self.actor,
            "token_id": self.token_id,
            "from_department": self.from_department,
            "to_department": self.to_department,
        }


@dataclass(frozen=True, eq=True)
class StudentGraduatedEventPayload:
    """Payload for student_graduated.

    Attributes:
        actor: Admin that recorded the graduation.
        token_id: Subject token.
        graduated_at: Logical height recorded on the record.
    """

    actor: str
    token_id: str
    graduated_at: int

    event_type: str = field(default=STUDENT_GRADUATED_EVENT_TYPE, init=False)

    def to_fields(self) -> dict[str, str]:
        return {
            "actor": self.actor,
            "token_id": self.token_id,
            "graduated_at": str(self.graduated_at),
        }


class AuditEventPayload(Protocol):
    """Structural type shared by every payload above."""

    @property
    def event_type(self) -> str: ...

    def to_fields(self) -> dict[str, str]: ...
