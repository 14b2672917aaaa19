"""Unit tests for registry audit event payloads."""

import pytest

from src.domain.events import (
    ADMIN_ADDED_EVENT_TYPE,
    ADMIN_REMOVED_EVENT_TYPE,
    MINT_FROM_ADDRESS,
    STUDENT_DEPARTMENT_TRANSFERRED_EVENT_TYPE,
    STUDENT_GRADUATED_EVENT_TYPE,
    STUDENT_STATUS_UPDATED_EVENT_TYPE,
    STUDENT_YEAR_UPDATED_EVENT_TYPE,
    TRANSFER_EVENT_TYPE,
    AdminChangedEventPayload,
    AuditEvent,
    StudentDepartmentTransferredEventPayload,
    StudentGraduatedEventPayload,
    StudentStatusUpdatedEventPayload,
    StudentYearUpdatedEventPayload,
    TransferEventPayload,
)


class TestAdminChangedEventPayload:
    def test_added_fields(self) -> None:
        payload = AdminChangedEventPayload(
            event_type=ADMIN_ADDED_EVENT_TYPE, actor="admin-0", admin="admin-1"
        )

        assert payload.to_fields() == {"actor": "admin-0", "admin": "admin-1"}

    def test_removed_type_accepted(self) -> None:
        payload = AdminChangedEventPayload(
            event_type=ADMIN_REMOVED_EVENT_TYPE, actor="admin-0", admin="admin-1"
        )

        assert payload.event_type == "admin_removed"

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValueError, match="Not an admin event type"):
            AdminChangedEventPayload(event_type="transfer", actor="a", admin="b")


class TestTransferEventPayload:
    def test_mint_is_from_empty_address(self) -> None:
        payload = TransferEventPayload(to_address="0xHolder", token_id="2021/0001")

        assert payload.event_type == TRANSFER_EVENT_TYPE
        assert payload.to_fields() == {
            "from": MINT_FROM_ADDRESS,
            "to": "0xHolder",
            "token_id": "2021/0001",
        }


class TestLifecyclePayloads:
    """Lifecycle payloads render every value as a string field."""

    def test_year_updated(self) -> None:
        payload = StudentYearUpdatedEventPayload(actor="a", token_id="t", year=3)

        assert payload.event_type == STUDENT_YEAR_UPDATED_EVENT_TYPE
        assert payload.to_fields()["year"] == "3"

    def test_status_updated(self) -> None:
        payload = StudentStatusUpdatedEventPayload(
            actor="a", token_id="t", status="Probation", reason="late"
        )

        assert payload.event_type == STUDENT_STATUS_UPDATED_EVENT_TYPE
        assert payload.to_fields() == {
            "actor": "a",
            "token_id": "t",
            "status": "Probation",
            "reason": "late",
        }

    def test_department_transferred(self) -> None:
        payload = StudentDepartmentTransferredEventPayload(
            actor="a", token_id="t", from_department="CS", to_department="Math"
        )

        assert payload.event_type == STUDENT_DEPARTMENT_TRANSFERRED_EVENT_TYPE
        assert payload.to_fields()["from_department"] == "CS"
        assert payload.to_fields()["to_department"] == "Math"

    def test_graduated(self) -> None:
        payload = StudentGraduatedEventPayload(actor="a", token_id="t", graduated_at=9)

        assert payload.event_type == STUDENT_GRADUATED_EVENT_TYPE
        assert payload.to_fields()["graduated_at"] == "9"


class TestAuditEvent:
    def test_to_dict(self) -> None:
        event = AuditEvent(name="transfer", fields={"to": "0xA"}, sequence=3)

        assert event.to_dict() == {
            "name": "transfer",
            "fields": {"to": "0xA"},
            "sequence": 3,
        }
