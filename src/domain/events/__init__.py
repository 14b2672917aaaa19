"""
Domain events for the Student ID Registry.

Audit event payloads describing each successful registry mutation.
All payloads are immutable and render to flat key=value fields.
"""

from src.domain.events.student_registry import (
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
    AuditEventPayload,
    StudentDepartmentTransferredEventPayload,
    StudentGraduatedEventPayload,
    StudentStatusUpdatedEventPayload,
    StudentYearUpdatedEventPayload,
    TransferEventPayload,
)

__all__: list[str] = [
    "ADMIN_ADDED_EVENT_TYPE",
    "ADMIN_REMOVED_EVENT_TYPE",
    "MINT_FROM_ADDRESS",
    "STUDENT_DEPARTMENT_TRANSFERRED_EVENT_TYPE",
    "STUDENT_GRADUATED_EVENT_TYPE",
    "STUDENT_STATUS_UPDATED_EVENT_TYPE",
    "STUDENT_YEAR_UPDATED_EVENT_TYPE",
    "TRANSFER_EVENT_TYPE",
    "AdminChangedEventPayload",
    "AuditEvent",
    "AuditEventPayload",
    "StudentDepartmentTransferredEventPayload",
    "StudentGraduatedEventPayload",
    "StudentStatusUpdatedEventPayload",
    "StudentYearUpdatedEventPayload",
    "TransferEventPayload",
]
