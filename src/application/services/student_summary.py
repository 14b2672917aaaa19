"""Human-readable rendering of student records."""

from __future__ import annotations

from src.domain.models import StudentRecord, StudentStatus


def render_student_summary(record: StudentRecord, holder: str | None = None) -> str:
    """Render a multi-line summary of a student record.

    Args:
        record: The record to render.
        holder: Token holder address, included when known.

    Returns:
        Summary text, one "Label: value" pair per line.
    """
    lines = [
        f"Student ID: {record.external_id}",
        f"Name: {record.full_name}",
        f"Date of birth: {record.date_of_birth}",
        f"Email: {record.email}",
        f"Department: {record.department}",
        f"Year: {record.year}",
        f"Enrolled: {record.enrolled_at}",
        f"Status: {record.status.value}",
    ]
    if record.status is StudentStatus.PROBATION and record.probation_reason:
        lines.append(f"Probation reason: {record.probation_reason}")
    if record.graduated_at is not None:
        lines.append(f"Graduated at height: {record.graduated_at}")
    if holder is not None:
        lines.append(f"Holder: {holder}")
    lines.append(f"Image: {record.image_url}")
    return "\n".join(lines)
