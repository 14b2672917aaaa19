"""Factories for student applications used across registry tests."""

from src.domain.models import StudentApplication

ADMIN = "admin-0"
HOLDER = "0xHolder"


def make_application(
    external_id: str = "2021/0001",
    email: str = "john@raf.rs",
    year: int = 1,
    enrolled_at: str = "2021-10-01",
    department: str = "Computer Science",
    full_name: str = "John Doe",
) -> StudentApplication:
    """Build a valid student application with overridable fields."""
    return StudentApplication(
        full_name=full_name,
        date_of_birth="2002-05-14",
        email=email,
        external_id=external_id,
        department=department,
        year=year,
        enrolled_at=enrolled_at,
    )
