"""Test helpers for Student ID Registry tests.

Helpers:
    make_application: Valid StudentApplication with overridable fields
    ADMIN: The admin seeded into every test registry
    HOLDER: Default token holder address

Usage:
    from tests.helpers import ADMIN, make_application
"""

from tests.helpers.student_factory import ADMIN, HOLDER, make_application

__all__ = ["ADMIN", "HOLDER", "make_application"]
