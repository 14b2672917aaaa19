"""
Student ID Registry - non-transferable student identity tokens

An append-mostly registry that issues one non-transferable identity
record per student, indexes those records by unique keys, and governs
their lifecycle through a small state machine administered by a
protected set of administrators.

Core guarantees:
- One record per external ID and per institutional email, forever
- Every mutation is authorized, all-or-nothing, and audited
- Graduation is terminal
- The administrator set never becomes empty
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
