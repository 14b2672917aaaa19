"""
Infrastructure layer - Adapters for the Student ID Registry.

This layer contains:
- In-memory ordered store (the registry's collections)
- In-memory audit log (append-only audit trail)
- Logical height clocks
- Observability (structlog configuration, per-request context)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
