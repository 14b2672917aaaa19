"""
API layer - FastAPI routes and HTTP concerns for the Student ID Registry.

This layer contains:
- FastAPI route definitions
- Request/Response DTOs
- HTTP middleware
- RFC 7807 error mapping

IMPORT RULES:
- CAN import from: application, domain, bootstrap
- Infrastructure only through observability (request context)
- The registry instance is injected through app.state
"""

__all__: list[str] = []
