"""
API routes for the Student ID Registry.

Available routers:
- health: Health check endpoint
- students: Issuance, records and lifecycle transitions
- admins: Admin set management
- tokens: Token views, enrollment and the disabled transfer surface
"""

from src.api.routes.admins import router as admins_router
from src.api.routes.health import router as health_router
from src.api.routes.students import router as students_router
from src.api.routes.tokens import router as tokens_router

__all__: list[str] = [
    "admins_router",
    "health_router",
    "students_router",
    "tokens_router",
]
