"""Application services - Use case orchestration.

Available services:
- StudentRegistryService: Registry façade (issuance, lifecycle, admins)
- AdminSet: Admin membership with the never-empty invariant
- NonTransferableTokenService: Token read views, disabled transfers
- Registry stores: typed wrappers over the ordered collections
"""

from src.application.services.admin_set import AdminSet
from src.application.services.registry_stores import (
    IdentityRecordStore,
    OwnershipIndex,
    RegistryCollections,
    TokenURIStore,
    UniquenessIndex,
)
from src.application.services.student_registry_service import StudentRegistryService
from src.application.services.student_summary import render_student_summary
from src.application.services.token_view_service import (
    EMPTY_ADDRESS,
    NonTransferableTokenService,
)

__all__: list[str] = [
    "AdminSet",
    "EMPTY_ADDRESS",
    "IdentityRecordStore",
    "NonTransferableTokenService",
    "OwnershipIndex",
    "RegistryCollections",
    "StudentRegistryService",
    "TokenURIStore",
    "UniquenessIndex",
    "render_student_summary",
]
