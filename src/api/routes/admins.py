"""Admin set API routes."""

from fastapi import APIRouter, Depends, Request, Response

from src.api.dependencies.registry import get_caller_address, get_registry_service
from src.api.models.admin import AddAdminRequest, AdminListResponse
from src.api.problem_details import registry_problem
from src.application.services.student_registry_service import StudentRegistryService
from src.domain.exceptions import RegistryError

router = APIRouter(prefix="/v1/admins", tags=["admins"])


@router.get("", response_model=AdminListResponse)
async def list_admins(
    registry: StudentRegistryService = Depends(get_registry_service),
) -> AdminListResponse:
    admins = registry.list_admins()
    return AdminListResponse(admins=admins, total_count=len(admins))


@router.post("", status_code=204)
async def add_admin(
    request: Request,
    body: AddAdminRequest,
    caller: str = Depends(get_caller_address),
    registry: StudentRegistryService = Depends(get_registry_service),
) -> Response:
    """Grant admin rights to an address.

    Raises:
        HTTPException: 403 if the caller is not an admin, 409 if the
            address is already an admin.
    """
    try:
        registry.add_admin(caller, body.address)
    except RegistryError as e:
        raise registry_problem(e, request) from None
    return Response(status_code=204)


@router.delete("/{address}", status_code=204)
async def remove_admin(
    request: Request,
    address: str,
    caller: str = Depends(get_caller_address),
    registry: StudentRegistryService = Depends(get_registry_service),
) -> Response:
    """Revoke admin rights from an address.

    The last remaining admin can never be removed, and admins cannot
    remove themselves.
    """
    try:
        registry.remove_admin(caller, address)
    except RegistryError as e:
        raise registry_problem(e, request) from None
    return Response(status_code=204)
