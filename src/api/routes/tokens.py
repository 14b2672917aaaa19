"""Token view API routes.

Read-only token queries, enrollment checks, and the transfer/approve
endpoints that always answer 405 NON_TRANSFERABLE. Those two accept
requests without the caller header; the answer does not depend on it.
"""

from fastapi import APIRouter, Depends, Request

from src.api.dependencies.registry import (
    get_optional_caller_address,
    get_registry_service,
)
from src.api.models.token import (
    ApproveRequest,
    BalanceResponse,
    EnrollmentResponse,
    TokenOwnerResponse,
    TokenURIResponse,
    TransferRequest,
)
from src.api.problem_details import registry_problem
from src.application.services.student_registry_service import StudentRegistryService
from src.domain.exceptions import RegistryError

router = APIRouter(prefix="/v1", tags=["tokens"])


@router.get("/enrollment/{address}", response_model=EnrollmentResponse)
async def get_enrollment(
    address: str,
    registry: StudentRegistryService = Depends(get_registry_service),
) -> EnrollmentResponse:
    """Check whether an address holds a student ID token."""
    return EnrollmentResponse(address=address, enrolled=registry.is_enrolled(address))


@router.get("/tokens/balance/{address}", response_model=BalanceResponse)
async def get_balance(
    address: str,
    registry: StudentRegistryService = Depends(get_registry_service),
) -> BalanceResponse:
    return BalanceResponse(address=address, balance=registry.tokens.balance_of(address))


@router.post("/tokens/transfer")
async def transfer_token(
    request: Request,
    body: TransferRequest,
    caller: str = Depends(get_optional_caller_address),
    registry: StudentRegistryService = Depends(get_registry_service),
) -> None:
    """Always rejected: student ID tokens are non-transferable."""
    try:
        registry.tokens.transfer_from(
            caller, body.from_address, body.to_address, body.token_id
        )
    except RegistryError as e:
        raise registry_problem(e, request) from None


@router.post("/tokens/approve")
async def approve_token(
    request: Request,
    body: ApproveRequest,
    caller: str = Depends(get_optional_caller_address),
    registry: StudentRegistryService = Depends(get_registry_service),
) -> None:
    """Always rejected: student ID tokens are non-transferable."""
    try:
        registry.tokens.approve(caller, body.approved, body.token_id)
    except RegistryError as e:
        raise registry_problem(e, request) from None


@router.get("/tokens/{token_id:path}/owner", response_model=TokenOwnerResponse)
async def get_token_owner(
    request: Request,
    token_id: str,
    registry: StudentRegistryService = Depends(get_registry_service),
) -> TokenOwnerResponse:
    try:
        owner = registry.tokens.owner_of(token_id)
    except RegistryError as e:
        raise registry_problem(e, request) from None
    return TokenOwnerResponse(token_id=token_id, owner=owner)


@router.get("/tokens/{token_id:path}/uri", response_model=TokenURIResponse)
async def get_token_uri(
    request: Request,
    token_id: str,
    registry: StudentRegistryService = Depends(get_registry_service),
) -> TokenURIResponse:
    try:
        uri = registry.tokens.token_uri(token_id)
    except RegistryError as e:
        raise registry_problem(e, request) from None
    return TokenURIResponse(token_id=token_id, uri=uri)
