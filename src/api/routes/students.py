"""Student API routes.

FastAPI router for issuing student ID tokens, reading records and
applying lifecycle transitions.

External IDs may contain slashes (e.g. "2021/0001"), so every route
takes the ID through the path converter. Suffixed routes are declared
before the bare record route so the converter never swallows a suffix.

Reads need no caller. Every mutation requires the X-Caller-Address
header and is authorized against the admin set by the registry.
"""

from fastapi import APIRouter, Depends, Request

from src.api.dependencies.registry import get_caller_address, get_registry_service
from src.api.models.student import (
    IssueStudentRequest,
    IssueStudentResponse,
    SetStatusRequest,
    StudentListResponse,
    StudentRecordResponse,
    StudentSummaryResponse,
    TransferDepartmentRequest,
    UpdateYearRequest,
)
from src.api.problem_details import invalid_request_problem, registry_problem
from src.application.services.student_registry_service import StudentRegistryService
from src.domain.exceptions import RegistryError

router = APIRouter(prefix="/v1/students", tags=["students"])


@router.post("", response_model=IssueStudentResponse, status_code=201)
async def issue_student(
    request: Request,
    body: IssueStudentRequest,
    caller: str = Depends(get_caller_address),
    registry: StudentRegistryService = Depends(get_registry_service),
) -> IssueStudentResponse:
    """Issue a non-transferable student ID token.

    Returns:
        The token identifier and holder.

    Raises:
        HTTPException: 403 unauthorized, 409 duplicate email/external ID,
            422 invalid email or year.
    """
    try:
        application = body.to_application()
    except ValueError as e:
        raise invalid_request_problem(str(e), request) from None

    try:
        token_id = registry.issue(caller, body.holder_address, application)
    except RegistryError as e:
        raise registry_problem(e, request) from None

    return IssueStudentResponse(token_id=token_id, holder_address=body.holder_address)


@router.get("", response_model=StudentListResponse)
async def list_students(
    registry: StudentRegistryService = Depends(get_registry_service),
) -> StudentListResponse:
    """List every student record, oldest enrollment first."""
    records = registry.list_records_by_enrollment()
    return StudentListResponse(
        students=[StudentRecordResponse.from_record(r) for r in records],
        total_count=len(records),
    )


@router.get("/{external_id:path}/summary", response_model=StudentSummaryResponse)
async def get_student_summary(
    request: Request,
    external_id: str,
    registry: StudentRegistryService = Depends(get_registry_service),
) -> StudentSummaryResponse:
    """Get a human-readable summary of a student record."""
    try:
        summary = registry.render_summary(external_id)
    except RegistryError as e:
        raise registry_problem(e, request) from None
    return StudentSummaryResponse(external_id=external_id, summary=summary)


@router.put("/{external_id:path}/year", response_model=StudentRecordResponse)
async def update_year(
    request: Request,
    external_id: str,
    body: UpdateYearRequest,
    caller: str = Depends(get_caller_address),
    registry: StudentRegistryService = Depends(get_registry_service),
) -> StudentRecordResponse:
    """Set a student's year of study."""
    try:
        record = registry.update_year(caller, external_id, body.year)
    except RegistryError as e:
        raise registry_problem(e, request) from None
    return StudentRecordResponse.from_record(record)


@router.put("/{external_id:path}/status", response_model=StudentRecordResponse)
async def set_status(
    request: Request,
    external_id: str,
    body: SetStatusRequest,
    caller: str = Depends(get_caller_address),
    registry: StudentRegistryService = Depends(get_registry_service),
) -> StudentRecordResponse:
    """Move a student between Active and Probation."""
    try:
        record = registry.set_status(caller, external_id, body.status, body.reason)
    except RegistryError as e:
        raise registry_problem(e, request) from None
    return StudentRecordResponse.from_record(record)


@router.put("/{external_id:path}/department", response_model=StudentRecordResponse)
async def transfer_department(
    request: Request,
    external_id: str,
    body: TransferDepartmentRequest,
    caller: str = Depends(get_caller_address),
    registry: StudentRegistryService = Depends(get_registry_service),
) -> StudentRecordResponse:
    """Move a student to another department."""
    try:
        record = registry.transfer_department(caller, external_id, body.department)
    except RegistryError as e:
        raise registry_problem(e, request) from None
    return StudentRecordResponse.from_record(record)


@router.post("/{external_id:path}/graduate", response_model=StudentRecordResponse)
async def graduate(
    request: Request,
    external_id: str,
    caller: str = Depends(get_caller_address),
    registry: StudentRegistryService = Depends(get_registry_service),
) -> StudentRecordResponse:
    """Graduate a final-year student.

    Graduation is terminal: later mutations of the same record fail
    with 409 ALREADY_GRADUATED.
    """
    try:
        record = registry.graduate(caller, external_id)
    except RegistryError as e:
        raise registry_problem(e, request) from None
    return StudentRecordResponse.from_record(record)


@router.get("/{external_id:path}", response_model=StudentRecordResponse)
async def get_student(
    request: Request,
    external_id: str,
    registry: StudentRegistryService = Depends(get_registry_service),
) -> StudentRecordResponse:
    """Get a student record by external ID."""
    try:
        record = registry.get_record(external_id)
    except RegistryError as e:
        raise registry_problem(e, request) from None
    return StudentRecordResponse.from_record(record)
