"""Student API request/response models.

Pydantic models for issuing student IDs, reading records and applying
lifecycle transitions.
"""

from pydantic import BaseModel, Field

from src.domain.models import StudentApplication, StudentRecord


class IssueStudentRequest(BaseModel):
    """Request body for issuing a student ID token.

    Attributes:
        holder_address: Address that will hold the token.
        full_name: Student's full name.
        date_of_birth: Date of birth.
        email: Institutional email (must end with the configured domain).
        external_id: Unique student identifier, e.g. "2021/0001".
        department: Department of enrollment.
        year: Current year of study.
        enrolled_at: Enrollment ordering key, e.g. an ISO date.
    """

    holder_address: str = Field(min_length=1, description="Token holder address")
    full_name: str = Field(min_length=1)
    date_of_birth: str
    email: str = Field(min_length=1)
    external_id: str = Field(min_length=1, description="Unique student identifier")
    department: str
    year: int = Field(description="Current year of study")
    enrolled_at: str = Field(description="Enrollment ordering key")

    model_config = {
        "json_schema_extra": {
            "example": {
                "holder_address": "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
                "full_name": "John Doe",
                "date_of_birth": "2002-05-14",
                "email": "john@raf.rs",
                "external_id": "2021/0001",
                "department": "Computer Science",
                "year": 1,
                "enrolled_at": "2021-10-01",
            }
        },
    }

    def to_application(self) -> StudentApplication:
        return StudentApplication(
            full_name=self.full_name,
            date_of_birth=self.date_of_birth,
            email=self.email,
            external_id=self.external_id,
            department=self.department,
            year=self.year,
            enrolled_at=self.enrolled_at,
        )


class IssueStudentResponse(BaseModel):
    """Response for a successful issuance."""

    token_id: str
    holder_address: str


class StudentRecordResponse(BaseModel):
    """Full student record as stored by the registry."""

    token_id: str
    external_id: str
    full_name: str
    date_of_birth: str
    email: str
    enrolled_at: str
    department: str
    year: int
    image_url: str
    status: str
    probation_reason: str | None = None
    graduated_at: int | None = None

    @classmethod
    def from_record(cls, record: StudentRecord) -> "StudentRecordResponse":
        return cls(
            token_id=record.token_id,
            external_id=record.external_id,
            full_name=record.full_name,
            date_of_birth=record.date_of_birth,
            email=record.email,
            enrolled_at=record.enrolled_at,
            department=record.department,
            year=record.year,
            image_url=record.image_url,
            status=record.status.value,
            probation_reason=record.probation_reason,
            graduated_at=record.graduated_at,
        )


class StudentListResponse(BaseModel):
    """All student records, ordered by enrollment."""

    students: list[StudentRecordResponse]
    total_count: int


class StudentSummaryResponse(BaseModel):
    external_id: str
    summary: str


class UpdateYearRequest(BaseModel):
    year: int


class SetStatusRequest(BaseModel):
    """Request body for moving a student between Active and Probation.

    Attributes:
        status: "Active" or "Probation".
        reason: Probation reason, ignored for Active.
    """

    status: str
    reason: str = ""


class TransferDepartmentRequest(BaseModel):
    department: str = Field(min_length=1)
