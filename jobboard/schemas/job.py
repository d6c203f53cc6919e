"""Job role schemas."""

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from jobboard.domain.jobs import Band, Capability, JobStatus


class JobRoleBase(BaseModel):
    """Fields shared by job role create, edit and response payloads."""

    job_role_name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    responsibilities: list[str] = Field(..., description="Ordered list of responsibilities")
    job_spec_link: Optional[str] = Field(default=None, max_length=500)
    location: str = Field(..., min_length=1, max_length=200)
    capability: Capability
    band: Band
    closing_date: date

    @field_validator("job_role_name", "description", "location")
    @classmethod
    def strip_required_text(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped

    @field_validator("job_spec_link")
    @classmethod
    def blank_link_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()


class JobRoleCreate(JobRoleBase):
    """Job role creation schema; status defaults to open."""

    number_of_open_positions: int = Field(..., ge=1)
    status: JobStatus = JobStatus.OPEN


class JobRoleUpdate(JobRoleBase):
    """Full-record edit schema."""

    number_of_open_positions: int = Field(..., ge=0)
    status: JobStatus


class JobRoleResponse(JobRoleBase):
    """Job role response schema."""

    id: int
    number_of_open_positions: int
    status: JobStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class PaginationResponse(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_previous_page: bool

    model_config = {"from_attributes": True}


class PaginatedJobRolesResponse(BaseModel):
    """Filtered listing envelope."""

    jobs: list[JobRoleResponse]
    pagination: PaginationResponse
    filters: dict[str, Any]
    description: str


class ApplicationCreate(BaseModel):
    """Application submission; the CV is referenced by its storage path."""

    cv_path: str = Field(..., min_length=1, max_length=500)


class ApplicationResponse(BaseModel):
    id: int
    job_role_id: int
    applicant_id: str
    cv_path: str
    application_status: str
    applied_at: datetime

    model_config = {"from_attributes": True}


class ApplicationWithJobRoleResponse(ApplicationResponse):
    """Application together with the job role it was submitted for."""

    job_role: JobRoleResponse


class SchedulerStatusResponse(BaseModel):
    is_running: bool
    message: str
    next_run: Optional[datetime] = None


class SweepResponse(BaseModel):
    success: bool
    message: str
    updated_count: int
    timestamp: datetime
