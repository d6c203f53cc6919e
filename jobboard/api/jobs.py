"""Job role API endpoints."""

from fastapi import APIRouter, Depends, Request, Response, status

from jobboard.core.metrics import record_job_role_query
from jobboard.dependencies import get_job_service
from jobboard.domain.exceptions import NotFoundError
from jobboard.domain.filters import describe_filters, parse_job_filters
from jobboard.schemas.job import (
    JobRoleCreate,
    JobRoleResponse,
    JobRoleUpdate,
    PaginatedJobRolesResponse,
    PaginationResponse,
)
from jobboard.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=PaginatedJobRolesResponse)
def list_jobs(
    request: Request,
    service: JobService = Depends(get_job_service),
) -> PaginatedJobRolesResponse:
    """List job roles with filtering, sorting and pagination.

    Query parameters: capability, band, status, location, search,
    closingDateFrom, closingDateTo, minPositions, maxPositions, page, limit,
    sortBy, sortOrder. Unrecognised values are ignored rather than rejected.
    """
    filters = parse_job_filters(dict(request.query_params))
    page = service.get_filtered_jobs(filters)
    record_job_role_query(filters.has_filters)
    return PaginatedJobRolesResponse(
        jobs=[JobRoleResponse.model_validate(job) for job in page.jobs],
        pagination=PaginationResponse.model_validate(page.pagination),
        filters=filters.to_dict(),
        description=describe_filters(filters) or "No filters applied",
    )


@router.get("/all", response_model=list[JobRoleResponse])
def list_all_jobs(service: JobService = Depends(get_job_service)) -> list[JobRoleResponse]:
    """List every job role without filtering."""
    return [JobRoleResponse.model_validate(job) for job in service.get_all_jobs()]


@router.get("/{job_id}", response_model=JobRoleResponse)
def get_job(job_id: int, service: JobService = Depends(get_job_service)) -> JobRoleResponse:
    """Get job role details."""
    job = service.get_job_by_id(job_id)
    if job is None:
        raise NotFoundError("Job role not found")
    return JobRoleResponse.model_validate(job)


@router.post("", response_model=JobRoleResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    payload: JobRoleCreate,
    service: JobService = Depends(get_job_service),
) -> JobRoleResponse:
    job = service.create_job_role(payload)
    return JobRoleResponse.model_validate(job)


@router.put("/{job_id}", response_model=JobRoleResponse)
def edit_job(
    job_id: int,
    payload: JobRoleUpdate,
    service: JobService = Depends(get_job_service),
) -> JobRoleResponse:
    job = service.edit_job_role(job_id, payload)
    return JobRoleResponse.model_validate(job)


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(job_id: int, service: JobService = Depends(get_job_service)) -> Response:
    service.delete_job_role(job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
