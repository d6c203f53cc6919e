"""Application API endpoints."""

from fastapi import APIRouter, Depends, status

from jobboard.dependencies import get_applicant_id, get_application_service
from jobboard.domain.exceptions import NotFoundError
from jobboard.schemas.job import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationWithJobRoleResponse,
)
from jobboard.services.application_service import ApplicationService

router = APIRouter(tags=["applications"])


@router.post(
    "/jobs/{job_id}/applications",
    response_model=ApplicationResponse,
    status_code=status.HTTP_201_CREATED,
)
def apply_to_job(
    job_id: int,
    payload: ApplicationCreate,
    applicant_id: str = Depends(get_applicant_id),
    service: ApplicationService = Depends(get_application_service),
) -> ApplicationResponse:
    """Submit an application for an open job role."""
    application = service.apply_to_job(applicant_id, job_id, payload.cv_path)
    return ApplicationResponse.model_validate(application)


@router.get("/jobs/{job_id}/applications", response_model=list[ApplicationResponse])
def list_job_applications(
    job_id: int,
    service: ApplicationService = Depends(get_application_service),
) -> list[ApplicationResponse]:
    return [
        ApplicationResponse.model_validate(application)
        for application in service.get_job_applications(job_id)
    ]


@router.get("/applications/me", response_model=list[ApplicationResponse])
def list_my_applications(
    applicant_id: str = Depends(get_applicant_id),
    service: ApplicationService = Depends(get_application_service),
) -> list[ApplicationResponse]:
    return [
        ApplicationResponse.model_validate(application)
        for application in service.get_user_applications(applicant_id)
    ]


@router.get("/applications", response_model=list[ApplicationWithJobRoleResponse])
def list_all_applications(
    service: ApplicationService = Depends(get_application_service),
) -> list[ApplicationWithJobRoleResponse]:
    """List every application with the job role it was submitted for."""
    return [
        ApplicationWithJobRoleResponse.model_validate(application)
        for application in service.get_all_applications_with_details()
    ]


@router.get("/applications/{application_id}", response_model=ApplicationWithJobRoleResponse)
def get_application(
    application_id: int,
    service: ApplicationService = Depends(get_application_service),
) -> ApplicationWithJobRoleResponse:
    application = service.get_application_with_details_by_id(application_id)
    if application is None:
        raise NotFoundError("Application not found")
    return ApplicationWithJobRoleResponse.model_validate(application)
