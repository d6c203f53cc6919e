"""Application submission and lookup."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.logging import get_logger
from jobboard.db.models import Application
from jobboard.domain.exceptions import ConflictError, NotFoundError, ValidationError
from jobboard.domain.jobs import JobStatus
from jobboard.repositories import ApplicationRepository, JobRoleRepository

logger = get_logger(__name__)


class ApplicationService:
    """Validates and records applications against job roles."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.applications = ApplicationRepository(session)
        self.jobs = JobRoleRepository(session)

    def apply_to_job(self, applicant_id: str, job_role_id: int, cv_path: str) -> Application:
        job = self.jobs.get_by_id(job_role_id)
        if not job:
            raise NotFoundError(f"Job role {job_role_id} not found")
        if job.status is not JobStatus.OPEN:
            raise ValidationError(f"Job role {job_role_id} is not accepting applications")
        if self.applications.exists_for(applicant_id, job_role_id):
            raise ConflictError("You have already applied to this job role")

        application = Application(
            job_role_id=job_role_id,
            applicant_id=applicant_id,
            cv_path=cv_path,
        )
        self.applications.add(application)
        try:
            self.session.commit()
        except IntegrityError as exc:
            # concurrent duplicate submission lost the unique constraint race
            self.session.rollback()
            raise ConflictError("You have already applied to this job role") from exc
        self.session.refresh(application)
        logger.info(
            "Application %s submitted for job role %s",
            application.id,
            job_role_id,
            extra={"application_id": application.id, "job_role_id": job_role_id},
        )
        return application

    def get_user_applications(self, applicant_id: str) -> Sequence[Application]:
        return self.applications.list_for_applicant(applicant_id)

    def get_job_applications(self, job_role_id: int) -> Sequence[Application]:
        if not self.jobs.get_by_id(job_role_id):
            raise NotFoundError(f"Job role {job_role_id} not found")
        return self.applications.list_for_job_role(job_role_id)

    def get_application_by_id(self, application_id: int) -> Optional[Application]:
        return self.applications.get_by_id(application_id)

    def get_all_applications_with_details(self) -> Sequence[Application]:
        """Every application, newest first, with its job role loaded."""
        return self.applications.list_with_job_roles()

    def get_application_with_details_by_id(self, application_id: int) -> Optional[Application]:
        return self.applications.get_with_job_role(application_id)
