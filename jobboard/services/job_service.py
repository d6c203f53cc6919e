"""Job role querying, management and the status sweep."""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from jobboard.core.config import settings
from jobboard.core.logging import get_logger
from jobboard.core.time import today_in
from jobboard.db.models import JobRole
from jobboard.domain.exceptions import NotFoundError
from jobboard.domain.filters import JobFilters
from jobboard.domain.jobs import JobRolePage, JobStatus, Pagination, SweepResult
from jobboard.domain.predicates import build_predicates, sort_for, stale_job_predicates
from jobboard.repositories import JobRoleRepository
from jobboard.schemas.job import JobRoleCreate, JobRoleUpdate

logger = get_logger(__name__)


class JobService:
    """Coordinates job role queries, edits and lifecycle transitions."""

    def __init__(self, session: Session, jobs: Optional[JobRoleRepository] = None) -> None:
        self.session = session
        self.jobs = jobs or JobRoleRepository(session)

    # ------------------------------------------------------------------
    # Queries

    def get_all_jobs(self) -> Sequence[JobRole]:
        return self.jobs.list_all()

    def get_job_by_id(self, job_id: int) -> Optional[JobRole]:
        """Return the job role or None; absence is not an error here."""
        return self.jobs.get_by_id(job_id)

    def get_filtered_jobs(self, filters: JobFilters) -> JobRolePage:
        """Run a filtered, sorted and paginated job role query.

        The total is counted under the same predicates as the page, ignoring
        pagination. Storage errors propagate; no matches yields an empty page.
        """
        predicates = build_predicates(filters)
        total_items = self.jobs.count_matching(predicates)
        pagination = Pagination.compute(filters.page, filters.limit, total_items)

        jobs: Sequence[JobRole] = []
        if total_items and pagination.offset < total_items:
            jobs = self.jobs.query_page(
                predicates,
                sort_for(filters),
                offset=pagination.offset,
                limit=filters.limit,
            )
        return JobRolePage(jobs=jobs, pagination=pagination, filters=filters)

    # ------------------------------------------------------------------
    # Management

    def create_job_role(self, data: JobRoleCreate) -> JobRole:
        job = JobRole(**data.model_dump())
        self.jobs.create(job)
        self.session.commit()
        self.session.refresh(job)
        logger.info("Created job role %s", job.id, extra={"job_role_id": job.id})
        return job

    def edit_job_role(self, job_id: int, data: JobRoleUpdate) -> JobRole:
        job = self.jobs.get_by_id(job_id)
        if not job:
            raise NotFoundError(f"Job role {job_id} not found")

        for field_name, value in data.model_dump().items():
            setattr(job, field_name, value)
        self.jobs.update(job)
        self.session.commit()
        self.session.refresh(job)
        return job

    def delete_job_role(self, job_id: int) -> None:
        job = self.jobs.get_by_id(job_id)
        if not job:
            raise NotFoundError(f"Job role {job_id} not found")
        self.jobs.remove(job)
        self.session.commit()
        logger.info("Deleted job role %s", job_id, extra={"job_role_id": job_id})

    # ------------------------------------------------------------------
    # Lifecycle

    def close_expired_job_roles(self, today: Optional[date] = None) -> SweepResult:
        """Close every open job role past its closing date or with no positions left.

        ``today`` defaults to the current date in the scheduler timezone. Roles
        already closed or in draft are never touched, so a repeated run with
        no changes in between closes nothing. Storage errors propagate.
        """
        today = today or today_in(settings.job_scheduler_timezone)
        logger.info("Running job role status sweep", extra={"sweep_date": today.isoformat()})
        try:
            updated = self.jobs.set_status_where(stale_job_predicates(today), JobStatus.CLOSED)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info(
            "Job role status sweep completed: %s job roles closed",
            updated,
            extra={"updated_count": updated},
        )
        return SweepResult(updated_count=updated)
