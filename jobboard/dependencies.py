"""Shared FastAPI dependency factories."""

from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from jobboard.db import get_db
from jobboard.domain.exceptions import UnauthorizedError
from jobboard.scheduling import JobStatusScheduler
from jobboard.services import ApplicationService, JobService


def get_session(db: Session = Depends(get_db)) -> Session:
    """Expose the SQLAlchemy session (alias for clarity)."""
    return db


def get_job_service(session: Session = Depends(get_session)) -> JobService:
    return JobService(session)


def get_application_service(session: Session = Depends(get_session)) -> ApplicationService:
    return ApplicationService(session)


def get_job_scheduler(request: Request) -> JobStatusScheduler:
    """Return the scheduler owned by the running application."""
    return request.app.state.job_scheduler


def get_applicant_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Identity of the caller as resolved by the upstream identity provider."""
    if not x_user_id or not x_user_id.strip():
        raise UnauthorizedError("X-User-ID header is required")
    return x_user_id.strip()
