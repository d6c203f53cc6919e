"""Service layer entry points."""

from .application_service import ApplicationService
from .job_service import JobService

__all__ = [
    "ApplicationService",
    "JobService",
]
