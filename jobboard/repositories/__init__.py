"""Repository layer for persistence access."""

from .application_repository import ApplicationRepository
from .base import JobStore
from .job_repository import JobRoleRepository

__all__ = [
    "ApplicationRepository",
    "JobRoleRepository",
    "JobStore",
]
