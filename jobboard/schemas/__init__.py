"""Pydantic schemas for request/response validation."""

from .job import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationWithJobRoleResponse,
    JobRoleCreate,
    JobRoleResponse,
    JobRoleUpdate,
    PaginatedJobRolesResponse,
    PaginationResponse,
    SchedulerStatusResponse,
    SweepResponse,
)

__all__ = [
    "ApplicationCreate",
    "ApplicationResponse",
    "ApplicationWithJobRoleResponse",
    "JobRoleCreate",
    "JobRoleResponse",
    "JobRoleUpdate",
    "PaginatedJobRolesResponse",
    "PaginationResponse",
    "SchedulerStatusResponse",
    "SweepResponse",
]
