"""Domain layer primitives (value objects, filters, predicates, exceptions)."""

from . import exceptions, filters, jobs, predicates
from .filters import JobFilters, describe_filters, parse_job_filters
from .jobs import Band, Capability, JobRolePage, JobStatus, Pagination, SortBy, SortOrder, SweepResult

__all__ = [
    "Band",
    "Capability",
    "JobFilters",
    "JobRolePage",
    "JobStatus",
    "Pagination",
    "SortBy",
    "SortOrder",
    "SweepResult",
    "describe_filters",
    "exceptions",
    "filters",
    "jobs",
    "parse_job_filters",
    "predicates",
]
