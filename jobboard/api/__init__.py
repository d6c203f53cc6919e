"""API module initialization."""

from . import applications, errors, jobs, metrics, scheduler

__all__ = ["applications", "errors", "jobs", "metrics", "scheduler"]
