"""Recurring triggers for the job role status sweep."""

from .scheduler import JobStatusScheduler, SchedulerState

__all__ = ["JobStatusScheduler", "SchedulerState"]
