"""Celery application configuration."""

from __future__ import annotations

from celery import Celery
from celery.schedules import crontab

from jobboard.core.config import settings


def crontab_from_expression(expression: str) -> crontab:
    """Build a celery ``crontab`` from a five-field cron expression."""
    minute, hour, day_of_month, month_of_year, day_of_week = expression.split()
    return crontab(
        minute=minute,
        hour=hour,
        day_of_month=day_of_month,
        month_of_year=month_of_year,
        day_of_week=day_of_week,
    )


celery_app = Celery(
    "jobboard",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=["jobboard.scheduling.tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone=settings.job_scheduler_timezone,
    enable_utc=True,
    task_track_started=True,
)

if settings.celery_beat_enabled:
    celery_app.conf.beat_schedule = {
        "close-expired-job-roles": {
            "task": "close_expired_job_roles",
            "schedule": crontab_from_expression(settings.job_scheduler_cron_expression),
        },
    }
