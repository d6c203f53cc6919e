"""Celery tasks for deployments that run the status sweep from celery beat."""

from __future__ import annotations

from celery import shared_task

from jobboard.core.logging import get_logger
from jobboard.core.metrics import record_sweep
from jobboard.db import SessionLocal
from jobboard.services.job_service import JobService

logger = get_logger(__name__)


@shared_task(name="close_expired_job_roles")
def close_expired_job_roles() -> dict:
    """Close stale job roles; failures propagate so Celery marks the task failed."""
    db = SessionLocal()
    try:
        result = JobService(db).close_expired_job_roles()
    except Exception:
        record_sweep("celery", success=False)
        raise
    finally:
        db.close()

    record_sweep("celery", success=True, closed=result.updated_count)
    return {"updated_count": result.updated_count}
