"""Tests for the Celery status sweep task and beat schedule helpers."""

from datetime import timedelta

import pytest
from sqlalchemy.exc import OperationalError

from jobboard.celery_app import crontab_from_expression
from jobboard.core.time import today_in
from jobboard.scheduling import tasks

from conftest import TestingSessionLocal


def test_task_closes_stale_roles(db_session, make_job, monkeypatch):
    monkeypatch.setattr(tasks, "SessionLocal", TestingSessionLocal)
    today = today_in("UTC")
    make_job(closing_date=today - timedelta(days=3))
    make_job(closing_date=today + timedelta(days=3))

    assert tasks.close_expired_job_roles() == {"updated_count": 1}
    assert tasks.close_expired_job_roles() == {"updated_count": 0}


def test_task_failure_propagates(db_session, monkeypatch):
    def broken_sweep(self, today=None):
        raise OperationalError("UPDATE", {}, Exception("database is locked"))

    monkeypatch.setattr(tasks, "SessionLocal", TestingSessionLocal)
    monkeypatch.setattr(tasks.JobService, "close_expired_job_roles", broken_sweep)

    with pytest.raises(OperationalError):
        tasks.close_expired_job_roles()


def test_crontab_from_expression():
    schedule = crontab_from_expression("30 2 * * 1-5")

    assert schedule.minute == {30}
    assert schedule.hour == {2}
    assert schedule.day_of_week == {1, 2, 3, 4, 5}
