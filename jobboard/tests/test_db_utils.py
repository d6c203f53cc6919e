"""Tests for database utility helpers."""

from datetime import date, timedelta

from jobboard.core import settings
from jobboard.db import utils
from jobboard.db.models import JobRole


def test_seed_uses_scheduler_calendar(db_session, monkeypatch):
    seen = []

    def fake_today_in(tz_name):
        seen.append(tz_name)
        return date(2030, 1, 10)

    monkeypatch.setattr(utils, "today_in", fake_today_in)

    inserted = utils.seed_sample_job_roles(db_session)

    assert inserted == len(utils.SAMPLE_JOB_ROLES)
    assert seen == [settings.job_scheduler_timezone]
    closing_dates = {job.closing_date for job in db_session.query(JobRole).all()}
    assert closing_dates == {
        date(2030, 1, 10) + timedelta(days=sample[6]) for sample in utils.SAMPLE_JOB_ROLES
    }


def test_seed_is_idempotent(db_session):
    assert utils.seed_sample_job_roles(db_session, today=date(2030, 1, 10)) == 4
    assert utils.seed_sample_job_roles(db_session, today=date(2030, 1, 10)) == 0
    assert db_session.query(JobRole).count() == 4


def test_seed_skipped_in_production(db_session, monkeypatch):
    monkeypatch.setattr(settings, "environment", "production")

    assert utils.seed_sample_job_roles(db_session) == 0
    assert db_session.query(JobRole).count() == 0


def test_seeded_roles_are_searchable_by_responsibility(db_session):
    utils.seed_sample_job_roles(db_session, today=date(2030, 1, 10))

    matches = (
        db_session.query(JobRole)
        .filter(JobRole.responsibilities_text.icontains("mentoring"))
        .all()
    )

    assert [job.job_role_name for job in matches] == ["Senior Software Engineer"]
