"""Database utility helpers."""

from __future__ import annotations

from datetime import date, timedelta

from sqlalchemy.orm import Session

from jobboard.core import settings
from jobboard.core.logging import get_logger
from jobboard.core.time import today_in
from jobboard.db.models import Base, JobRole
from jobboard.domain.jobs import Band, Capability, JobStatus

logger = get_logger(__name__)

# (name, description, responsibilities, location, capability, band, days until closing, positions)
SAMPLE_JOB_ROLES = [
    (
        "Senior Software Engineer",
        "Lead development of complex software solutions and mentor junior developers",
        ["Design and implement scalable software systems", "Code review", "Mentoring team members"],
        "London, UK",
        Capability.ENGINEERING,
        Band.E4,
        30,
        3,
    ),
    (
        "Data Scientist",
        "Analyze complex datasets to derive insights and build predictive models",
        ["Machine learning model development", "Statistical analysis", "Data visualization"],
        "Birmingham, UK",
        Capability.DATA,
        Band.E3,
        45,
        1,
    ),
    (
        "Workday Consultant",
        "Configure and extend Workday tenants for enterprise clients",
        ["Business process configuration", "Integration design", "Client workshops"],
        "Belfast, UK",
        Capability.WORKDAY,
        Band.E2,
        21,
        2,
    ),
    (
        "Graduate Data Engineer",
        "Build and maintain data pipelines on modern cloud platforms",
        ["Pipeline development", "Data quality checks", "Documentation"],
        "Remote, UK",
        Capability.DATA,
        Band.E1,
        60,
        4,
    ),
]


def create_tables(db_session: Session) -> None:
    bind = db_session.get_bind()
    Base.metadata.create_all(bind=bind)


def seed_sample_job_roles(db_session: Session, today: date | None = None) -> int:
    """Insert the sample job roles when the table is empty (idempotent).

    Returns the number of rows inserted. Never seeds in production.
    """
    if settings.environment.lower() == "production":
        logger.info("Skipping sample job roles in production environment")
        return 0
    if db_session.query(JobRole.id).first() is not None:
        return 0

    today = today or today_in(settings.job_scheduler_timezone)
    for name, description, responsibilities, location, capability, band, days, positions in (
        SAMPLE_JOB_ROLES
    ):
        db_session.add(
            JobRole(
                job_role_name=name,
                description=description,
                responsibilities=responsibilities,
                job_spec_link=None,
                location=location,
                capability=capability,
                band=band,
                closing_date=today + timedelta(days=days),
                status=JobStatus.OPEN,
                number_of_open_positions=positions,
            )
        )
    db_session.commit()
    logger.info("Seeded sample job roles", extra={"count": len(SAMPLE_JOB_ROLES)})
    return len(SAMPLE_JOB_ROLES)
