"""Test configuration and fixtures."""

import os
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ["TESTING"] = "true"  # keeps the in-process scheduler from starting

from jobboard.db import Base, JobRole, get_db  # noqa: E402
from jobboard.domain.jobs import Band, Capability, JobStatus  # noqa: E402
from jobboard.main import app  # noqa: E402 - must set env vars before importing
from jobboard.scheduling import JobStatusScheduler  # noqa: E402

SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TODAY = date(2025, 6, 15)


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def job_scheduler(db_session):
    """Scheduler bound to the test database; always stopped afterwards."""
    scheduler = JobStatusScheduler(
        TestingSessionLocal, cron_expression="0 1 * * *", timezone="UTC"
    )
    try:
        yield scheduler
    finally:
        scheduler.stop()


@pytest.fixture
def client(db_session, job_scheduler):
    """Create a test client with overridden database dependency and scheduler."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    original_scheduler = app.state.job_scheduler
    app.dependency_overrides[get_db] = override_get_db
    app.state.job_scheduler = job_scheduler
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    app.state.job_scheduler = original_scheduler


@pytest.fixture
def make_job(db_session):
    """Factory persisting a job role; keyword arguments override the defaults."""

    def _make_job(**overrides) -> JobRole:
        fields = {
            "job_role_name": "Software Engineer",
            "description": "Build and maintain services",
            "responsibilities": ["Write code", "Review pull requests"],
            "job_spec_link": None,
            "location": "London, UK",
            "capability": Capability.ENGINEERING,
            "band": Band.E2,
            "closing_date": TODAY + timedelta(days=30),
            "status": JobStatus.OPEN,
            "number_of_open_positions": 2,
        }
        fields.update(overrides)
        job = JobRole(**fields)
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make_job


@pytest.fixture
def two_job_seed(make_job):
    """Two job roles where only the second is Data / E2."""
    first = make_job(
        job_role_name="Software Engineer",
        capability=Capability.ENGINEERING,
        band=Band.E3,
        location="London, UK",
    )
    second = make_job(
        job_role_name="Data Analyst",
        description="Turn data into insight",
        responsibilities=["Build dashboards", "SQL reporting"],
        capability=Capability.DATA,
        band=Band.E2,
        location="Belfast, UK",
    )
    return first, second
