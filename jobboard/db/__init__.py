"""Database module initialization."""

from .models import Application, Base, JobRole
from .session import SessionLocal, engine, get_db
from .utils import create_tables, seed_sample_job_roles

__all__ = [
    "Application",
    "Base",
    "JobRole",
    "SessionLocal",
    "create_tables",
    "engine",
    "get_db",
    "seed_sample_job_roles",
]
