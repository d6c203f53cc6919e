"""Database models."""

from datetime import date, datetime
from typing import Optional

from sqlalchemy import (
    JSON,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship, validates

from jobboard.core.time import utcnow
from jobboard.domain.jobs import Band, Capability, JobStatus


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


def _value_enum(enum_cls, length: int) -> Enum:
    """Store an enum by its literal value so ordering follows the stored string."""
    return Enum(
        enum_cls,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        validate_strings=True,
        length=length,
    )


class JobRole(Base):
    """Job posting."""

    __tablename__ = "job_roles"
    __table_args__ = (
        Index("ix_job_roles_status_closing_date", "status", "closing_date"),
        Index("ix_job_roles_capability_band", "capability", "band"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    job_role_name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    responsibilities: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    # newline-joined copy of responsibilities for free-text search
    responsibilities_text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    job_spec_link: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    location: Mapped[str] = mapped_column(String(200), nullable=False)
    capability: Mapped[Capability] = mapped_column(_value_enum(Capability, 32), nullable=False)
    band: Mapped[Band] = mapped_column(_value_enum(Band, 8), nullable=False)
    closing_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[JobStatus] = mapped_column(
        _value_enum(JobStatus, 16), nullable=False, default=JobStatus.OPEN
    )
    number_of_open_positions: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow, nullable=False
    )

    applications: Mapped[list["Application"]] = relationship(
        "Application", back_populates="job_role", cascade="all, delete-orphan"
    )

    @validates("responsibilities")
    def _sync_responsibilities_text(self, key: str, value: list) -> list:
        self.responsibilities_text = "\n".join(value or [])
        return value


class Application(Base):
    """Application submitted by an applicant for a job role."""

    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_role_id", "applicant_id", name="uix_application_job_applicant"),
        Index("ix_applications_applicant_id", "applicant_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    job_role_id: Mapped[int] = mapped_column(Integer, ForeignKey("job_roles.id"), nullable=False)
    applicant_id: Mapped[str] = mapped_column(String(64), nullable=False)  # from identity provider
    cv_path: Mapped[str] = mapped_column(String(500), nullable=False)
    application_status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    applied_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    job_role: Mapped["JobRole"] = relationship("JobRole", back_populates="applications")
