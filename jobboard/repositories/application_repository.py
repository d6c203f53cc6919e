"""Application persistence helpers."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from jobboard.db.models import Application
from jobboard.repositories.base import SQLAlchemyRepository


class ApplicationRepository(SQLAlchemyRepository[Application]):
    """Encapsulates application queries."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_by_id(self, application_id: int) -> Optional[Application]:
        return self.session.get(Application, application_id)

    def exists_for(self, applicant_id: str, job_role_id: int) -> bool:
        stmt = select(Application.id).where(
            Application.applicant_id == applicant_id,
            Application.job_role_id == job_role_id,
        )
        return self.session.scalar(stmt) is not None

    def list_for_applicant(self, applicant_id: str) -> Sequence[Application]:
        stmt = (
            select(Application)
            .where(Application.applicant_id == applicant_id)
            .order_by(Application.applied_at.desc(), Application.id.desc())
        )
        return self.session.scalars(stmt).all()

    def list_for_job_role(self, job_role_id: int) -> Sequence[Application]:
        stmt = (
            select(Application)
            .where(Application.job_role_id == job_role_id)
            .order_by(Application.applied_at.asc(), Application.id.asc())
        )
        return self.session.scalars(stmt).all()

    def list_with_job_roles(self) -> Sequence[Application]:
        stmt = (
            select(Application)
            .options(selectinload(Application.job_role))
            .order_by(Application.applied_at.desc(), Application.id.desc())
        )
        return self.session.scalars(stmt).all()

    def get_with_job_role(self, application_id: int) -> Optional[Application]:
        stmt = (
            select(Application)
            .options(selectinload(Application.job_role))
            .where(Application.id == application_id)
        )
        return self.session.scalar(stmt)
