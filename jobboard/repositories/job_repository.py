"""Job role persistence helpers."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import and_, func, or_, select, true, update
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from jobboard.core.time import utcnow
from jobboard.db.models import JobRole
from jobboard.domain.jobs import JobStatus
from jobboard.domain.predicates import (
    ContainsSubstring,
    EqualsField,
    JobField,
    OrGroup,
    Predicate,
    RangeBetween,
    Sort,
)
from jobboard.repositories.base import SQLAlchemyRepository

_COLUMNS = {
    JobField.ID: JobRole.id,
    JobField.ROLE_NAME: JobRole.job_role_name,
    JobField.DESCRIPTION: JobRole.description,
    JobField.RESPONSIBILITIES: JobRole.responsibilities_text,
    JobField.LOCATION: JobRole.location,
    JobField.CAPABILITY: JobRole.capability,
    JobField.BAND: JobRole.band,
    JobField.CLOSING_DATE: JobRole.closing_date,
    JobField.STATUS: JobRole.status,
    JobField.OPEN_POSITIONS: JobRole.number_of_open_positions,
}


def compile_predicate(predicate: Predicate) -> ColumnElement[bool]:
    """Translate one domain predicate into a SQLAlchemy boolean clause."""
    if isinstance(predicate, EqualsField):
        return _COLUMNS[predicate.field] == predicate.value
    if isinstance(predicate, ContainsSubstring):
        return _COLUMNS[predicate.field].icontains(predicate.value, autoescape=True)
    if isinstance(predicate, RangeBetween):
        column = _COLUMNS[predicate.field]
        bounds = []
        if predicate.lower is not None:
            bounds.append(column >= predicate.lower)
        if predicate.upper is not None:
            bounds.append(column <= predicate.upper)
        return and_(*bounds) if bounds else true()
    if isinstance(predicate, OrGroup):
        return or_(*(compile_predicate(member) for member in predicate.predicates))
    raise TypeError(f"Unsupported predicate: {predicate!r}")


def compile_predicates(predicates: Sequence[Predicate]) -> list[ColumnElement[bool]]:
    return [compile_predicate(predicate) for predicate in predicates]


def order_by_clauses(sort: Sort) -> list:
    clauses = []
    if sort.field is not None:
        column = _COLUMNS[sort.field]
        clauses.append(column.desc() if sort.descending else column.asc())
    clauses.append(JobRole.id.asc())
    return clauses


class JobRoleRepository(SQLAlchemyRepository[JobRole]):
    """SQLAlchemy implementation of the job store."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def list_all(self) -> Sequence[JobRole]:
        return self.session.scalars(select(JobRole).order_by(JobRole.id.asc())).all()

    def get_by_id(self, job_id: int) -> Optional[JobRole]:
        return self.session.get(JobRole, job_id)

    def count_matching(self, predicates: Sequence[Predicate]) -> int:
        stmt = select(func.count()).select_from(JobRole).where(*compile_predicates(predicates))
        return self.session.scalar(stmt) or 0

    def query_page(
        self,
        predicates: Sequence[Predicate],
        sort: Sort,
        offset: int,
        limit: int,
    ) -> Sequence[JobRole]:
        stmt = (
            select(JobRole)
            .where(*compile_predicates(predicates))
            .order_by(*order_by_clauses(sort))
            .offset(offset)
            .limit(limit)
        )
        return self.session.scalars(stmt).all()

    def create(self, job: JobRole) -> JobRole:
        self.add(job)
        self.flush()
        return job

    def update(self, job: JobRole) -> None:
        self.add(job)
        self.flush()

    def set_status_where(self, predicates: Sequence[Predicate], status: JobStatus) -> int:
        """Set ``status`` on every matching row in one statement; returns the row count."""
        stmt = (
            update(JobRole)
            .where(*compile_predicates(predicates))
            .values(status=status, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        return result.rowcount or 0
