"""Base repository utilities and the job store contract."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Optional, Protocol, Sequence, TypeVar

from sqlalchemy.orm import Session

if TYPE_CHECKING:
    from jobboard.db.models import JobRole
    from jobboard.domain.jobs import JobStatus
    from jobboard.domain.predicates import Predicate, Sort

TModel = TypeVar("TModel")


class SQLAlchemyRepository(Generic[TModel]):
    """Minimal base repository storing the SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, instance: TModel) -> TModel:
        self.session.add(instance)
        return instance

    def remove(self, instance: TModel) -> None:
        self.session.delete(instance)

    def refresh(self, instance: TModel) -> TModel:
        self.session.refresh(instance)
        return instance

    def commit(self) -> None:
        self.session.commit()

    def flush(self) -> None:
        self.session.flush()


class JobStore(Protocol):
    """Operations the query engine and status sweep need from job storage.

    Predicate sequences are ANDed. Implementations raise their own storage
    errors; an empty result is never an error.
    """

    def list_all(self) -> Sequence["JobRole"]: ...

    def get_by_id(self, job_id: int) -> Optional["JobRole"]: ...

    def count_matching(self, predicates: Sequence["Predicate"]) -> int: ...

    def query_page(
        self,
        predicates: Sequence["Predicate"],
        sort: "Sort",
        offset: int,
        limit: int,
    ) -> Sequence["JobRole"]: ...

    def create(self, job: "JobRole") -> "JobRole": ...

    def update(self, job: "JobRole") -> None: ...

    def set_status_where(self, predicates: Sequence["Predicate"], status: "JobStatus") -> int: ...
