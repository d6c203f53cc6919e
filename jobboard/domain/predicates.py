"""Storage-neutral predicates over job role fields.

Filters are translated into a flat list of predicate objects that are ANDed
together by whichever store executes them. Stores decide how each variant maps
onto their own query language.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Any, Optional, Union

from jobboard.domain.filters import JobFilters
from jobboard.domain.jobs import JobStatus, SortBy, SortOrder


class JobField(str, Enum):
    """Job role attributes that predicates and sorting may reference."""

    ID = "id"
    ROLE_NAME = "job_role_name"
    DESCRIPTION = "description"
    RESPONSIBILITIES = "responsibilities"
    LOCATION = "location"
    CAPABILITY = "capability"
    BAND = "band"
    CLOSING_DATE = "closing_date"
    STATUS = "status"
    OPEN_POSITIONS = "number_of_open_positions"


@dataclass(frozen=True, slots=True)
class EqualsField:
    field: JobField
    value: Any


@dataclass(frozen=True, slots=True)
class ContainsSubstring:
    """Case-insensitive substring match."""

    field: JobField
    value: str


@dataclass(frozen=True, slots=True)
class RangeBetween:
    """Inclusive range; either bound may be None for an open-ended range."""

    field: JobField
    lower: Optional[Any] = None
    upper: Optional[Any] = None


@dataclass(frozen=True, slots=True)
class OrGroup:
    predicates: tuple["Predicate", ...]


Predicate = Union[EqualsField, ContainsSubstring, RangeBetween, OrGroup]


def build_predicates(filters: JobFilters) -> list[Predicate]:
    """Translate the narrowing fields of ``filters`` into predicates (ANDed)."""
    predicates: list[Predicate] = []

    if filters.capability is not None:
        predicates.append(EqualsField(JobField.CAPABILITY, filters.capability))
    if filters.band is not None:
        predicates.append(EqualsField(JobField.BAND, filters.band))
    if filters.status is not None:
        predicates.append(EqualsField(JobField.STATUS, filters.status))
    if filters.location is not None:
        predicates.append(ContainsSubstring(JobField.LOCATION, filters.location))
    if filters.search is not None:
        predicates.append(
            OrGroup(
                (
                    ContainsSubstring(JobField.ROLE_NAME, filters.search),
                    ContainsSubstring(JobField.DESCRIPTION, filters.search),
                    ContainsSubstring(JobField.RESPONSIBILITIES, filters.search),
                )
            )
        )
    if filters.closing_date_from is not None or filters.closing_date_to is not None:
        predicates.append(
            RangeBetween(
                JobField.CLOSING_DATE,
                lower=filters.closing_date_from,
                upper=filters.closing_date_to,
            )
        )
    if filters.min_positions is not None or filters.max_positions is not None:
        predicates.append(
            RangeBetween(
                JobField.OPEN_POSITIONS,
                lower=filters.min_positions,
                upper=filters.max_positions,
            )
        )
    return predicates


def stale_job_predicates(today: date) -> list[Predicate]:
    """Predicates selecting open job roles that should be closed as of ``today``.

    A role is stale when its closing date is strictly before ``today`` or it has
    no open positions left. Dates compare without a time component, so a role
    closing today is still open.
    """
    return [
        EqualsField(JobField.STATUS, JobStatus.OPEN),
        OrGroup(
            (
                RangeBetween(JobField.CLOSING_DATE, upper=today - timedelta(days=1)),
                EqualsField(JobField.OPEN_POSITIONS, 0),
            )
        ),
    ]


_SORT_FIELDS = {
    SortBy.ROLE_NAME: JobField.ROLE_NAME,
    SortBy.CLOSING_DATE: JobField.CLOSING_DATE,
    SortBy.BAND: JobField.BAND,
    SortBy.CAPABILITY: JobField.CAPABILITY,
    SortBy.LOCATION: JobField.LOCATION,
}


@dataclass(frozen=True, slots=True)
class Sort:
    """Requested ordering; stores always break ties by ascending id."""

    field: Optional[JobField] = None
    descending: bool = False


def sort_for(filters: JobFilters) -> Sort:
    if filters.sort_by is None:
        return Sort()
    return Sort(
        field=_SORT_FIELDS[filters.sort_by],
        descending=filters.sort_order is SortOrder.DESC,
    )
