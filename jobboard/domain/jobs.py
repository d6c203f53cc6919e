"""Job role value types: closed enumerations, pagination and sweep results."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from jobboard.db.models import JobRole
    from jobboard.domain.filters import JobFilters


class LiteralEnum(str, Enum):
    """String enum whose members parse case-insensitively from their literal values."""

    @classmethod
    def parse(cls, value: Any) -> Optional["LiteralEnum"]:
        """Return the member whose value matches ``value`` ignoring case, else None."""
        if not isinstance(value, str):
            return None
        wanted = value.lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    def __str__(self) -> str:
        return self.value


class Capability(LiteralEnum):
    DATA = "Data"
    WORKDAY = "Workday"
    ENGINEERING = "Engineering"


class Band(LiteralEnum):
    E1 = "E1"
    E2 = "E2"
    E3 = "E3"
    E4 = "E4"
    E5 = "E5"


class JobStatus(LiteralEnum):
    OPEN = "open"
    CLOSED = "closed"
    DRAFT = "draft"


class SortBy(LiteralEnum):
    ROLE_NAME = "jobRoleName"
    CLOSING_DATE = "closingDate"
    BAND = "band"
    CAPABILITY = "capability"
    LOCATION = "location"


class SortOrder(LiteralEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class Pagination:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def compute(cls, page: int, limit: int, total_items: int) -> "Pagination":
        """Derive page metadata; ``total_pages`` is 0 when nothing matched."""
        total_pages = math.ceil(total_items / limit) if total_items else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_items=total_items,
            items_per_page=limit,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.items_per_page


@dataclass(frozen=True, slots=True)
class JobRolePage:
    """One page of job roles plus the filters that produced it."""

    jobs: Sequence["JobRole"]
    pagination: Pagination
    filters: "JobFilters"


@dataclass(frozen=True, slots=True)
class SweepResult:
    updated_count: int = 0
