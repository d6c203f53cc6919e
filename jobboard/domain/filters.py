"""Job role filters and their parser.

``parse_job_filters`` turns the raw query-string mapping delivered by the HTTP
layer into an immutable :class:`JobFilters`. It never raises: values that do
not parse are dropped (or replaced by their default) instead of rejected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from jobboard.domain.jobs import Band, Capability, JobStatus, SortBy, SortOrder

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_INTEGER_RE = re.compile(r"^\s*[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class JobFilters:
    capability: Optional[Capability] = None
    band: Optional[Band] = None
    status: Optional[JobStatus] = None
    location: Optional[str] = None
    search: Optional[str] = None
    closing_date_from: Optional[date] = None
    closing_date_to: Optional[date] = None
    min_positions: Optional[int] = None
    max_positions: Optional[int] = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: Optional[SortBy] = None
    sort_order: SortOrder = SortOrder.ASC

    @property
    def has_filters(self) -> bool:
        """True when at least one narrowing field (not paging or sorting) is set."""
        return any(value is not None for value in self._filter_fields().values())

    def _filter_fields(self) -> dict[str, Any]:
        return {
            "capability": self.capability,
            "band": self.band,
            "status": self.status,
            "location": self.location,
            "search": self.search,
            "closingDateFrom": self.closing_date_from,
            "closingDateTo": self.closing_date_to,
            "minPositions": self.min_positions,
            "maxPositions": self.max_positions,
        }

    def to_dict(self) -> dict[str, Any]:
        """Echo form using the query-string key names; absent fields are omitted."""
        payload: dict[str, Any] = {}
        for key, value in self._filter_fields().items():
            if value is None:
                continue
            payload[key] = value.isoformat() if isinstance(value, date) else _plain(value)
        payload["page"] = self.page
        payload["limit"] = self.limit
        if self.sort_by is not None:
            payload["sortBy"] = self.sort_by.value
        payload["sortOrder"] = self.sort_order.value
        return payload


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, (Capability, Band, JobStatus)) else value


def _parse_non_negative_int(value: str) -> Optional[int]:
    # integer prefix: "12abc" -> 12, "abc" -> None
    match = _INTEGER_RE.match(value)
    if not match:
        return None
    number = int(match.group(0))
    return number if number >= 0 else None


def _parse_date(value: str) -> Optional[date]:
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def _string(query: Mapping[str, Any], key: str) -> Optional[str]:
    value = query.get(key)
    return value if isinstance(value, str) and value != "" else None


def parse_job_filters(query: Mapping[str, Any]) -> JobFilters:
    """Build a :class:`JobFilters` from raw query parameters.

    Args:
        query: Mapping of query-string keys (``capability``, ``band``, ``status``,
            ``location``, ``search``, ``closingDateFrom``, ``closingDateTo``,
            ``minPositions``, ``maxPositions``, ``page``, ``limit``, ``sortBy``,
            ``sortOrder``) to string values. Non-string values are ignored.

    Returns:
        The parsed filters. ``page`` falls back to 1 and ``limit`` to 10
        whenever they are missing or out of range; ``sortOrder`` falls back to
        ascending. Every other unparseable value is simply left unset.
    """
    fields: dict[str, Any] = {}

    raw = _string(query, "capability")
    if raw is not None:
        fields["capability"] = Capability.parse(raw)

    raw = _string(query, "band")
    if raw is not None:
        fields["band"] = Band.parse(raw)

    raw = _string(query, "status")
    if raw is not None:
        fields["status"] = JobStatus.parse(raw)

    raw = _string(query, "location")
    if raw is not None:
        fields["location"] = raw.strip()

    raw = _string(query, "search")
    if raw is not None:
        fields["search"] = raw.strip()

    raw = _string(query, "closingDateFrom")
    if raw is not None:
        fields["closing_date_from"] = _parse_date(raw)

    raw = _string(query, "closingDateTo")
    if raw is not None:
        fields["closing_date_to"] = _parse_date(raw)

    raw = _string(query, "minPositions")
    if raw is not None:
        fields["min_positions"] = _parse_non_negative_int(raw)

    raw = _string(query, "maxPositions")
    if raw is not None:
        fields["max_positions"] = _parse_non_negative_int(raw)

    page = DEFAULT_PAGE
    raw = _string(query, "page")
    if raw is not None:
        parsed = _parse_non_negative_int(raw)
        if parsed is not None and parsed >= 1:
            page = parsed

    limit = DEFAULT_LIMIT
    raw = _string(query, "limit")
    if raw is not None:
        parsed = _parse_non_negative_int(raw)
        if parsed is not None and 1 <= parsed <= MAX_LIMIT:
            limit = parsed

    raw = _string(query, "sortBy")
    if raw is not None:
        fields["sort_by"] = SortBy.parse(raw)

    raw = _string(query, "sortOrder")
    sort_order = (SortOrder.parse(raw) if raw is not None else None) or SortOrder.ASC

    return JobFilters(page=page, limit=limit, sort_order=sort_order, **fields)


def describe_filters(filters: JobFilters) -> str:
    """Summarise the narrowing filters in ``filters`` for humans.

    Returns an empty string when no filter is set; paging and sorting are not
    described.
    """
    descriptions: list[str] = []
    if filters.capability is not None:
        descriptions.append(f"capability: {filters.capability.value}")
    if filters.band is not None:
        descriptions.append(f"band: {filters.band.value}")
    if filters.status is not None:
        descriptions.append(f"status: {filters.status.value}")
    if filters.location is not None:
        descriptions.append(f'location: "{filters.location}"')
    if filters.search is not None:
        descriptions.append(f'search: "{filters.search}"')
    if filters.closing_date_from is not None:
        descriptions.append(f"closing from: {filters.closing_date_from.isoformat()}")
    if filters.closing_date_to is not None:
        descriptions.append(f"closing to: {filters.closing_date_to.isoformat()}")
    if filters.min_positions is not None:
        descriptions.append(f"min positions: {filters.min_positions}")
    if filters.max_positions is not None:
        descriptions.append(f"max positions: {filters.max_positions}")

    if not descriptions:
        return ""
    return f"Active filters: {', '.join(descriptions)}"
