"""Utilities for timezone-aware timestamps and calendar dates."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo


def utcnow() -> datetime:
    """Return a timezone-aware UTC timestamp."""
    return datetime.now(UTC)


def today_in(tz_name: str) -> date:
    """Return the current calendar date in the named IANA timezone."""
    return datetime.now(ZoneInfo(tz_name)).date()
