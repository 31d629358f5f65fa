"""Pure parsing functions for CLI arguments."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Tuple

from ...constants.limits import DEFAULT_RANGE_DAYS


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` date.

    Pure function - no side effects.

    Raises:
        ValueError: If format is invalid
    """
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise ValueError(f"Invalid date: {value}. Use format YYYY-MM-DD") from None


def default_date_range(now: datetime, days: int = DEFAULT_RANGE_DAYS) -> Tuple[str, str]:
    """Default listing range: today through ``days`` days from now.

    Pure function - ``now`` is passed in explicitly.

    Args:
        now: Current datetime
        days: Span of the range in days

    Returns:
        Tuple of (start, end) as ``YYYY-MM-DD`` strings
    """
    start = now.date()
    end = (now + timedelta(days=days)).date()
    return start.isoformat(), end.isoformat()


def range_end_from_start(start: str, days: int = DEFAULT_RANGE_DAYS) -> str:
    """End date ``days`` days after a ``YYYY-MM-DD`` start date.

    Raises:
        ValueError: If start is not a valid date
    """
    return (parse_date(start) + timedelta(days=days)).isoformat()


def parse_schedule_datetime(value: str) -> str:
    """Normalize a scheduling datetime to ISO-8601.

    Naive values stay naive (the API reads them in the request timezone);
    values with an offset keep it.

    Examples:
        '2026-01-30T10:00:00' -> '2026-01-30T10:00:00'
        '2026-01-30 10:00'    -> '2026-01-30T10:00:00'
        '2026-01-30T16:00Z'   -> '2026-01-30T16:00:00+00:00'

    Raises:
        ValueError: If the value is not an ISO-8601 datetime
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        raise ValueError(f"Invalid datetime: {value}. Use ISO format like 2026-01-30T10:00:00") from None
    return parsed.isoformat(timespec="seconds")


def parse_blog_id(value: str | int) -> int:
    """Parse a brand (blog) id into the integer the scheduler expects.

    Raises:
        ValueError: If the id is not an integer
    """
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"Invalid blog id: {value}. Expected a number") from None
