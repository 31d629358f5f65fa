"""Pure validation functions for CLI arguments."""

from __future__ import annotations

from typing import Iterable

from ...api.errors import InputValidationError
from ...platforms import to_code
from .parsers import parse_blog_id, parse_date
from .types import Result, Success, Failure


def validate_platform(name: str, allowed: Iterable[str] | None = None) -> Result[str]:
    """Validate a platform name and translate it to its network code.

    Pure function - no side effects.

    Args:
        name: Platform name, any case
        allowed: Optional subset of accepted names

    Returns:
        Result containing the network code or failure
    """
    try:
        return Success(to_code(name, allowed))
    except InputValidationError as e:
        return Failure(str(e), e.details)


def validate_date_range(start: str, end: str) -> Result[tuple[str, str]]:
    """Validate a ``YYYY-MM-DD`` date range.

    Pure function - no side effects.

    Returns:
        Result containing normalized (start, end) or failure
    """
    try:
        start_date = parse_date(start)
        end_date = parse_date(end)
    except ValueError as e:
        return Failure(str(e), {"hint": "Dates use the format YYYY-MM-DD"})

    if start_date > end_date:
        return Failure(
            f"Start date {start_date} is after end date {end_date}",
            {"hint": "--start must be on or before --end"},
        )
    return Success((start_date.isoformat(), end_date.isoformat()))


def validate_blog_id(blog_id: str | int | None) -> Result[int | None]:
    """Validate an optional brand id.

    Pure function - no side effects.

    Returns:
        Result containing the integer id, None when absent, or failure
    """
    if blog_id is None or str(blog_id).strip() == "":
        return Success(None)
    try:
        return Success(parse_blog_id(blog_id))
    except ValueError as e:
        return Failure(str(e), {"hint": "Run 'metricool brands' to find your blog ID"})
