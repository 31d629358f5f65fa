"""Scheduled-listing validators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.types import Result, Success, Failure
from ..core.validators import validate_blog_id, validate_date_range
from .params import ScheduledListParams


@dataclass(frozen=True)
class ScheduledListRequest:
    """Validated listing request."""

    start: str
    end: str
    blog_id: Optional[int]


def validate_scheduled_params(params: ScheduledListParams) -> Result[ScheduledListRequest]:
    """Validate listing parameters.

    Returns Result with the request if valid, or Failure with error.
    """
    range_result = validate_date_range(params.start, params.end)
    if isinstance(range_result, Failure):
        return range_result

    blog_result = validate_blog_id(params.blog_id)
    if isinstance(blog_result, Failure):
        return blog_result

    start, end = range_result.value
    return Success(ScheduledListRequest(start=start, end=end, blog_id=blog_result.value))
