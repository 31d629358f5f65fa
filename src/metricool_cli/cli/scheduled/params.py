"""Immutable parameter dataclass for the scheduled-post listing."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ScheduledListParams:
    """Immutable parameters for listing scheduled posts."""

    start: str
    end: str
    blog_id: Optional[str]
    json_output: bool

    @classmethod
    def from_cli(
        cls,
        start: Optional[str] = None,
        end: Optional[str] = None,
        blog: Optional[str] = None,
        json_output: bool = False,
        now: Optional[datetime] = None,
        **kwargs,
    ) -> "ScheduledListParams":
        """Create from CLI arguments, filling the default range from ``now``.

        With only ``start`` given, the range ends 7 days after it. An invalid
        start keeps the today-based end and is reported by validation.
        """
        from ..core.parsers import default_date_range, range_end_from_start

        if now is None:
            now = datetime.now()
        default_start, default_end = default_date_range(now)

        if start and not end:
            try:
                default_end = range_end_from_start(start)
            except ValueError:
                pass

        return cls(
            start=start or default_start,
            end=end or default_end,
            blog_id=blog,
            json_output=json_output,
        )
