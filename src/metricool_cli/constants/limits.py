"""Display limits and default ranges."""

from typing import Final

DEFAULT_RANGE_DAYS: Final[int] = 7
"""Default span of the scheduled-post listing, starting today."""

BEST_TIME_TOP_N: Final[int] = 5
"""Number of recommended slots shown by best-time."""

SCHEDULED_PREVIEW_LENGTH: Final[int] = 50
"""Text preview length in the scheduled-post listing."""

SCHEDULE_PREVIEW_LENGTH: Final[int] = 60
"""Text preview length in the schedule confirmation."""

WEEKDAY_ABBREVIATIONS: Final[tuple[str, ...]] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
"""Day labels indexed the way the best-time endpoint numbers days (0 = Sunday)."""
