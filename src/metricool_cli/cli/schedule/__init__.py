"""Schedule feature - schedule a post to one or more platforms."""

from .commands import schedule
from .display import show_schedule_config, show_schedule_result

__all__ = [
    "schedule",
    "show_schedule_config",
    "show_schedule_result",
]
