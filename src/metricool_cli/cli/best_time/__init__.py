"""Best-time feature - best time to post per platform."""

from .commands import best_time
from .display import show_best_times

__all__ = [
    "best_time",
    "show_best_times",
]
