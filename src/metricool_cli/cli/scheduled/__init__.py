"""Scheduled feature - list posts scheduled in a date range."""

from .commands import scheduled
from .display import show_scheduled_posts

__all__ = [
    "scheduled",
    "show_scheduled_posts",
]
