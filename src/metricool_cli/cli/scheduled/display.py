"""Display functions for the scheduled-post listing - pure functions for Rich output."""

from __future__ import annotations

from typing import List

from rich.console import Console
from rich.markup import escape

from ...api.models import ScheduledPost
from ...constants.limits import SCHEDULED_PREVIEW_LENGTH
from ...platforms import display_name
from ..core.display import truncate


def format_post_date(post: ScheduledPost) -> str:
    """Format the scheduled date like 'Fri, Jan 30, 10:00 AM'.

    Unparseable dates are shown as returned by the API.
    """
    moment = post.scheduled_datetime()
    if moment is None:
        return post.scheduled_at or "Unknown date"
    hour = moment.strftime("%I").lstrip("0") or "12"
    return f"{moment.strftime('%a, %b')} {moment.day}, {hour}:{moment.strftime('%M %p')}"


def format_networks(post: ScheduledPost) -> str:
    """Comma-separated platform labels, raw codes for unknown networks."""
    return ", ".join(display_name(code) for code in post.networks if code)


def show_scheduled_posts(
    console: Console,
    posts: List[ScheduledPost],
    start: str,
    end: str,
) -> None:
    """Display scheduled posts with date, platforms, text preview and id."""
    console.print(f"[bold]Scheduled Posts ({start} to {end})[/bold]\n")

    if not posts:
        console.print("[yellow]No scheduled posts in this range.[/yellow]")
        return

    for i, post in enumerate(posts, 1):
        preview = truncate(post.text, SCHEDULED_PREVIEW_LENGTH)
        console.print(f"{i}. [cyan]{format_post_date(post)}[/cyan]")
        console.print(f"   [dim]Platforms:[/dim] {escape(format_networks(post))}")
        console.print(f"   [dim]Text:[/dim] \"{escape(preview)}\"")
        if post.id:
            console.print(f"   [dim]ID:[/dim] {post.id}")
        console.print()

    console.print(f"[bold]Total:[/] {len(posts)} scheduled posts")
