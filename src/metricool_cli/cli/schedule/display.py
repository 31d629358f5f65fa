"""Display functions for the schedule command - pure functions for Rich output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ...constants.limits import SCHEDULE_PREVIEW_LENGTH
from ...platforms import to_name
from ..core.display import truncate
from .service import ScheduleOutcome
from .validators import ScheduleDraft


def show_schedule_config(console: Console, draft: ScheduleDraft) -> None:
    """Display what is about to be scheduled."""
    console.print("[bold]Scheduling post...[/bold]")
    console.print(f"   [dim]Platforms:[/dim] {', '.join(draft.platforms)}")
    console.print(f"   [dim]Time:[/dim] {draft.date} ({draft.timezone})")
    if draft.image_url:
        console.print(f"   [dim]Image:[/dim] {escape(draft.image_url)}")


def show_schedule_result(console: Console, outcome: ScheduleOutcome) -> None:
    """Display confirmation with the post id and a per-platform preview."""
    lines = ["[bold green]Post scheduled successfully![/bold green]"]
    if outcome.post_id:
        lines.append(f"Post ID: {outcome.post_id}")
    console.print()
    console.print(Panel("\n".join(lines), border_style="green"))

    console.print("\n[bold]Scheduled posts preview:[/bold]")
    for entry in outcome.request.entries:
        preview = truncate(entry.text, SCHEDULE_PREVIEW_LENGTH)
        console.print(f"   {to_name(entry.network)}: \"{escape(preview)}\"")
