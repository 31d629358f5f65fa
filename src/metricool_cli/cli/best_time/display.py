"""Display functions for the best-time command - pure functions for Rich output."""

from __future__ import annotations

import json
from typing import Any, List

from rich.console import Console
from rich.table import Table

from ...constants.limits import BEST_TIME_TOP_N, WEEKDAY_ABBREVIATIONS


def top_best_times(data: Any, limit: int = BEST_TIME_TOP_N) -> List[dict]:
    """Pick the recommended slots from a best-time payload.

    Pure function - no side effects.

    A ``bestTimes`` list is already ranked by the API and kept in order.
    A bare list of ``{day, hour, value}`` slots is ranked by value.

    Returns:
        Up to ``limit`` slot dicts, or [] when the payload has neither shape
    """
    if isinstance(data, dict) and isinstance(data.get("bestTimes"), list):
        slots = [s for s in data["bestTimes"] if isinstance(s, dict)]
        return slots[:limit]

    if isinstance(data, list):
        slots = [s for s in data if isinstance(s, dict) and "day" in s and "hour" in s]
        slots.sort(key=lambda s: _score(s.get("value")), reverse=True)
        return slots[:limit]

    return []


def format_day(day: Any) -> str:
    """Day label for an API day index (0 = Sunday); other values are echoed."""
    if isinstance(day, int) and 0 <= day < len(WEEKDAY_ABBREVIATIONS):
        return WEEKDAY_ABBREVIATIONS[day]
    return str(day)


def show_best_times(console: Console, platform: str, data: Any) -> None:
    """Display the top recommended posting times, or the raw payload."""
    title = platform[:1].upper() + platform[1:]
    console.print(f"[bold]Best Time to Post on {title}[/bold]\n")

    slots = top_best_times(data)
    if not slots:
        show_raw_payload(console, data)
        return

    table = Table(title="Top recommended times")
    table.add_column("#", style="dim")
    table.add_column("Day", style="cyan")
    table.add_column("Time", style="white")
    table.add_column("Score", style="green")

    for i, slot in enumerate(slots, 1):
        table.add_row(
            str(i),
            format_day(slot.get("day")),
            f"{slot.get('hour')}:00",
            str(slot.get("value", "")),
        )

    console.print(table)


def show_raw_payload(console: Console, data: Any) -> None:
    """Print a payload that has no dedicated rendering."""
    if isinstance(data, (dict, list)):
        console.print_json(json.dumps(data))
    else:
        console.print(str(data), markup=False)


def _score(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0
