"""Display helpers shared by several commands."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from ...api.models import Brand


def show_using_brand(console: Console, brand: Brand) -> None:
    """Announce the brand picked by auto-discovery."""
    console.print(f"[dim]Using brand:[/dim] [bold]{escape(brand.label)}[/bold] ({brand.id})\n")


def truncate(text: str, length: int) -> str:
    """Cut text to ``length`` characters, adding '...' when shortened.

    Pure function - no side effects.
    """
    if len(text) <= length:
        return text
    return text[:length] + "..."
