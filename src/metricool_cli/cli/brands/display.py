"""Display functions for the brands command - pure functions for Rich output."""

from __future__ import annotations

from typing import List

from rich.console import Console
from rich.markup import escape

from ...api.models import Brand


def show_brands(console: Console, brands: List[Brand]) -> None:
    """Display the numbered list of brands with their blog IDs and networks."""
    console.print("\n[bold]Metricool Brands[/bold]\n")

    if not brands:
        console.print("[yellow]No brands found on this account.[/yellow]")
        return

    for i, brand in enumerate(brands, 1):
        console.print(f"{i}. [bold]{escape(brand.label)}[/bold]")
        console.print(f"   [dim]Blog ID:[/dim] [cyan]{brand.id}[/cyan]")
        if brand.networks:
            console.print(f"   [dim]Networks:[/dim] {', '.join(brand.networks)}")
        console.print()
