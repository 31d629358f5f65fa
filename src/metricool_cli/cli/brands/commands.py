"""Brands CLI command - thin wrapper orchestrating display and service."""

from __future__ import annotations

import asyncio

import typer

from ...api.errors import MetricoolError
from ..core.console import console, echo_json, err_console
from ..core.errors import show_command_error
from ..core.session import create_client
from .display import show_brands
from .service import fetch_brands


def brands(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List Metricool brands and their blog IDs."""
    try:
        client = create_client()
        listing = asyncio.run(fetch_brands(client))
    except MetricoolError as e:
        show_command_error(err_console, e, "brands")
        raise typer.Exit(1)

    if json_output:
        echo_json(listing.records)
        return

    show_brands(console, listing.brands)
