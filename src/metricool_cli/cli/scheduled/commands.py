"""Scheduled-listing CLI command - thin wrapper orchestrating params, validation, display, and service."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer

from ...api.errors import MetricoolError
from ...config import load_settings
from ..core.console import console, echo_json, err_console, print_error
from ..core.display import show_using_brand
from ..core.errors import show_command_error
from ..core.session import create_client
from ..core.types import Failure
from .display import show_scheduled_posts
from .params import ScheduledListParams
from .service import fetch_scheduled_posts
from .validators import validate_scheduled_params


def scheduled(
    start: Optional[str] = typer.Option(None, "--start", help="Start date YYYY-MM-DD (default: today)"),
    end: Optional[str] = typer.Option(None, "--end", help="End date YYYY-MM-DD (default: +7 days)"),
    blog: Optional[str] = typer.Option(None, "--blog", help="Blog/brand ID (auto-detects first brand if omitted)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List scheduled posts.

    Examples:
        metricool scheduled
        metricool scheduled --start 2026-01-30 --end 2026-02-05
    """
    params = ScheduledListParams.from_cli(
        start=start,
        end=end,
        blog=blog,
        json_output=json_output,
    )

    validation = validate_scheduled_params(params)
    if isinstance(validation, Failure):
        print_error(validation.error, validation.details)
        raise typer.Exit(1)

    settings = load_settings()
    try:
        client = create_client(settings)
        listing = asyncio.run(fetch_scheduled_posts(
            client,
            validation.value,
            timezone=settings.default_timezone,
        ))
    except MetricoolError as e:
        show_command_error(err_console, e, "scheduled")
        raise typer.Exit(1)

    if params.json_output:
        echo_json(listing.records)
        return

    if listing.brand is not None:
        show_using_brand(console, listing.brand)
    show_scheduled_posts(console, listing.posts, listing.start, listing.end)
