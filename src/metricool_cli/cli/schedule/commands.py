"""Schedule CLI command - thin wrapper orchestrating params, validation, display, and service."""

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
from .display import show_schedule_config, show_schedule_result
from .params import ScheduleParams
from .service import prepare_post_request, submit_post
from .validators import validate_schedule_params


def schedule(
    ctx: typer.Context,
    config: Optional[str] = typer.Argument(None, help="JSON config for the post"),
    json_output: bool = typer.Option(False, "--json", help="Output the API response as JSON"),
) -> None:
    """Schedule a post to one or more platforms.

    \b
    JSON config:
      {
        "platforms": ["linkedin", "x", "bluesky", "threads", "instagram"],
        "text": "Post text" | {"linkedin": "...", "x": "..."},
        "datetime": "2026-01-30T10:00:00",
        "timezone": "America/Chicago",
        "imageUrl": "https://...",
        "blogId": "YOUR_BLOG_ID"
      }

    \b
    Platforms: linkedin, x, twitter, bluesky, threads, instagram,
    facebook, tiktok, pinterest, youtube

    Run 'metricool brands' to find your blog ID.
    """
    if config is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    params = ScheduleParams.from_cli(config=config, json_output=json_output)
    settings = load_settings()

    validation = validate_schedule_params(params, default_timezone=settings.default_timezone)
    if isinstance(validation, Failure):
        print_error(validation.error, validation.details)
        raise typer.Exit(1)
    draft = validation.value

    try:
        client = create_client(settings)
        post_request, brand = asyncio.run(prepare_post_request(client, draft))
    except MetricoolError as e:
        show_command_error(err_console, e, "schedule")
        raise typer.Exit(1)

    if not params.json_output:
        if brand is not None:
            show_using_brand(console, brand)
        show_schedule_config(console, draft)

    try:
        outcome = asyncio.run(submit_post(client, post_request, brand))
    except MetricoolError as e:
        show_command_error(err_console, e, "schedule")
        raise typer.Exit(1)

    if params.json_output:
        echo_json(outcome.response)
        return

    show_schedule_result(console, outcome)
