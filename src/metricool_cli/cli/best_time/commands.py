"""Best-time CLI command - thin wrapper orchestrating params, validation, display, and service."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer

from ...api.errors import MetricoolError
from ..core.console import console, echo_json, err_console, print_error
from ..core.display import show_using_brand
from ..core.errors import show_command_error
from ..core.session import create_client
from ..core.types import Failure
from .display import show_best_times
from .params import BestTimeParams
from .service import fetch_best_time
from .validators import validate_best_time_params


def best_time(
    ctx: typer.Context,
    platform: Optional[str] = typer.Argument(
        None, help="Platform: linkedin, x, twitter, bluesky, threads, instagram, facebook"
    ),
    blog: Optional[str] = typer.Option(None, "--blog", help="Blog/brand ID (auto-detects first brand if omitted)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Get the best time to post on a platform.

    Examples:
        metricool best-time linkedin
        metricool best-time x --blog 12345
    """
    if platform is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    params = BestTimeParams.from_cli(platform=platform, blog=blog, json_output=json_output)

    validation = validate_best_time_params(params)
    if isinstance(validation, Failure):
        print_error(validation.error, validation.details)
        raise typer.Exit(1)

    try:
        client = create_client()
        report = asyncio.run(fetch_best_time(client, validation.value))
    except MetricoolError as e:
        show_command_error(err_console, e, "best-time")
        raise typer.Exit(1)

    if params.json_output:
        echo_json(report.data)
        return

    if report.brand is not None:
        show_using_brand(console, report.brand)
    show_best_times(console, report.platform, report.data)
