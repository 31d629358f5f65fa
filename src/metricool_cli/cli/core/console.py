"""Rich console singletons for CLI output."""

import json
import sys
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

# Use safe_box on Windows to avoid Unicode encoding errors
_safe_box = sys.platform == "win32"

# Results go to stdout, errors to stderr
console = Console(safe_box=_safe_box)
err_console = Console(stderr=True, safe_box=_safe_box)


def print_error(message: str, details: dict | None = None, target: Console | None = None) -> None:
    """Print an error message.

    Args:
        message: Error message
        details: Optional details dict
        target: Console to write to (defaults to stderr)
    """
    target = target or err_console
    target.print(f"[red]Error: {escape(message)}[/red]")
    if details:
        for key, value in details.items():
            target.print(f"  [dim]{key}:[/dim] [yellow]{escape(str(value))}[/yellow]")



def echo_json(data: Any) -> None:
    """Write data as indented JSON to stdout, without Rich markup or colors."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
