"""Rendering of command errors at the CLI boundary."""

from __future__ import annotations

from typing import List

from rich.console import Console

from ...api.errors import (
    CredentialsMissingError,
    EmptyResultError,
    InputValidationError,
    MetricoolAPIError,
    MetricoolError,
)
from ...constants.api import TOKEN_ENV_VAR
from .console import print_error


def api_error_hints(status_code: int, operation: str | None = None) -> List[str]:
    """Contextual hints for an API error status.

    Pure function - no side effects.

    Args:
        status_code: HTTP status of the failed call
        operation: Command name ('schedule' enables payload hints for 400)

    Returns:
        Hint lines, possibly empty
    """
    if status_code == 401:
        return [f"Check your {TOKEN_ENV_VAR} is valid"]
    if status_code == 400 and operation == "schedule":
        return [
            "Check your post data:",
            "  - Text within character limits?",
            "  - Image URL publicly accessible?",
            "  - Datetime in valid format?",
        ]
    return []


def show_command_error(
    target: Console,
    error: MetricoolError,
    operation: str | None = None,
) -> None:
    """Render a MetricoolError as a single user-facing message plus hints."""
    details: dict = {}

    if isinstance(error, CredentialsMissingError):
        details["hint"] = (
            "Set METRICOOL_USER_TOKEN and METRICOOL_USER_ID in the environment, "
            "~/.moltbot/moltbot.json or .env"
        )
    elif isinstance(error, InputValidationError):
        details.update(error.details)
    elif isinstance(error, EmptyResultError):
        details["hint"] = "No blog ID specified and none could be auto-detected. Run 'metricool brands'"

    print_error(str(error), details or None, target)

    if isinstance(error, MetricoolAPIError):
        hints = api_error_hints(error.status_code, operation)
        if hints:
            target.print()
            for line in hints:
                target.print(f"[yellow]{line}[/yellow]")
