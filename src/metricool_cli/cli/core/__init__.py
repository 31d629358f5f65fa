"""Core utilities for CLI - pure functions and shared types."""

from .types import Result, Success, Failure
from .parsers import default_date_range, parse_blog_id, parse_date, parse_schedule_datetime
from .validators import validate_blog_id, validate_date_range, validate_platform
from .console import console, err_console
from .errors import api_error_hints, show_command_error

__all__ = [
    # Types
    "Result",
    "Success",
    "Failure",
    # Parsers
    "default_date_range",
    "parse_blog_id",
    "parse_date",
    "parse_schedule_datetime",
    # Validators
    "validate_blog_id",
    "validate_date_range",
    "validate_platform",
    # Console
    "console",
    "err_console",
    # Errors
    "api_error_hints",
    "show_command_error",
]
