"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from ..config import load_settings

# Create Typer app
app = typer.Typer(
    name="metricool",
    help="Metricool brands, best posting times and post scheduling from the command line",
    add_completion=False,
    no_args_is_help=True,
)


def register_commands() -> None:
    """Register all commands from feature modules."""
    from .brands.commands import brands

    app.command(name="brands")(brands)

    from .best_time.commands import best_time

    app.command(name="best-time")(best_time)

    from .scheduled.commands import scheduled

    app.command(name="scheduled")(scheduled)

    from .schedule.commands import schedule

    app.command(name="schedule")(schedule)


def setup_logging(log_dir: Path) -> None:
    """Configure logging for CLI.

    - Suppresses console output from libraries
    - Sets up file logging for Metricool API calls
    """
    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    # Suppress loggers that might print to console
    for logger_name in ["httpx", "httpcore", "asyncio"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    api_logger = logging.getLogger("metricool_api")
    api_logger.setLevel(logging.DEBUG)
    api_logger.propagate = False
    api_logger.handlers = []  # Clear any existing handlers

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "metricool_api.log", encoding="utf-8")
    except OSError:
        # Read-only working directory: run without the API log
        api_logger.addHandler(logging.NullHandler())
        return

    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
    )
    api_logger.addHandler(file_handler)


@app.callback()
def _configure() -> None:
    """Metricool brands, best posting times and post scheduling."""
    setup_logging(load_settings().log_dir)


# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    app()
