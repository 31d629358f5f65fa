"""Unit tests for command error rendering and API error hints."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent / "src"))

from rich.console import Console

from metricool_cli.api.errors import (
    CredentialsMissingError,
    EmptyResultError,
    InputValidationError,
    MetricoolAPIError,
    NetworkError,
)
from metricool_cli.cli.core.display import truncate
from metricool_cli.cli.core.errors import api_error_hints, show_command_error


class TestApiErrorHints:
    """Tests for api_error_hints function."""

    def test_unauthorized_points_at_token(self):
        assert api_error_hints(401) == ["Check your METRICOOL_USER_TOKEN is valid"]
        assert api_error_hints(401, "schedule") == ["Check your METRICOOL_USER_TOKEN is valid"]

    def test_bad_request_while_scheduling(self):
        hints = api_error_hints(400, "schedule")

        assert hints[0] == "Check your post data:"
        assert len(hints) == 4
        assert any("Image URL" in line for line in hints)

    def test_bad_request_elsewhere_has_no_hints(self):
        assert api_error_hints(400, "brands") == []
        assert api_error_hints(400) == []

    def test_other_statuses(self):
        assert api_error_hints(404) == []
        assert api_error_hints(500, "schedule") == []


class TestShowCommandError:
    """Tests for show_command_error function."""

    def test_api_error_with_hint(self, mock_console: Console):
        show_command_error(mock_console, MetricoolAPIError(401, "Unauthorized"), "brands")
        output = mock_console.file.getvalue()

        assert "Error: Metricool API error 401: Unauthorized" in output
        assert "Check your METRICOOL_USER_TOKEN is valid" in output

    def test_missing_credentials(self, mock_console: Console):
        show_command_error(mock_console, CredentialsMissingError(["METRICOOL_USER_TOKEN"]))
        output = mock_console.file.getvalue()

        assert "Missing Metricool credentials: METRICOOL_USER_TOKEN" in output
        assert "moltbot.json" in output

    def test_empty_result_suggests_brands(self, mock_console: Console):
        show_command_error(mock_console, EmptyResultError("No brands found"))

        assert "metricool brands" in mock_console.file.getvalue()

    def test_validation_details(self, mock_console: Console):
        error = InputValidationError("Unknown platform: myspace", {"valid_platforms": "linkedin, x"})
        show_command_error(mock_console, error)
        output = mock_console.file.getvalue()

        assert "Unknown platform: myspace" in output
        assert "valid_platforms: linkedin, x" in output

    def test_network_error(self, mock_console: Console):
        show_command_error(mock_console, NetworkError("Could not reach Metricool: timed out"))

        assert "Could not reach Metricool" in mock_console.file.getvalue()

    def test_markup_in_body_is_not_interpreted(self, mock_console: Console):
        show_command_error(mock_console, MetricoolAPIError(500, "[bold]oops[/bold]"))

        assert "[bold]oops[/bold]" in mock_console.file.getvalue()


class TestTruncate:
    """Tests for truncate function."""

    def test_short_text_unchanged(self):
        assert truncate("Hello", 50) == "Hello"
        assert truncate("x" * 50, 50) == "x" * 50

    def test_long_text_cut_with_ellipsis(self):
        assert truncate("x" * 51, 50) == "x" * 50 + "..."
