"""Unit tests for the schedule validators, service and display."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, call

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent / "src"))

from rich.console import Console

from metricool_cli.api.errors import EmptyResultError
from metricool_cli.api.models import MediaRef, PostEntry
from metricool_cli.cli.core.types import Failure, Success
from metricool_cli.cli.schedule.display import show_schedule_config, show_schedule_result
from metricool_cli.cli.schedule.params import ScheduleParams
from metricool_cli.cli.schedule.service import (
    build_post_request,
    extract_post_id,
    prepare_post_request,
    submit_post,
)
from metricool_cli.cli.schedule.validators import (
    parse_schedule_config,
    resolve_platform_text,
    validate_schedule_params,
)


def validate(config: dict | str, default_timezone: str = "America/Chicago"):
    raw = config if isinstance(config, str) else json.dumps(config)
    return validate_schedule_params(ScheduleParams.from_cli(config=raw), default_timezone)


@pytest.fixture
def basic_config() -> dict:
    return {
        "platforms": ["linkedin", "x"],
        "text": "Hello",
        "datetime": "2026-01-30T10:00:00",
        "blogId": "42",
    }


class TestResolvePlatformText:
    """Tests for resolve_platform_text function."""

    def test_plain_string_for_every_platform(self):
        assert resolve_platform_text("Hello", "linkedin") == "Hello"

    def test_exact_key(self):
        assert resolve_platform_text({"linkedin": "A", "x": "B"}, "x") == "B"

    def test_same_network_key(self):
        assert resolve_platform_text({"twitter": "T"}, "x") == "T"
        assert resolve_platform_text({"x": "X"}, "twitter") == "X"

    def test_keys_are_case_insensitive(self):
        assert resolve_platform_text({"LinkedIn": "A"}, "linkedin") == "A"

    def test_default_key(self):
        assert resolve_platform_text({"linkedin": "A", "default": "D"}, "bluesky") == "D"

    def test_no_entry(self):
        assert resolve_platform_text({"linkedin": "A"}, "bluesky") is None


class TestParseScheduleConfig:
    """Tests for parse_schedule_config function."""

    def test_invalid_json(self):
        result = parse_schedule_config("{platforms: linkedin")

        assert isinstance(result, Failure)
        assert result.error == "Invalid JSON config"

    def test_wrong_type(self):
        result = parse_schedule_config(json.dumps({"platforms": "linkedin"}))

        assert isinstance(result, Failure)
        assert result.details["field"] == "platforms"

    def test_aliases_and_numbers(self):
        config = parse_schedule_config(json.dumps({
            "platforms": ["x"],
            "text": "Hi",
            "datetime": "2026-01-30T10:00:00",
            "imageUrl": "https://img.test/a.png",
            "blogId": 12345,
        })).value

        assert config.scheduled_for == "2026-01-30T10:00:00"
        assert config.image_url == "https://img.test/a.png"
        assert config.blog_id == "12345"


class TestValidateScheduleParams:
    """Tests for validate_schedule_params function."""

    def test_shared_text_payload(self, basic_config):
        """Test two platforms with one text produce one entry per network."""
        draft = validate(basic_config).value

        assert build_post_request(draft, draft.blog_id).to_payload() == {
            "blogId": 42,
            "date": "2026-01-30T10:00:00",
            "timezone": "America/Chicago",
            "posts": [
                {"network": "IN", "text": "Hello", "blogId": 42},
                {"network": "TW", "text": "Hello", "blogId": 42},
            ],
        }

    def test_per_platform_text(self, basic_config):
        basic_config["text"] = {"linkedin": "A", "x": "B"}

        draft = validate(basic_config).value

        assert draft.entries == (
            PostEntry(network="IN", text="A"),
            PostEntry(network="TW", text="B"),
        )

    def test_timezone_default_and_override(self, basic_config):
        assert validate(basic_config, "Europe/Madrid").value.timezone == "Europe/Madrid"

        basic_config["timezone"] = "Asia/Tokyo"
        assert validate(basic_config).value.timezone == "Asia/Tokyo"

    def test_image_attached_to_every_entry(self, basic_config):
        basic_config["imageUrl"] = "https://img.test/a.png"

        draft = validate(basic_config).value
        image = MediaRef(type="IMAGE", url="https://img.test/a.png")

        assert all(entry.media == (image,) for entry in draft.entries)
        assert draft.image_url == "https://img.test/a.png"

    def test_x_and_twitter_post_once(self, basic_config):
        basic_config["platforms"] = ["x", "twitter", "linkedin"]

        draft = validate(basic_config).value

        assert [entry.network for entry in draft.entries] == ["TW", "IN"]
        assert draft.platforms == ("x", "linkedin")

    def test_platform_names_case_insensitive(self, basic_config):
        basic_config["platforms"] = ["LinkedIn", "BLUESKY"]

        assert [e.network for e in validate(basic_config).value.entries] == ["IN", "BS"]

    def test_missing_blog_id_left_for_discovery(self, basic_config):
        del basic_config["blogId"]

        assert validate(basic_config).value.blog_id is None

    def test_unknown_platform_rejected(self, basic_config):
        basic_config["platforms"] = ["linkedin", "myspace"]

        result = validate(basic_config)

        assert isinstance(result, Failure)
        assert result.error == "Unknown platform: myspace"

    def test_missing_per_platform_text(self, basic_config):
        basic_config["platforms"] = ["linkedin", "bluesky"]
        basic_config["text"] = {"linkedin": "A"}

        result = validate(basic_config)

        assert isinstance(result, Failure)
        assert result.error == "No text for platform: bluesky"

    @pytest.mark.parametrize(
        "field, message",
        [
            ("platforms", "No platforms specified"),
            ("text", "No text specified"),
            ("datetime", "No datetime specified"),
        ],
    )
    def test_missing_required_field(self, basic_config, field, message):
        del basic_config[field]

        result = validate(basic_config)

        assert isinstance(result, Failure)
        assert result.error == message

    def test_empty_platform_list(self, basic_config):
        basic_config["platforms"] = []

        assert validate(basic_config).error == "No platforms specified"

    def test_bad_datetime(self, basic_config):
        basic_config["datetime"] = "next friday"

        assert "Invalid datetime" in validate(basic_config).error

    def test_bad_blog_id(self, basic_config):
        basic_config["blogId"] = "YOUR_BLOG_ID"

        assert "Invalid blog id" in validate(basic_config).error

    def test_invalid_json(self):
        assert validate("not json").error == "Invalid JSON config"


class TestSchedulePost:
    """Tests for prepare_post_request, submit_post and extract_post_id."""

    @pytest.mark.asyncio
    async def test_discovers_brand_then_posts(self, basic_config, brand_records):
        del basic_config["blogId"]
        draft = validate(basic_config).value
        client = AsyncMock()
        client.list_brands.return_value = {"data": brand_records}
        client.schedule_post.return_value = {"result": {"id": 999}}

        post_request, brand = await prepare_post_request(client, draft)
        assert client.mock_calls == [call.list_brands()]

        outcome = await submit_post(client, post_request, brand)

        assert client.mock_calls == [
            call.list_brands(),
            call.schedule_post(post_request),
        ]
        assert outcome.request.blog_id == 111
        assert outcome.post_id == 999
        assert outcome.brand.label == "Acme"

    @pytest.mark.asyncio
    async def test_explicit_blog_id(self, basic_config):
        draft = validate(basic_config).value
        client = AsyncMock()
        client.schedule_post.return_value = "OK"

        post_request, brand = await prepare_post_request(client, draft)
        outcome = await submit_post(client, post_request, brand)

        client.list_brands.assert_not_called()
        assert outcome.request.blog_id == 42
        assert outcome.post_id is None
        assert outcome.brand is None

    @pytest.mark.asyncio
    async def test_brand_without_id_stops_before_posting(self, basic_config):
        del basic_config["blogId"]
        client = AsyncMock()
        client.list_brands.return_value = {"data": [{"label": "NoId"}]}

        with pytest.raises(EmptyResultError):
            await prepare_post_request(client, validate(basic_config).value)

        client.schedule_post.assert_not_called()

    def test_extract_post_id(self):
        assert extract_post_id({"result": {"id": 5}}) == 5
        assert extract_post_id({"id": 6}) == 6
        assert extract_post_id({"result": {}}) is None
        assert extract_post_id("OK") is None


class TestScheduleDisplay:
    """Tests for schedule display functions."""

    def test_config(self, mock_console: Console, basic_config):
        basic_config["imageUrl"] = "https://img.test/a.png"
        show_schedule_config(mock_console, validate(basic_config).value)
        output = mock_console.file.getvalue()

        assert "Scheduling post..." in output
        assert "Platforms: linkedin, x" in output
        assert "Time: 2026-01-30T10:00:00 (America/Chicago)" in output
        assert "Image: https://img.test/a.png" in output

    @pytest.mark.asyncio
    async def test_result(self, mock_console: Console, basic_config):
        basic_config["text"] = {"linkedin": "L" * 70, "x": "Short"}
        client = AsyncMock()
        client.schedule_post.return_value = {"result": {"id": 999}}
        post_request, brand = await prepare_post_request(client, validate(basic_config).value)
        outcome = await submit_post(client, post_request, brand)

        show_schedule_result(mock_console, outcome)
        output = mock_console.file.getvalue()

        assert "Post scheduled successfully!" in output
        assert "Post ID: 999" in output
        assert 'linkedin: "' + "L" * 60 + '..."' in output
        assert 'x: "Short"' in output
