"""Schedule-specific validators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import ValidationError

from ...api.models import MediaRef, PostEntry
from ...constants.platforms import PLATFORM_CODES
from ..core.parsers import parse_schedule_datetime
from ..core.types import Result, Success, Failure
from ..core.validators import validate_blog_id, validate_platform
from .params import ScheduleConfig, ScheduleParams


@dataclass(frozen=True)
class ScheduleDraft:
    """Validated schedule request, still missing the blog id when auto-detected."""

    platforms: tuple[str, ...]
    entries: tuple[PostEntry, ...]
    date: str
    timezone: str
    image_url: Optional[str]
    blog_id: Optional[int]


def resolve_platform_text(
    text: Union[str, dict[str, str]],
    platform: str,
) -> Optional[str]:
    """Pick the text for one platform.

    Pure function - no side effects.

    Lookup order for a per-platform mapping (keys are case-insensitive):
    1. the platform's own key ('x')
    2. any key naming the same network ('twitter' for 'x')
    3. 'default'

    Returns:
        The text, or None when the mapping has no entry for the platform
    """
    if isinstance(text, str):
        return text

    by_key = {key.strip().lower(): value for key, value in text.items()}
    if by_key.get(platform):
        return by_key[platform]

    code = PLATFORM_CODES.get(platform)
    for key, value in by_key.items():
        if value and PLATFORM_CODES.get(key) == code:
            return value

    return by_key.get("default") or None


def parse_schedule_config(config_json: str) -> Result[ScheduleConfig]:
    """Parse the JSON config argument.

    Pure function - no side effects.
    """
    try:
        return Success(ScheduleConfig.model_validate_json(config_json))
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        if first.get("type") == "json_invalid":
            return Failure("Invalid JSON config", {"hint": "Pass the config as a single-quoted JSON object"})
        location = ".".join(str(part) for part in first.get("loc", ()))
        return Failure(
            "Invalid JSON config",
            {"field": location or "config", "problem": first.get("msg", str(e))},
        )


def validate_schedule_params(
    params: ScheduleParams,
    default_timezone: str,
) -> Result[ScheduleDraft]:
    """Validate the schedule config and build per-platform entries.

    Returns Result with the draft if valid, or Failure with error.
    """
    config_result = parse_schedule_config(params.config_json)
    if isinstance(config_result, Failure):
        return config_result
    config = config_result.value

    if not config.platforms:
        return Failure("No platforms specified", {"hint": "Add \"platforms\": [\"linkedin\", \"x\", ...]"})

    if not config.text:
        return Failure("No text specified", {"hint": "Add \"text\": \"...\" or a per-platform mapping"})

    if not config.scheduled_for:
        return Failure("No datetime specified", {"hint": "Add \"datetime\": \"2026-01-30T10:00:00\""})

    try:
        date = parse_schedule_datetime(config.scheduled_for)
    except ValueError as e:
        return Failure(str(e))

    blog_result = validate_blog_id(config.blog_id)
    if isinstance(blog_result, Failure):
        return blog_result

    media: tuple[MediaRef, ...] = ()
    if config.image_url:
        media = (MediaRef(type="IMAGE", url=config.image_url),)

    platforms: list[str] = []
    entries: list[PostEntry] = []
    seen_codes: set[str] = set()

    for raw_platform in config.platforms:
        platform = raw_platform.strip().lower()
        code_result = validate_platform(platform)
        if isinstance(code_result, Failure):
            return code_result
        code = code_result.value

        # 'x' and 'twitter' share a network; post once
        if code in seen_codes:
            continue
        seen_codes.add(code)

        post_text = resolve_platform_text(config.text, platform)
        if not post_text:
            return Failure(
                f"No text for platform: {platform}",
                {"hint": f"Add a \"{platform}\" or \"default\" entry to \"text\""},
            )

        platforms.append(platform)
        entries.append(PostEntry(network=code, text=post_text, media=media))

    return Success(ScheduleDraft(
        platforms=tuple(platforms),
        entries=tuple(entries),
        date=date,
        timezone=config.timezone or default_timezone,
        image_url=config.image_url,
        blog_id=blog_result.value,
    ))
