"""Parameters for the schedule command.

The command takes a single JSON argument:

    {
      "platforms": ["linkedin", "x"],
      "text": "Post text" | {"linkedin": "...", "x": "...", "default": "..."},
      "datetime": "2026-01-30T10:00:00",
      "timezone": "America/Chicago",
      "imageUrl": "https://...",
      "blogId": "12345"
    }
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ScheduleConfig(BaseModel):
    """Shape of the JSON config argument. Only types are checked here."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    platforms: list[str] = Field(default_factory=list)
    text: Optional[Union[str, dict[str, str]]] = None
    scheduled_for: Optional[str] = Field(None, alias="datetime")
    timezone: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    blog_id: Optional[str] = Field(None, alias="blogId")


@dataclass(frozen=True)
class ScheduleParams:
    """Immutable parameters for scheduling a post."""

    config_json: str
    json_output: bool

    @classmethod
    def from_cli(
        cls,
        config: str,
        json_output: bool = False,
        **kwargs,
    ) -> "ScheduleParams":
        """Create from CLI arguments."""
        return cls(config_json=config, json_output=json_output)
