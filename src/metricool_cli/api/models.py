"""Data models for Metricool API payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Brand:
    """A brand (blog) connected to the Metricool account."""

    id: Any
    label: str
    networks: tuple[str, ...] = ()
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_api(cls, data: dict) -> "Brand":
        """Build from a brand-listing record, tolerating field name drift."""
        label = data.get("label") or data.get("name") or data.get("brandName") or "Unknown"

        networks: list[str] = []
        networks_data = data.get("networksData")
        if isinstance(networks_data, dict):
            for key in networks_data:
                name = key.replace("Data", "")
                if name == "web":
                    continue
                networks.append(name[:1].upper() + name[1:])

        return cls(
            id=data.get("id") or data.get("blogId"),
            label=str(label),
            networks=tuple(networks),
            raw=data,
        )


@dataclass(frozen=True)
class MediaRef:
    """Media attached to a post entry."""

    type: str
    url: str

    def to_dict(self) -> dict:
        return {"type": self.type, "url": self.url}


@dataclass(frozen=True)
class PostEntry:
    """Per-network part of a post."""

    network: str
    text: str
    media: tuple[MediaRef, ...] = ()


@dataclass(frozen=True)
class ScheduledPost:
    """A post scheduled on the remote service."""

    id: Any
    scheduled_at: str | None
    entries: tuple[PostEntry, ...]
    media: tuple[MediaRef, ...] = ()
    text: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "ScheduledPost":
        """Build from a scheduler listing record.

        Records either carry a ``posts`` list of per-network entries or are
        themselves a single entry.
        """
        raw_entries = data.get("posts")
        if not isinstance(raw_entries, list) or not raw_entries:
            raw_entries = [data]

        entries = []
        media: list[MediaRef] = []
        for entry in raw_entries:
            if not isinstance(entry, dict):
                continue
            entry_media = _parse_media(entry.get("media"))
            media.extend(m for m in entry_media if m not in media)
            entries.append(PostEntry(
                network=str(entry.get("network") or ""),
                text=str(entry.get("text") or ""),
                media=entry_media,
            ))
        media.extend(m for m in _parse_media(data.get("media")) if m not in media)

        text = data.get("text") or (entries[0].text if entries else "")

        return cls(
            id=data.get("id"),
            scheduled_at=_parse_date_field(data.get("date") or data.get("scheduledDate")),
            entries=tuple(entries),
            media=tuple(media),
            text=str(text or ""),
        )

    @property
    def networks(self) -> list[str]:
        return [entry.network for entry in self.entries]

    def scheduled_datetime(self) -> datetime | None:
        """Parse scheduled_at, or None when absent or not ISO-8601."""
        if not self.scheduled_at:
            return None
        try:
            return datetime.fromisoformat(self.scheduled_at)
        except ValueError:
            return None


@dataclass(frozen=True)
class PostRequest:
    """Outbound schedule request, built fresh per ``schedule`` invocation."""

    blog_id: int
    date: str
    timezone: str
    entries: tuple[PostEntry, ...]

    def to_payload(self) -> dict:
        """Convert to the JSON body expected by the scheduler endpoint."""
        posts = []
        for entry in self.entries:
            post: dict[str, Any] = {
                "network": entry.network,
                "text": entry.text,
                "blogId": self.blog_id,
            }
            if entry.media:
                post["media"] = [m.to_dict() for m in entry.media]
            posts.append(post)

        return {
            "blogId": self.blog_id,
            "date": self.date,
            "timezone": self.timezone,
            "posts": posts,
        }


def _parse_media(value: Any) -> tuple[MediaRef, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(
        MediaRef(type=str(item.get("type") or ""), url=str(item.get("url") or ""))
        for item in value
        if isinstance(item, dict) and item.get("url")
    )


def _parse_date_field(value: Any) -> str | None:
    # The scheduler returns either a plain string or {"dateTime": ..., "timezone": ...}
    if isinstance(value, dict):
        value = value.get("dateTime")
    if value is None:
        return None
    return str(value)
