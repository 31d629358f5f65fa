"""Network codes used by the Metricool API.

The API identifies every social network by a short code (``IN`` for
LinkedIn, ``TW`` for X/Twitter, ...). Commands accept lowercase platform
names and translate them through ``PLATFORM_CODES``.
"""

from typing import Final

PLATFORM_CODES: Final[dict[str, str]] = {
    "linkedin": "IN",
    "x": "TW",
    "twitter": "TW",
    "bluesky": "BS",
    "threads": "TH",
    "instagram": "IG",
    "facebook": "FB",
    "tiktok": "TK",
    "pinterest": "PI",
    "youtube": "YT",
}
"""Platform name -> network code. ``twitter`` is an alias of ``x``."""

PLATFORM_ALIASES: Final[frozenset[str]] = frozenset({"twitter"})
"""Names that map to a code already owned by a canonical name."""

BEST_TIME_PLATFORMS: Final[tuple[str, ...]] = (
    "linkedin",
    "x",
    "twitter",
    "bluesky",
    "threads",
    "instagram",
    "facebook",
)
"""Platforms the best-time analytics endpoint supports."""

NETWORK_DISPLAY_NAMES: Final[dict[str, str]] = {
    "IN": "LinkedIn",
    "TW": "X/Twitter",
    "BS": "Bluesky",
    "TH": "Threads",
    "IG": "Instagram",
    "FB": "Facebook",
    "TK": "TikTok",
    "PI": "Pinterest",
    "YT": "YouTube",
}
"""Network code -> label shown in listings."""
