"""Stateless service for listing scheduled posts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from ...api.client import MetricoolClient
from ...api.envelope import unwrap_sequence
from ...api.models import Brand, ScheduledPost
from ..core.session import resolve_blog_id
from .validators import ScheduledListRequest


@dataclass(frozen=True)
class ScheduledListing:
    """Scheduled posts in a date range."""

    start: str
    end: str
    blog_id: Any
    posts: List[ScheduledPost]
    records: List[Any]
    brand: Optional[Brand] = None


async def fetch_scheduled_posts(
    client: MetricoolClient,
    request: ScheduledListRequest,
    timezone: str,
) -> ScheduledListing:
    """List scheduled posts, auto-discovering the brand if needed.

    Makes one discovery call (only without a blog id) and then one
    listing call, strictly in that order.

    Raises:
        EmptyResultError: If no blog id is given and the account has no brands
        MetricoolAPIError, NetworkError: On request failures
    """
    blog_id, brand = await resolve_blog_id(client, request.blog_id)
    payload = await client.list_scheduled_posts(blog_id, request.start, request.end, timezone)

    records = unwrap_sequence(payload)
    posts = [ScheduledPost.from_api(record) for record in records if isinstance(record, dict)]

    return ScheduledListing(
        start=request.start,
        end=request.end,
        blog_id=blog_id,
        posts=posts,
        records=records,
        brand=brand,
    )
