"""Stateless service for scheduling posts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ...api.client import MetricoolClient
from ...api.models import Brand, PostRequest
from ..core.session import resolve_blog_id
from .validators import ScheduleDraft


@dataclass(frozen=True)
class ScheduleOutcome:
    """Result of a schedule request."""

    request: PostRequest
    response: Any
    post_id: Any = None
    brand: Optional[Brand] = None


def build_post_request(draft: ScheduleDraft, blog_id: int) -> PostRequest:
    """Build the outbound request for a validated draft.

    Pure function - no side effects.
    """
    return PostRequest(
        blog_id=int(blog_id),
        date=draft.date,
        timezone=draft.timezone,
        entries=draft.entries,
    )


def extract_post_id(response: Any) -> Any:
    """Read the new post id from ``result.id`` or ``id``, if present."""
    if not isinstance(response, dict):
        return None
    result = response.get("result")
    if isinstance(result, dict) and result.get("id"):
        return result["id"]
    return response.get("id")


async def prepare_post_request(
    client: MetricoolClient,
    draft: ScheduleDraft,
) -> Tuple[PostRequest, Optional[Brand]]:
    """Build the outbound request, auto-discovering the brand if the draft has none.

    Returns:
        Tuple of (request, discovered brand or None when the draft had a blog id)

    Raises:
        EmptyResultError: If no blog id is given and no usable brand is found
        MetricoolAPIError, NetworkError: On request failures
    """
    blog_id, brand = await resolve_blog_id(client, draft.blog_id)
    return build_post_request(draft, blog_id), brand


async def submit_post(
    client: MetricoolClient,
    post_request: PostRequest,
    brand: Optional[Brand] = None,
) -> ScheduleOutcome:
    """Send a prepared request to the scheduler.

    Raises:
        MetricoolAPIError, NetworkError: On request failures
    """
    response = await client.schedule_post(post_request)

    return ScheduleOutcome(
        request=post_request,
        response=response,
        post_id=extract_post_id(response),
        brand=brand,
    )
