"""Stateless service for best-time analytics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ...api.client import MetricoolClient
from ...api.envelope import unwrap_envelope
from ...api.models import Brand
from ..core.session import resolve_blog_id
from .validators import BestTimeRequest


@dataclass(frozen=True)
class BestTimeReport:
    """Best-time analytics for one network of a brand."""

    platform: str
    network: str
    blog_id: Any
    data: Any
    brand: Optional[Brand] = None


async def fetch_best_time(client: MetricoolClient, request: BestTimeRequest) -> BestTimeReport:
    """Fetch best-time analytics, auto-discovering the brand if needed.

    Discovery (when no blog id is given) completes before the analytics call.

    Raises:
        EmptyResultError: If no blog id is given and the account has no brands
        MetricoolAPIError, NetworkError: On request failures
    """
    blog_id, brand = await resolve_blog_id(client, request.blog_id)
    payload = await client.get_best_time(blog_id, request.network)

    return BestTimeReport(
        platform=request.platform,
        network=request.network,
        blog_id=blog_id,
        data=unwrap_envelope(payload),
        brand=brand,
    )
