"""Stateless service for brand listing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from ...api.client import MetricoolClient
from ...api.envelope import unwrap_sequence
from ...api.models import Brand


@dataclass(frozen=True)
class BrandListing:
    """Brands on the account plus the unwrapped records for JSON output."""

    brands: List[Brand]
    records: List[Any]


async def fetch_brands(client: MetricoolClient) -> BrandListing:
    """List the brands connected to the account.

    Raises:
        MetricoolAPIError, NetworkError: On request failures
    """
    records = unwrap_sequence(await client.list_brands())
    brands = [Brand.from_api(record) for record in records if isinstance(record, dict)]
    return BrandListing(brands=brands, records=records)
