"""Default brand auto-discovery."""

from __future__ import annotations

from dataclasses import replace

from .client import MetricoolClient
from .envelope import unwrap_envelope
from .errors import EmptyResultError
from .models import Brand


async def discover_default_account(client: MetricoolClient) -> Brand:
    """Return the first brand on the account, with its id as an int.

    Used by commands when no ``--blog`` id is given. Nothing is cached;
    each call hits the brand-listing endpoint once.

    Raises:
        EmptyResultError: If the listing is not a non-empty list of brands,
            or the first brand has no numeric id
    """
    records = unwrap_envelope(await client.list_brands())
    if not isinstance(records, list):
        raise EmptyResultError("No brands found")

    brands = [record for record in records if isinstance(record, dict)]
    if not brands:
        raise EmptyResultError("No brands found")

    brand = Brand.from_api(brands[0])
    try:
        blog_id = int(str(brand.id).strip())
    except ValueError:
        raise EmptyResultError(f"First brand '{brand.label}' has no usable blog id") from None
    return replace(brand, id=blog_id)
