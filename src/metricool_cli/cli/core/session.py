"""Per-invocation setup shared by all commands: settings, credentials, client."""

from __future__ import annotations

from typing import Any

from ...api.client import MetricoolClient
from ...api.discovery import discover_default_account
from ...api.models import Brand
from ...config import MetricoolSettings, load_settings
from ...credentials import CredentialResolver


def create_client(settings: MetricoolSettings | None = None) -> MetricoolClient:
    """Resolve credentials and build an API client.

    Raises:
        CredentialsMissingError: If token or user id cannot be resolved
    """
    settings = settings or load_settings()
    resolver = CredentialResolver(
        config_path=settings.config_path,
        dotenv_path=settings.dotenv_path,
    )
    credentials = resolver.require()

    return MetricoolClient(
        token=credentials.token,
        user_id=credentials.user_id,
        base_url=settings.api_base_url,
        integration_source=settings.integration_source,
    )


async def resolve_blog_id(client: MetricoolClient, blog_id: Any) -> tuple[Any, Brand | None]:
    """Return the given blog id, or auto-discover the first brand.

    Returns:
        Tuple of (blog_id, discovered brand or None when blog_id was given)

    Raises:
        EmptyResultError: If discovery finds no brands
    """
    if blog_id is not None:
        return blog_id, None
    brand = await discover_default_account(client)
    return brand.id, brand
