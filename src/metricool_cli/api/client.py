"""Metricool REST API client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..constants.api import (
    API_BASE_URL,
    AUTH_HEADER,
    BEST_TIME_PATH,
    BRANDS_PATH,
    INTEGRATION_SOURCE,
    SCHEDULER_POSTS_PATH,
)
from .errors import MetricoolAPIError, NetworkError
from .models import PostRequest

# File-only logger, handlers are attached by the CLI (see cli.app.setup_logging)
_api_logger = logging.getLogger("metricool_api")


class MetricoolClient:
    """Client for the Metricool v2 REST API.

    Every call opens its own connection and performs exactly one request:
    no pooling, no retries, transport-default timeout.

    All requests carry:
    - ``X-Mc-Auth`` header with the user token
    - ``userId`` and ``integrationSource`` query parameters
    """

    def __init__(
        self,
        token: str,
        user_id: str,
        base_url: str = API_BASE_URL,
        integration_source: str = INTEGRATION_SOURCE,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            token: Metricool user token
            user_id: Metricool account user id
            base_url: API base URL
            integration_source: Tag sent as ``integrationSource``
            transport: Optional httpx transport (used by tests)
        """
        self.token = token
        self.user_id = user_id
        self.base_url = base_url.rstrip("/")
        self.integration_source = integration_source
        self._transport = transport
        self._api_call_count = 0

    def _headers(self) -> dict[str, str]:
        return {
            AUTH_HEADER: self.token,
            "Content-Type": "application/json",
        }

    async def request(
        self,
        path: str,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        json_body: Any = None,
    ) -> Any:
        """Make a request to the Metricool API.

        Args:
            path: Endpoint path (e.g. '/settings/brands') or absolute URL
            method: HTTP method
            params: Extra query parameters
            json_body: JSON body for POST requests

        Returns:
            Parsed JSON, or the raw text when a 2xx body is not JSON

        Raises:
            MetricoolAPIError: On a non-2xx status
            NetworkError: On transport failures
        """
        self._api_call_count += 1
        url = path if path.startswith(("http://", "https://")) else f"{self.base_url}{path}"

        query = dict(params or {})
        query["userId"] = self.user_id
        query["integrationSource"] = self.integration_source

        log_params = {k: v for k, v in query.items() if k != "userId"}
        _api_logger.info(f"API CALL #{self._api_call_count} | {method.upper()} {path} | params: {log_params}")

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.request(
                    method.upper(),
                    url,
                    params=query,
                    headers=self._headers(),
                    json=json_body,
                )
        except httpx.TransportError as e:
            _api_logger.error(f"API CALL #{self._api_call_count} | NETWORK ERROR: {e!r}")
            raise NetworkError(f"Could not reach Metricool: {e}") from e

        body = response.text
        if not 200 <= response.status_code < 300:
            _api_logger.error(f"API CALL #{self._api_call_count} | HTTP {response.status_code}: {body[:500]}")
            raise MetricoolAPIError(response.status_code, body)

        _api_logger.info(f"API CALL #{self._api_call_count} | HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError:
            return body

    async def list_brands(self) -> Any:
        """GET the brands connected to the account."""
        return await self.request(BRANDS_PATH)

    async def get_best_time(self, blog_id: Any, network: str) -> Any:
        """GET best-time-to-post analytics for one network of a brand."""
        return await self.request(
            BEST_TIME_PATH,
            params={"blogId": blog_id, "network": network},
        )

    async def list_scheduled_posts(
        self,
        blog_id: Any,
        start: str,
        end: str,
        timezone: str,
    ) -> Any:
        """GET posts scheduled between two ``YYYY-MM-DD`` dates (inclusive)."""
        return await self.request(
            SCHEDULER_POSTS_PATH,
            params={
                "blogId": blog_id,
                "start": f"{start}T00:00:00",
                "end": f"{end}T23:59:59",
                "timezone": timezone,
                "extendedRange": "true",
            },
        )

    async def schedule_post(self, post_request: PostRequest) -> Any:
        """POST a new scheduled post."""
        return await self.request(
            SCHEDULER_POSTS_PATH,
            method="POST",
            params={"blogId": post_request.blog_id},
            json_body=post_request.to_payload(),
        )
