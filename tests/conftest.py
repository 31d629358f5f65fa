"""Shared test fixtures and configuration.

Provides consoles, API clients backed by httpx.MockTransport and an
isolated environment for CLI runs (no real credentials, files or network).
"""

from __future__ import annotations

import sys
from io import StringIO
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.console import Console

from metricool_cli.api.client import MetricoolClient


@pytest.fixture
def mock_console() -> Console:
    """Create a Console that captures output without ANSI codes."""
    return Console(file=StringIO(), force_terminal=False, no_color=True, width=120)


@pytest.fixture
def brand_records() -> list[dict]:
    """Three brand records as returned by the brand-listing endpoint."""
    return [
        {
            "id": 111,
            "label": "Acme",
            "networksData": {"facebookData": {}, "instagramData": {}, "webData": {}},
        },
        {"id": 222, "label": "Globex"},
        {"blogId": 333, "name": "Initech"},
    ]


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], MetricoolClient]:
    """Factory building a MetricoolClient whose requests go to a handler.

    Usage:
        def test_something(make_client):
            client = make_client(lambda request: httpx.Response(200, json={}))
    """
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> MetricoolClient:
        return MetricoolClient(
            token="test-token",
            user_id="42",
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest.fixture
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Isolate CLI runs: env credentials set, config/dotenv files absent, logs in tmp.

    Returns:
        The temporary directory used for settings paths.
    """
    monkeypatch.setenv("METRICOOL_USER_TOKEN", "test-token")
    monkeypatch.setenv("METRICOOL_USER_ID", "42")
    monkeypatch.setenv("METRICOOL_CONFIG_PATH", str(tmp_path / "missing-moltbot.json"))
    monkeypatch.setenv("METRICOOL_DOTENV_PATH", str(tmp_path / "missing.env"))
    monkeypatch.setenv("METRICOOL_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("METRICOOL_DEFAULT_TIMEZONE", raising=False)
    monkeypatch.delenv("METRICOOL_API_BASE_URL", raising=False)
    return tmp_path


@pytest.fixture
def fake_api(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    """Route every client built by the CLI to an in-memory API.

    Set ``fake_api.responses[(method, path)] = (status, body)``; unknown
    routes answer 404. Sent requests are recorded in ``fake_api.requests``.
    """
    requests: list[httpx.Request] = []
    responses: dict[tuple[str, str], tuple[int, Any]] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        status, body = responses.get(
            (request.method, request.url.path),
            (404, {"error": "not found"}),
        )
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    transport = httpx.MockTransport(handler)

    def client_factory(**kwargs: Any) -> MetricoolClient:
        return MetricoolClient(transport=transport, **kwargs)

    monkeypatch.setattr("metricool_cli.cli.core.session.MetricoolClient", client_factory)
    return SimpleNamespace(requests=requests, responses=responses)
