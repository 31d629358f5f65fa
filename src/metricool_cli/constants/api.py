"""Remote API constants.

These values describe the Metricool REST API as it is called by every
command: host, auth header, the integration tag attached to each request,
and where credentials are looked up.

MODIFICATION GUIDE:
------------------
- API_BASE_URL / INTEGRATION_SOURCE can be overridden at runtime through
  MetricoolSettings (METRICOOL_API_BASE_URL, METRICOOL_INTEGRATION_SOURCE).
- The credential variable names are part of the public interface; renaming
  them breaks existing setups.
"""

from pathlib import Path
from typing import Final

# =============================================================================
# REMOTE API
# =============================================================================

API_BASE_URL: Final[str] = "https://app.metricool.com/api/v2"
"""Base URL for all Metricool v2 endpoints."""

AUTH_HEADER: Final[str] = "X-Mc-Auth"
"""Header carrying the user token."""

INTEGRATION_SOURCE: Final[str] = "MCP"
"""Integration tag sent as ``integrationSource`` on every request."""

DEFAULT_TIMEZONE: Final[str] = "America/Chicago"
"""Timezone used for scheduling and listing when none is given."""

# Endpoint paths (relative to API_BASE_URL)
BRANDS_PATH: Final[str] = "/settings/brands"
BEST_TIME_PATH: Final[str] = "/analytics/best-time"
SCHEDULER_POSTS_PATH: Final[str] = "/scheduler/posts"


# =============================================================================
# CREDENTIALS
# =============================================================================

TOKEN_ENV_VAR: Final[str] = "METRICOOL_USER_TOKEN"
"""Environment variable holding the API token."""

USER_ID_ENV_VAR: Final[str] = "METRICOOL_USER_ID"
"""Environment variable holding the account user id."""

MOLTBOT_CONFIG_PATH: Final[Path] = Path.home() / ".moltbot" / "moltbot.json"
"""JSON config file consulted when the environment has no credentials."""

DEFAULT_DOTENV_PATH: Final[Path] = Path(".env")
"""Dotenv file consulted last, relative to the working directory."""
