"""Global constants package for metricool-cli.

PACKAGE STRUCTURE:
-----------------
- api.py       : Remote API host, headers, credential variable names, file paths
- limits.py    : Display limits and default date ranges
- platforms.py : Network codes and platform names

USAGE EXAMPLES:
--------------
    from metricool_cli.constants import API_BASE_URL, AUTH_HEADER
    from metricool_cli.constants import PLATFORM_CODES, BEST_TIME_PLATFORMS
"""

from .api import (
    API_BASE_URL,
    AUTH_HEADER,
    DEFAULT_DOTENV_PATH,
    DEFAULT_TIMEZONE,
    INTEGRATION_SOURCE,
    MOLTBOT_CONFIG_PATH,
    TOKEN_ENV_VAR,
    USER_ID_ENV_VAR,
)
from .limits import (
    BEST_TIME_TOP_N,
    DEFAULT_RANGE_DAYS,
    SCHEDULED_PREVIEW_LENGTH,
    SCHEDULE_PREVIEW_LENGTH,
)
from .platforms import (
    BEST_TIME_PLATFORMS,
    NETWORK_DISPLAY_NAMES,
    PLATFORM_CODES,
)

__all__ = [
    # API
    "API_BASE_URL",
    "AUTH_HEADER",
    "DEFAULT_DOTENV_PATH",
    "DEFAULT_TIMEZONE",
    "INTEGRATION_SOURCE",
    "MOLTBOT_CONFIG_PATH",
    "TOKEN_ENV_VAR",
    "USER_ID_ENV_VAR",
    # Limits
    "BEST_TIME_TOP_N",
    "DEFAULT_RANGE_DAYS",
    "SCHEDULED_PREVIEW_LENGTH",
    "SCHEDULE_PREVIEW_LENGTH",
    # Platforms
    "BEST_TIME_PLATFORMS",
    "NETWORK_DISPLAY_NAMES",
    "PLATFORM_CODES",
]
