"""Tool settings and config-file models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants.api import (
    API_BASE_URL,
    DEFAULT_DOTENV_PATH,
    DEFAULT_TIMEZONE,
    INTEGRATION_SOURCE,
    MOLTBOT_CONFIG_PATH,
)


class MetricoolSettings(BaseSettings):
    """Runtime settings, overridable with METRICOOL_* environment variables.

    Credentials are not part of these settings; they go through
    CredentialResolver so the fallback order is explicit.
    """

    model_config = SettingsConfigDict(env_prefix="METRICOOL_", extra="ignore")

    api_base_url: str = API_BASE_URL
    integration_source: str = INTEGRATION_SOURCE
    default_timezone: str = DEFAULT_TIMEZONE
    config_path: Path = MOLTBOT_CONFIG_PATH
    dotenv_path: Path = DEFAULT_DOTENV_PATH
    log_dir: Path = Path("logs")


class MoltbotEnvVars(BaseModel):
    """The ``env.vars`` block of the moltbot config file."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    METRICOOL_USER_TOKEN: str | None = None
    METRICOOL_USER_ID: str | None = None


class MoltbotEnv(BaseModel):
    model_config = ConfigDict(extra="ignore")

    vars: MoltbotEnvVars = Field(default_factory=MoltbotEnvVars)


class MoltbotConfig(BaseModel):
    """Shape of ``~/.moltbot/moltbot.json``; only the env block is read."""

    model_config = ConfigDict(extra="ignore")

    env: MoltbotEnv = Field(default_factory=MoltbotEnv)


def load_settings() -> MetricoolSettings:
    """Load settings from the environment."""
    return MetricoolSettings()
