"""Credential resolution for the Metricool API.

Credentials come from three sources, tried in order:

1. Process environment (METRICOOL_USER_TOKEN, METRICOOL_USER_ID)
2. The moltbot JSON config (``~/.moltbot/moltbot.json``, ``env.vars`` block)
3. A dotenv file (``.env`` in the working directory by default)

Each field is resolved on its own; the first non-empty value wins. A source
is only read while some field is still missing. Missing or malformed files
are skipped, so ``resolve()`` never raises.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import dotenv_values
from pydantic import ValidationError

from .api.errors import CredentialsMissingError
from .config import MoltbotConfig
from .constants.api import (
    DEFAULT_DOTENV_PATH,
    MOLTBOT_CONFIG_PATH,
    TOKEN_ENV_VAR,
    USER_ID_ENV_VAR,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """Resolved API credentials. Either field may be empty."""

    token: str | None = None
    user_id: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.token) and bool(self.user_id)

    def missing(self) -> list[str]:
        """Names of the variables that could not be resolved."""
        missing = []
        if not self.token:
            missing.append(TOKEN_ENV_VAR)
        if not self.user_id:
            missing.append(USER_ID_ENV_VAR)
        return missing

    def merge(self, token: str | None, user_id: str | None) -> "Credentials":
        """Fill only the fields that are still empty."""
        return Credentials(
            token=self.token or _clean(token),
            user_id=self.user_id or _clean(user_id),
        )


class CredentialResolver:
    """Resolves Credentials from environment, JSON config and dotenv file."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        config_path: Path | None = None,
        dotenv_path: Path | None = None,
    ):
        self.environ = os.environ if environ is None else environ
        self.config_path = config_path or MOLTBOT_CONFIG_PATH
        self.dotenv_path = dotenv_path or DEFAULT_DOTENV_PATH

    def resolve(self) -> Credentials:
        """Resolve credentials, stopping at the first source that completes them."""
        credentials = Credentials().merge(
            self.environ.get(TOKEN_ENV_VAR),
            self.environ.get(USER_ID_ENV_VAR),
        )
        if credentials.is_complete:
            return credentials

        credentials = credentials.merge(*self._from_config_file())
        if credentials.is_complete:
            return credentials

        return credentials.merge(*self._from_dotenv())

    def require(self) -> Credentials:
        """Resolve credentials and fail if either field is missing.

        Raises:
            CredentialsMissingError: If token or user id is still empty
        """
        credentials = self.resolve()
        if not credentials.is_complete:
            raise CredentialsMissingError(credentials.missing())
        return credentials

    def _from_config_file(self) -> tuple[str | None, str | None]:
        try:
            with open(self.config_path, encoding="utf-8") as f:
                config = MoltbotConfig.model_validate(json.load(f))
        except (OSError, ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            logger.debug(f"Skipping config file {self.config_path}: {e}")
            return None, None

        env_vars = config.env.vars
        return env_vars.METRICOOL_USER_TOKEN, env_vars.METRICOOL_USER_ID

    def _from_dotenv(self) -> tuple[str | None, str | None]:
        if not Path(self.dotenv_path).is_file():
            return None, None
        try:
            values = dotenv_values(self.dotenv_path, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Skipping dotenv file {self.dotenv_path}: {e}")
            return None, None

        return values.get(TOKEN_ENV_VAR), values.get(USER_ID_ENV_VAR)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None
