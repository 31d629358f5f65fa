"""Platform name <-> network code mapping."""

from __future__ import annotations

from typing import Iterable

from .api.errors import InputValidationError
from .constants.platforms import (
    NETWORK_DISPLAY_NAMES,
    PLATFORM_ALIASES,
    PLATFORM_CODES,
)

# Reverse mapping uses canonical names only, so TW -> "x" rather than "twitter".
_CODE_TO_NAME: dict[str, str] = {
    code: name for name, code in PLATFORM_CODES.items() if name not in PLATFORM_ALIASES
}


def to_code(name: str, allowed: Iterable[str] | None = None) -> str:
    """Translate a platform name to its network code.

    Args:
        name: Platform name, any case (e.g. 'LinkedIn', 'x')
        allowed: Optional subset of names accepted by the caller

    Returns:
        Network code like 'IN'

    Raises:
        InputValidationError: If the name is not a supported platform
    """
    valid = list(allowed) if allowed is not None else supported_platforms()
    key = name.strip().lower()
    if key not in valid or key not in PLATFORM_CODES:
        raise InputValidationError(
            f"Unknown platform: {name}",
            {"valid_platforms": ", ".join(valid)},
        )
    return PLATFORM_CODES[key]


def to_name(code: str) -> str:
    """Translate a network code to its platform name, echoing unknown codes."""
    return _CODE_TO_NAME.get(code, code)


def display_name(code: str) -> str:
    """Human label for a network code ('TW' -> 'X/Twitter'), echoing unknown codes."""
    return NETWORK_DISPLAY_NAMES.get(code, code)


def supported_platforms() -> list[str]:
    """All platform names accepted by to_code, aliases included."""
    return list(PLATFORM_CODES)
