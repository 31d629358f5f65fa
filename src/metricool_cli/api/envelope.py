"""Response envelope unwrapping.

The Metricool API wraps payloads inconsistently across endpoints:
``{"result": {"data": ...}}``, ``{"data": ...}``, ``{"result": ...}`` or the
bare value. These helpers try each shape in a fixed order and never raise.
"""

from __future__ import annotations

from typing import Any

# Accessor paths tried in order; the first one yielding a list or dict wins.
ENVELOPE_PATHS: tuple[tuple[str, ...], ...] = (
    ("result", "data"),
    ("data",),
    ("result",),
)


def _walk(payload: Any, path: tuple[str, ...]) -> Any:
    value = payload
    for key in path:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def unwrap_envelope(payload: Any) -> Any:
    """Return the inner value of an API response.

    Pure function - no side effects.

    Args:
        payload: Parsed JSON (or raw text) returned by the client

    Returns:
        The first list/dict found along ENVELOPE_PATHS, else the payload itself
    """
    if isinstance(payload, dict):
        for path in ENVELOPE_PATHS:
            value = _walk(payload, path)
            if isinstance(value, (list, dict)):
                return value
    return payload


def unwrap_sequence(payload: Any) -> list[Any]:
    """Unwrap a response expected to hold a list of records.

    A single non-empty object is returned as a one-item list; anything
    else (raw text, null, ``{}``) becomes an empty list.
    """
    value = unwrap_envelope(payload)
    if isinstance(value, list):
        return value
    if isinstance(value, dict) and value:
        return [value]
    return []
