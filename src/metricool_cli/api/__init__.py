"""Metricool API access: client, models, envelope helpers and errors."""

from .client import MetricoolClient
from .discovery import discover_default_account
from .envelope import unwrap_envelope, unwrap_sequence
from .errors import (
    CredentialsMissingError,
    EmptyResultError,
    InputValidationError,
    MetricoolAPIError,
    MetricoolError,
    NetworkError,
)
from .models import Brand, MediaRef, PostEntry, PostRequest, ScheduledPost

__all__ = [
    "MetricoolClient",
    "discover_default_account",
    "unwrap_envelope",
    "unwrap_sequence",
    "CredentialsMissingError",
    "EmptyResultError",
    "InputValidationError",
    "MetricoolAPIError",
    "MetricoolError",
    "NetworkError",
    "Brand",
    "MediaRef",
    "PostEntry",
    "PostRequest",
    "ScheduledPost",
]
