"""Exceptions raised by the credential resolver, API client and commands."""

from __future__ import annotations


class MetricoolError(Exception):
    """Base exception for metricool-cli errors."""

    pass


class CredentialsMissingError(MetricoolError):
    """Token or user id still missing after every credential source."""

    def __init__(self, missing: list[str]):
        super().__init__(f"Missing Metricool credentials: {', '.join(missing)}")
        self.missing = missing


class InputValidationError(MetricoolError):
    """Invalid user input: unknown platform, missing field, malformed JSON."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class NetworkError(MetricoolError):
    """Transport-level failure (DNS, refused or reset connection, timeout)."""

    pass


class MetricoolAPIError(MetricoolError):
    """Non-2xx response from the Metricool API."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Metricool API error {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class EmptyResultError(MetricoolError):
    """Auto-discovery found no brands on the account."""

    pass
