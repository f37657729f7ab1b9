"""Custom exceptions for the search client."""

from typing import Optional


class GoogleSearchApiError(Exception):
    """Base exception for all search client errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(GoogleSearchApiError):
    """A required credential (engine id or API key) is missing."""

    pass


class RequestError(GoogleSearchApiError):
    """Transport failure, non-200 status, or an undecodable response body."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class InvalidStateError(GoogleSearchApiError):
    """Accessor called before a response was stored."""

    pass
