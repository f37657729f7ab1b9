"""Core domain layer - exceptions and response schemas."""

from .exceptions import (
    ConfigurationError,
    GoogleSearchApiError,
    InvalidStateError,
    RequestError,
)

__all__ = [
    "GoogleSearchApiError",
    "ConfigurationError",
    "RequestError",
    "InvalidStateError",
]
