"""Client for the Google Custom Search JSON API."""

from .config import Settings, get_settings
from .core.exceptions import (
    ConfigurationError,
    GoogleSearchApiError,
    InvalidStateError,
    RequestError,
)
from .core.schemas import SearchInformation, SearchResponse, SearchResult
from .observability import setup_logging
from .services.search import GoogleSearchClient

__all__ = [
    "GoogleSearchClient",
    "Settings",
    "get_settings",
    "setup_logging",
    "GoogleSearchApiError",
    "ConfigurationError",
    "RequestError",
    "InvalidStateError",
    "SearchResponse",
    "SearchResult",
    "SearchInformation",
]
