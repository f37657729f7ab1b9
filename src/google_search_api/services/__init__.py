"""External service integrations."""

from .search import GoogleSearchClient

__all__ = [
    "GoogleSearchClient",
]
