"""Response schemas."""

from .search import SearchInformation, SearchResponse, SearchResult

__all__ = [
    "SearchInformation",
    "SearchResponse",
    "SearchResult",
]
