"""Google Custom Search service."""

from .client import GoogleSearchClient
from .query import build_query, merge_parameters

__all__ = [
    "GoogleSearchClient",
    "build_query",
    "merge_parameters",
]
