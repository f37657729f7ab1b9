"""Test fixtures."""

from .mock_responses import MockSearchResponses
from .transport import API_URL, RecordingTransport

__all__ = [
    "API_URL",
    "MockSearchResponses",
    "RecordingTransport",
]
