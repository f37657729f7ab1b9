"""Pytest configuration and fixtures."""

from typing import Any, Callable

import pytest

from google_search_api.services.search.client import GoogleSearchClient
from tests.fixtures import API_URL, MockSearchResponses, RecordingTransport


@pytest.fixture
def one_item_body() -> dict:
    return MockSearchResponses.one_item()


@pytest.fixture
def empty_body() -> dict:
    return MockSearchResponses.no_items()


@pytest.fixture
def make_client() -> Callable[..., tuple[GoogleSearchClient, RecordingTransport]]:
    """Build a configured client wired to a RecordingTransport."""

    def _make(status_code: int = 200, body: Any = None, **kwargs):
        transport = RecordingTransport(status_code=status_code, body=body)
        options = {
            "engine_id": "engine-123",
            "api_key": "secret-key",
            "api_url": API_URL,
        }
        options.update(kwargs)
        return GoogleSearchClient(transport=transport, **options), transport

    return _make
