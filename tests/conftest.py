"""
Shared test configuration and fixtures.
"""

import io
import json
from unittest.mock import AsyncMock

import httpx
import pytest

from alphavantage.infrastructure.http import APIRequestBuilder

TEST_API_KEY = "test_api_key_12345"


class MockResponse:
    """Mock httpx response exposing what the transport reads"""

    def __init__(self, json_data=None, status_code=200, content=None):
        self.status_code = status_code
        if content is None:
            content = json.dumps(json_data).encode("utf-8") if json_data is not None else b""
        self.content = content


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for testing"""
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    def respond_with(json_data=None, status_code=200, content=None):
        mock_client.get.return_value = MockResponse(json_data, status_code, content)

    mock_client.respond_with = respond_with
    return mock_client


@pytest.fixture
def request_builder():
    return APIRequestBuilder(TEST_API_KEY)


@pytest.fixture
def stream():
    """Turn a JSON document into the byte stream the parsers consume"""

    def make(document):
        return io.BytesIO(json.dumps(document).encode("utf-8"))

    return make


def sent_params(mock_client) -> dict:
    """Query parameters of the last GET issued through a mock client"""
    return dict(mock_client.get.call_args.kwargs["params"])
