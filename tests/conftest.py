"""
Pytest configuration and fixtures for the Elasticsearch HTTP layer tests.
"""

import pytest
import os
import sys
from typing import List

import httpx

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(__file__))
sys.path.insert(0, project_root)

from client import RequestParams


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def search_response_body():
    """Sample Elasticsearch search response."""
    return {
        "took": 5,
        "timed_out": False,
        "hits": {
            "total": {"value": 1},
            "hits": [
                {
                    "_index": "myindex",
                    "_id": "1",
                    "_source": {"title": "Test document"},
                }
            ],
        },
    }


@pytest.fixture
def mock_transport(sent_requests, search_response_body):
    """Transport answering every request with the sample search response."""
    def handler(request: httpx.Request) -> httpx.Response:
        sent_requests.append(request)
        if request.method == "HEAD":
            return httpx.Response(200)
        return httpx.Response(200, json=search_response_body)

    return httpx.MockTransport(handler)


@pytest.fixture
def sync_client(mock_transport):
    """Blocking httpx client backed by the mock transport."""
    with httpx.Client(transport=mock_transport) as client:
        yield client


@pytest.fixture
def eshost_params():
    """Params for a non-default node with a url param."""
    return RequestParams("http://eshost:9200").url_param("pretty", True)
