"""
Unit tests for the blocking client.
"""

import json

import httpx
import pytest

from client import RequestParams, default, elastic_req
from es_types import IndexRequest, PingRequest, SimpleSearchRequest


class TestElasticReq:
    """Test cases for elastic_req."""

    def test_search_with_url_param(self, sync_client, sent_requests, eshost_params):
        req = SimpleSearchRequest.for_index_ty("myindex", "mytype")

        response = elastic_req(sync_client, eshost_params, req)

        assert response.status_code == 200
        assert len(sent_requests) == 1
        sent = sent_requests[0]
        assert sent.method == "GET"
        assert str(sent.url) == "http://eshost:9200/myindex/mytype/_search?pretty=true"
        assert sent.headers["Content-Type"] == "application/json"

    def test_ping(self, sync_client, sent_requests):
        response = elastic_req(sync_client, RequestParams.default(), PingRequest.new())

        assert response.status_code == 200
        assert sent_requests[0].method == "HEAD"
        assert str(sent_requests[0].url) == "http://localhost:9200/"

    def test_body_is_sent(self, sync_client, sent_requests):
        req = IndexRequest.for_index_ty_id("myindex", "mytype", "1", {"title": "Test"})

        elastic_req(sync_client, RequestParams.default(), req)

        sent = sent_requests[0]
        assert sent.method == "PUT"
        assert json.loads(sent.content) == {"title": "Test"}

    def test_response_is_returned_untouched(self, sync_client, search_response_body):
        req = SimpleSearchRequest.new()

        response = elastic_req(sync_client, RequestParams.default(), req)

        assert isinstance(response, httpx.Response)
        assert response.json() == search_response_body

    def test_error_status_is_not_raised(self):
        def handler(request):
            return httpx.Response(404, json={"error": "index_not_found_exception", "status": 404})

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            response = elastic_req(
                client,
                RequestParams.default(),
                SimpleSearchRequest.for_index("missing"),
            )

        assert response.status_code == 404
        assert response.json()["error"] == "index_not_found_exception"

    def test_transport_error_propagates(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(httpx.ConnectError):
                elastic_req(client, RequestParams.default(), PingRequest.new())


class TestDefault:
    """Test cases for the default client helper."""

    def test_default_returns_client_and_params(self):
        client, params = default()

        try:
            assert isinstance(client, httpx.Client)
            assert params == RequestParams.default()
        finally:
            client.close()

    def test_default_with_timeout(self):
        client, _ = default(timeout=5.0)

        try:
            assert client.timeout.read == 5.0
        finally:
            client.close()
