"""
Unit tests for endpoint request descriptors.
"""

import pytest

from es_types import (
    DeleteRequest,
    ElasticRequest,
    GetRequest,
    HttpMethod,
    IndexRequest,
    IndicesExistsRequest,
    PingRequest,
    SearchRequest,
    SimpleSearchRequest,
    UpdateRequest,
    request_for,
)


class TestEndpoints:
    """Test cases for the endpoint catalog."""

    def test_ping(self):
        req = PingRequest.new()

        assert req.url == "/"
        assert req.method == HttpMethod.HEAD
        assert req.body is None

    def test_simple_search_routes(self):
        assert SimpleSearchRequest.new().url == "/_search"
        assert SimpleSearchRequest.for_index("myindex").url == "/myindex/_search"
        assert SimpleSearchRequest.for_index_ty("myindex", "mytype").url == "/myindex/mytype/_search"
        assert SimpleSearchRequest.new().method == HttpMethod.GET

    def test_search_carries_body(self):
        body = {"query": {"match_all": {}}}

        req = SearchRequest.for_index_ty("myindex", "mytype", body)

        assert req.url == "/myindex/mytype/_search"
        assert req.method == HttpMethod.POST
        assert req.body == body

    def test_document_routes(self):
        assert GetRequest.for_index_ty_id("i", "t", "1").url == "/i/t/1"
        assert IndexRequest.for_index_ty("i", "t", {}).method == HttpMethod.POST
        assert IndexRequest.for_index_ty_id("i", "t", "1", {}).method == HttpMethod.PUT
        assert UpdateRequest.for_index_ty_id("i", "t", "1", {}).url == "/i/t/1/_update"
        assert DeleteRequest.for_index_ty_id("i", "t", "1").method == HttpMethod.DELETE
        assert DeleteRequest.for_index("i").url == "/i"

    def test_indices_exists(self):
        req = IndicesExistsRequest.for_index("myindex")

        assert req.url == "/myindex"
        assert req.method == HttpMethod.HEAD

    def test_descriptors_are_elastic_requests(self):
        assert isinstance(PingRequest.new(), ElasticRequest)


class TestRequestFor:
    """Test cases for ad hoc request descriptors."""

    def test_method_is_case_insensitive(self):
        req = request_for("patch", "/_cluster/settings", {"persistent": {}})

        assert req.method == HttpMethod.PATCH
        assert req.url == "/_cluster/settings"

    def test_unknown_method_is_rejected(self):
        with pytest.raises(ValueError):
            request_for("TRACE", "/")
