"""
Request types for the Elasticsearch HTTP layer.
"""

from .primitives import (
    Body,
    ElasticRequest,
    HttpMethod,
)

from .endpoints import (
    PingRequest,
    SimpleSearchRequest,
    SearchRequest,
    GetRequest,
    IndexRequest,
    UpdateRequest,
    DeleteRequest,
    IndicesExistsRequest,
    request_for,
)

__all__ = [
    # Primitives
    "Body",
    "ElasticRequest",
    "HttpMethod",
    # Endpoints
    "PingRequest",
    "SimpleSearchRequest",
    "SearchRequest",
    "GetRequest",
    "IndexRequest",
    "UpdateRequest",
    "DeleteRequest",
    "IndicesExistsRequest",
    "request_for",
]
