"""
Request descriptors for commonly used Elasticsearch endpoints.

Each descriptor only accepts a valid combination of route parameters
and carries the verb the endpoint is called with. Route parameters are
joined as given; callers supply well-formed index, type and id values.
"""

from dataclasses import dataclass
from typing import Optional

from .primitives import Body, ElasticRequest, HttpMethod


@dataclass
class PingRequest(ElasticRequest):
    """HEAD /"""

    @classmethod
    def new(cls) -> "PingRequest":
        return cls(url="/", method=HttpMethod.HEAD)


@dataclass
class SimpleSearchRequest(ElasticRequest):
    """GET search without a body, usually combined with the `q` url param."""

    @classmethod
    def new(cls) -> "SimpleSearchRequest":
        return cls(url="/_search", method=HttpMethod.GET)

    @classmethod
    def for_index(cls, index: str) -> "SimpleSearchRequest":
        return cls(url=f"/{index}/_search", method=HttpMethod.GET)

    @classmethod
    def for_index_ty(cls, index: str, ty: str) -> "SimpleSearchRequest":
        return cls(url=f"/{index}/{ty}/_search", method=HttpMethod.GET)


@dataclass
class SearchRequest(ElasticRequest):
    """POST search with a Query DSL body."""

    @classmethod
    def new(cls, body: Body) -> "SearchRequest":
        return cls(url="/_search", method=HttpMethod.POST, body=body)

    @classmethod
    def for_index(cls, index: str, body: Body) -> "SearchRequest":
        return cls(url=f"/{index}/_search", method=HttpMethod.POST, body=body)

    @classmethod
    def for_index_ty(cls, index: str, ty: str, body: Body) -> "SearchRequest":
        return cls(url=f"/{index}/{ty}/_search", method=HttpMethod.POST, body=body)


@dataclass
class GetRequest(ElasticRequest):
    @classmethod
    def for_index_ty_id(cls, index: str, ty: str, id: str) -> "GetRequest":
        return cls(url=f"/{index}/{ty}/{id}", method=HttpMethod.GET)


@dataclass
class IndexRequest(ElasticRequest):
    """
    Index a document.

    With an id the document is PUT at that id, without one it is POSTed
    and Elasticsearch generates the id.
    """

    @classmethod
    def for_index_ty(cls, index: str, ty: str, body: Body) -> "IndexRequest":
        return cls(url=f"/{index}/{ty}", method=HttpMethod.POST, body=body)

    @classmethod
    def for_index_ty_id(cls, index: str, ty: str, id: str, body: Body) -> "IndexRequest":
        return cls(url=f"/{index}/{ty}/{id}", method=HttpMethod.PUT, body=body)


@dataclass
class UpdateRequest(ElasticRequest):
    @classmethod
    def for_index_ty_id(cls, index: str, ty: str, id: str, body: Body) -> "UpdateRequest":
        return cls(url=f"/{index}/{ty}/{id}/_update", method=HttpMethod.POST, body=body)


@dataclass
class DeleteRequest(ElasticRequest):
    @classmethod
    def for_index(cls, index: str) -> "DeleteRequest":
        return cls(url=f"/{index}", method=HttpMethod.DELETE)

    @classmethod
    def for_index_ty_id(cls, index: str, ty: str, id: str) -> "DeleteRequest":
        return cls(url=f"/{index}/{ty}/{id}", method=HttpMethod.DELETE)


@dataclass
class IndicesExistsRequest(ElasticRequest):
    """HEAD /{index}, answers 200 or 404 with no body."""

    @classmethod
    def for_index(cls, index: str) -> "IndicesExistsRequest":
        return cls(url=f"/{index}", method=HttpMethod.HEAD)


def request_for(method: str, path: str, body: Optional[Body] = None) -> ElasticRequest:
    """
    Build a descriptor for an endpoint that has no dedicated type.

    Args:
        method: HTTP verb, case-insensitive
        path: Url path relative to the node, starting with "/"
        body: Optional request body

    Returns:
        ElasticRequest for the given verb and path
    """
    return ElasticRequest(url=path, method=HttpMethod(method.upper()), body=body)
