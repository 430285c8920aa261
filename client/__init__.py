"""
HTTP layer for the Elasticsearch REST API.
"""

from .params import RequestParams, DEFAULT_BASE_URL
from .url import build_url
from .method import build_method
from .request import build_body, build_request_args
from .sync import default, elastic_req
from .asynchronous import default_async, elastic_req_async

__all__ = [
    # Params
    "RequestParams",
    "DEFAULT_BASE_URL",
    # Request construction
    "build_url",
    "build_method",
    "build_body",
    "build_request_args",
    # Blocking client
    "default",
    "elastic_req",
    # Non-blocking client
    "default_async",
    "elastic_req_async",
]
