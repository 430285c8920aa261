"""
Primitive request type definitions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class HttpMethod(str, Enum):
    """HTTP verbs an Elasticsearch endpoint can be called with."""
    GET = "GET"
    POST = "POST"
    HEAD = "HEAD"
    DELETE = "DELETE"
    PUT = "PUT"
    PATCH = "PATCH"


Body = Union[str, bytes, Dict[str, Any]]


@dataclass
class ElasticRequest:
    """
    A single call to an Elasticsearch endpoint.

    The url is relative to the node's base url and already contains
    the route parameters (e.g. "/myindex/mytype/_search").
    """
    url: str
    method: HttpMethod = HttpMethod.GET
    body: Optional[Body] = None
