"""
Mapping from request verbs to the verbs httpx sends on the wire.
"""

from typing import Dict

from es_types.primitives import HttpMethod


_METHODS: Dict[HttpMethod, str] = {
    HttpMethod.GET: "GET",
    HttpMethod.POST: "POST",
    HttpMethod.HEAD: "HEAD",
    HttpMethod.DELETE: "DELETE",
    HttpMethod.PUT: "PUT",
    HttpMethod.PATCH: "PATCH",
}


def build_method(method: HttpMethod) -> str:
    """Get the httpx verb for a request method."""
    return _METHODS[method]
