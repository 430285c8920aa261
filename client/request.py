"""
Request assembly shared by the blocking and non-blocking clients.
"""

import json
from typing import Any, Dict, Optional, Union

from es_types.primitives import Body, ElasticRequest

from .method import build_method
from .params import RequestParams
from .url import build_url


def build_body(body: Optional[Body]) -> Optional[Union[str, bytes]]:
    """Serialize a request body; dicts are sent as JSON, str and bytes as is."""
    if isinstance(body, dict):
        return json.dumps(body)
    return body


def build_request_args(params: RequestParams, req: ElasticRequest) -> Dict[str, Any]:
    """
    Build the keyword arguments for `httpx.Client.request`.

    Args:
        params: Base url, url params and headers for the request
        req: Endpoint descriptor with verb, path and optional body

    Returns:
        Dict with method, url, headers and content
    """
    return {
        "method": build_method(req.method),
        "url": build_url(req.url, params),
        "headers": params.headers.copy(),
        "content": build_body(req.body),
    }
