"""
Primitive request operations for Elasticsearch.
"""

from typing import Any, Dict, Optional, Union

import httpx

from client import elastic_req
from es_types import request_for
from utils import connection


def response_to_dict(response: httpx.Response) -> Dict[str, Any]:
    """
    Convert a raw http response into a serializable dict.

    The body is decoded as JSON when possible and returned as text
    otherwise. Responses without a body (e.g. HEAD) have a None body.
    """
    body: Any = None
    if response.content:
        try:
            body = response.json()
        except ValueError:
            body = response.text

    return {
        "status": response.status_code,
        "headers": dict(response.headers),
        "body": body,
    }


def elastic_request(
    method: str,
    path: str,
    body: Optional[Union[Dict[str, Any], str]] = None,
    url_params: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Send a raw request to the configured Elasticsearch node.
    
    This is the foundational primitive: any endpoint can be reached by
    verb and path. The status code is reported as is, so error
    responses from Elasticsearch are returned rather than raised.
    
    Args:
        method: HTTP verb (GET, POST, HEAD, DELETE, PUT, PATCH)
        path: Url path relative to the node (e.g. "/myindex/_search")
        body: Optional JSON body or raw string
        url_params: Optional url query parameters (e.g. {"pretty": True})
        
    Returns:
        Dict with status, headers and body, or an error dict if the
        request could not be sent
    """
    try:
        req = request_for(method, path, body)
    except ValueError:
        return {
            "error": True,
            "message": f"Unsupported HTTP method: {method}",
        }

    params = connection.get_request_params()
    for key, value in (url_params or {}).items():
        params = params.url_param(key, value)

    try:
        with connection.get_client() as client:
            response = elastic_req(client, params, req)
    except httpx.HTTPError as e:
        return {
            "error": True,
            "message": f"Elasticsearch request failed: {str(e)}",
        }

    return response_to_dict(response)
