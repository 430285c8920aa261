"""
Blocking client for Elasticsearch requests.
"""

import logging
from typing import Optional, Tuple

import httpx

from es_types.primitives import ElasticRequest

from .params import RequestParams
from .request import build_request_args


logger = logging.getLogger(__name__)


def default(timeout: Optional[float] = None) -> Tuple[httpx.Client, RequestParams]:
    """
    Get a default httpx client and request params.

    Args:
        timeout: Request timeout in seconds (httpx default if not specified)

    Returns:
        Tuple of a new client and params for http://localhost:9200
    """
    client = httpx.Client() if timeout is None else httpx.Client(timeout=timeout)
    return client, RequestParams.default()


def elastic_req(
    client: httpx.Client,
    params: RequestParams,
    req: ElasticRequest,
) -> httpx.Response:
    """
    Send a request to Elasticsearch and return the raw http response.

    The response is not inspected: error statuses come back as regular
    responses and transport failures (httpx.ConnectError,
    httpx.TimeoutException, ...) propagate to the caller.

    Args:
        client: httpx client performing the call
        params: Base url, url params and headers
        req: Endpoint descriptor

    Returns:
        The httpx response
    """
    args = build_request_args(params, req)
    logger.debug("%s %s", args["method"], args["url"])
    return client.request(**args)
