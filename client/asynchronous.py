"""
Non-blocking client for Elasticsearch requests.
"""

import logging
from typing import Optional, Tuple

import httpx

from es_types.primitives import ElasticRequest

from .params import RequestParams
from .request import build_request_args


logger = logging.getLogger(__name__)


def default_async(timeout: Optional[float] = None) -> Tuple[httpx.AsyncClient, RequestParams]:
    """Get a default httpx async client and request params."""
    client = httpx.AsyncClient() if timeout is None else httpx.AsyncClient(timeout=timeout)
    return client, RequestParams.default()


async def elastic_req_async(
    client: httpx.AsyncClient,
    params: RequestParams,
    req: ElasticRequest,
) -> httpx.Response:
    """
    Send a request to Elasticsearch without blocking.

    Same contract as `elastic_req`: the response is returned untouched
    and transport errors propagate.
    """
    args = build_request_args(params, req)
    logger.debug("%s %s", args["method"], args["url"])
    return await client.request(**args)
