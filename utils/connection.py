"""
Elasticsearch connection management.
"""

import logging
from typing import Optional

import httpx

from client import RequestParams, elastic_req
from config.environments import get_elasticsearch_config
from es_types import PingRequest


logger = logging.getLogger(__name__)


def get_client(environment: Optional[str] = None) -> httpx.Client:
    """
    Create an httpx client configured for the specified environment.
    
    Args:
        environment: Environment name (uses current if not specified)
        
    Returns:
        Configured httpx client; the caller closes it
    """
    config = get_elasticsearch_config(environment)
    return httpx.Client(
        timeout=config["timeout_ms"] / 1000.0,
        verify=config.get("verify_certs", True),
    )


def get_request_params(environment: Optional[str] = None) -> RequestParams:
    """Request params pointing at the configured Elasticsearch node."""
    config = get_elasticsearch_config(environment)
    return RequestParams(config["url"])


def test_connection(environment: Optional[str] = None) -> bool:
    """
    Test Elasticsearch connection by pinging the node.
    
    Args:
        environment: Environment name (uses current if not specified)
        
    Returns:
        True if the node answered with a success status
    """
    params = get_request_params(environment)
    try:
        with get_client(environment) as client:
            response = elastic_req(client, params, PingRequest.new())
    except httpx.HTTPError as e:
        logger.warning("Elasticsearch ping to %s failed: %s", params.base_url, e)
        return False

    return response.is_success
