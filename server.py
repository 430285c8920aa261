"""
FastMCP Elasticsearch HTTP server.

This server exposes the request layer as MCP tools:
- health: Check Elasticsearch connectivity and configuration
- elastic_request: Send a raw request to any Elasticsearch endpoint
"""

from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

# Load environment variables before config reads them
load_dotenv()

from fastmcp import FastMCP

from tools.primitives import elastic_request as send_elastic_request
from tools.primitives import health as check_health


# Initialize MCP server
mcp = FastMCP("elastic-httpx")


@mcp.tool()
def health() -> Dict[str, Any]:
    """
    Check connectivity and configuration of the Elasticsearch node.

    Returns status information about:
    - The configured Elasticsearch url and timeout
    - Whether the node answers a ping
    - Environment configuration
    """
    return check_health()


@mcp.tool()
def elastic_request(
    method: str,
    path: str,
    body: Optional[Union[Dict[str, Any], str]] = None,
    url_params: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Send a request to any Elasticsearch REST endpoint.

    Args:
        method: HTTP verb (GET, POST, HEAD, DELETE, PUT, PATCH)
        path: Url path relative to the node, e.g. "/myindex/_search"
        body: Optional JSON body (Query DSL, document, settings...)
        url_params: Optional url query parameters, e.g. {"pretty": true, "q": "*"}

    Returns:
        Dictionary with the response status, headers and decoded body
    """
    return send_elastic_request(
        method=method,
        path=path,
        body=body,
        url_params=url_params,
    )


if __name__ == "__main__":
    mcp.run()
