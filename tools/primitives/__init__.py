"""
Primitive tools exposed by the MCP server.
"""

from .request import elastic_request, response_to_dict
from .health import health

__all__ = [
    "elastic_request",
    "response_to_dict",
    "health",
]
