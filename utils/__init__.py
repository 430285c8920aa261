"""
Utility functions for the Elasticsearch HTTP layer.
"""

from .connection import get_client, get_request_params, test_connection

__all__ = [
    # Connection
    "get_client",
    "get_request_params",
    "test_connection",
]
