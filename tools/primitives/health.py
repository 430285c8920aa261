"""
Health check primitive.
"""

from typing import Any, Dict

from config import get_current_environment, get_elasticsearch_config
from utils import connection


VERSION = "0.1.0"


def health() -> Dict[str, Any]:
    """
    Check connectivity and configuration of the Elasticsearch node.
    
    Returns:
        Status information with the configured url and whether the node
        answered a ping
    """
    config = get_elasticsearch_config()
    connected = connection.test_connection()

    return {
        "ok": connected,
        "environment": get_current_environment(),
        "version": VERSION,
        "elasticsearch": {
            "url": config["url"],
            "connected": connected,
            "timeout_ms": config["timeout_ms"],
        },
    }
