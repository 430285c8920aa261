"""
Environment configuration management.
"""

import os
from typing import Dict, Any, Optional


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off")


# Single environment configuration - reads directly from env vars
DEFAULT_CONFIG = {
    "name": "default",
    "elasticsearch": {
        "url": os.getenv("ELASTIC_URL", os.getenv("ELASTICSEARCH_URL", "http://localhost:9200")),
        "timeout_ms": int(os.getenv("ELASTIC_TIMEOUT", os.getenv("ELASTICSEARCH_TIMEOUT", "30000"))),
        "verify_certs": _env_flag("ELASTIC_VERIFY_CERTS", True),
    },
}


def get_current_environment() -> str:
    """
    Get the current environment name.
    
    Returns:
        Always returns 'default' since we use a single environment
    """
    return DEFAULT_CONFIG["name"]


def get_environment_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Get configuration for the environment.
    
    Args:
        environment: Ignored, there is a single environment
        
    Returns:
        Environment configuration dictionary
    """
    return DEFAULT_CONFIG


def get_elasticsearch_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Get Elasticsearch configuration.
    
    Args:
        environment: Ignored, there is a single environment
        
    Returns:
        Elasticsearch configuration dictionary
    """
    return get_environment_config(environment)["elasticsearch"]
