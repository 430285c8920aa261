"""
Configuration management for the Elasticsearch HTTP layer.
"""

from .environments import (
    get_current_environment,
    get_environment_config,
    get_elasticsearch_config,
)

__all__ = [
    "get_current_environment",
    "get_environment_config",
    "get_elasticsearch_config",
]
