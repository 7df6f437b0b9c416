"""
Plugin operations and their registry
"""

from .loader import create_plugin
from .registry import FUNCTION, MUTATION, QUERY, REST, PluginRegistry, RESTEndpoint

# Global registry instance
plugin = create_plugin()

__all__ = [
    "FUNCTION",
    "MUTATION",
    "QUERY",
    "REST",
    "PluginRegistry",
    "RESTEndpoint",
    "create_plugin",
    "plugin",
]
