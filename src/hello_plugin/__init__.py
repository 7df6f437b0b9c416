"""
Hello World plugin
Demonstration plugin answering GraphQL and REST operations from in-memory data
"""

__version__ = "2.0.0"

from .config import settings

__all__ = ["settings", "__version__"]
