"""
Star Wars GraphQL API
GraphQL query endpoint over the Star Wars characters graph
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
