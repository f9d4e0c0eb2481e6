"""
Bookshelf GraphQL
Authors and books served over a GraphQL schema/resolver contract
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
