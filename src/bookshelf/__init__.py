"""
Bookshelf API
GraphQL access to users, their books and content documents
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
