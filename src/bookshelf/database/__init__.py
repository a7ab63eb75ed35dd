"""
Database module for Bookshelf API
"""

from .connection import create_engine, create_session_factory, create_tables
from .gateway import (
    EntityRepository,
    MalformedIdError,
    StorageGateway,
    StoreError,
    StoreReadError,
    StoreWriteError,
)

__all__ = [
    "EntityRepository",
    "MalformedIdError",
    "StorageGateway",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "create_engine",
    "create_session_factory",
    "create_tables",
]
