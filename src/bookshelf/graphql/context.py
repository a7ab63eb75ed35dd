"""
Per-request GraphQL context
"""

from typing import TYPE_CHECKING, Any

import strawberry

from ..logging import get_logger

if TYPE_CHECKING:
    from ..database.gateway import StorageGateway

logger = get_logger(__name__)


def build_context(store: "StorageGateway", **extra: Any) -> dict[str, Any]:
    """Build the context dict handed to every resolver of one request."""
    return {"store": store, **extra}


def get_store_from_info(info: strawberry.Info) -> "StorageGateway":
    """
    Extract the storage gateway from a GraphQL info object.

    Raises RuntimeError when the context was built without one.
    """
    store = info.context.get("store")
    if store is None:
        logger.error("Storage gateway not found in GraphQL context")
        raise RuntimeError("Storage gateway not available")
    return store
