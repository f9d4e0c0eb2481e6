"""
Per-request GraphQL context: the injected data store and its loaders
"""

from typing import Any

import strawberry

from ..exceptions import StoreError
from ..logging import get_logger
from ..store import DataStore
from .loaders import Loaders

logger = get_logger(__name__)


def build_context(store: DataStore, request: Any = None) -> dict[str, Any]:
    """Build the context dict handed to every resolver of one request."""
    return {
        "request": request,
        "store": store,
        "loaders": Loaders(store),
    }


def get_store_from_info(info: strawberry.Info) -> DataStore:
    """
    Extract the data store from the GraphQL info object.

    Raises StoreError if the context was built without one, which the
    executor reports as an error on the requesting field.
    """
    store = info.context.get("store")
    if store is None:
        logger.error("Data store not found in GraphQL context")
        raise StoreError("Data store not available")
    return store


def get_loaders_from_info(info: strawberry.Info) -> Loaders:
    """Return the request's loaders, creating them on first use."""
    loaders = info.context.get("loaders")
    if loaders is None:
        loaders = Loaders(get_store_from_info(info))
        info.context["loaders"] = loaders
    return loaders
