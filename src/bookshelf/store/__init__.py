"""Data store package: record types, the store interface and implementations."""

from ..logging import get_logger
from .base import AuthorRecord, BookRecord, Collection, DataStore, Record
from .memory import InMemoryDataStore
from .seed_data import SAMPLE_AUTHORS, SAMPLE_BOOKS

logger = get_logger(__name__)


def create_store(seed: bool | None = None) -> DataStore:
    """Create a fresh in-memory store.

    Args:
        seed: Load the sample catalogue. Defaults to ``settings.seed_data``.
    """
    if seed is None:
        from ..config import settings

        seed = settings.seed_data

    if seed:
        store = InMemoryDataStore(authors=SAMPLE_AUTHORS, books=SAMPLE_BOOKS)
    else:
        store = InMemoryDataStore()

    logger.info(
        "Data store created",
        seeded=seed,
        authors=store.count(Collection.AUTHOR),
        books=store.count(Collection.BOOK),
    )
    return store


__all__ = [
    "AuthorRecord",
    "BookRecord",
    "Collection",
    "DataStore",
    "InMemoryDataStore",
    "Record",
    "create_store",
]
