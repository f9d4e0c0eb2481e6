"""Core data store interfaces and record types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Collection(Enum):
    """Entity collections held by a data store."""

    AUTHOR = "author"
    BOOK = "book"


@dataclass(frozen=True)
class AuthorRecord:
    """Stored author."""

    id: int
    name: str


@dataclass(frozen=True)
class BookRecord:
    """Stored book. ``author_id`` is not checked against existing authors."""

    id: int
    title: str
    author_id: int


Record = AuthorRecord | BookRecord

RECORD_TYPES: dict[Collection, type[AuthorRecord] | type[BookRecord]] = {
    Collection.AUTHOR: AuthorRecord,
    Collection.BOOK: BookRecord,
}


class DataStore(ABC):
    """Abstract base class for entity stores backing the GraphQL schema.

    Records are never updated or deleted, so every implementation must
    return them in insertion order from ``scan_all``.
    """

    @abstractmethod
    def find_by_id(self, collection: Collection, id: int) -> Record | None:
        """Return the first record in ``collection`` with ``id``, or None."""
        pass

    @abstractmethod
    def scan_all(self, collection: Collection) -> list[Record]:
        """Return every record in ``collection`` in insertion order."""
        pass

    @abstractmethod
    def append(self, collection: Collection, **fields: Any) -> Record:
        """Create a record from ``fields``, assign its id and store it.

        Raises:
            StoreError: If the fields do not describe a record of ``collection``
        """
        pass

    def count(self, collection: Collection) -> int:
        """Return the number of records in ``collection``."""
        return len(self.scan_all(collection))

    def find_many(self, collection: Collection, ids: list[int]) -> list[Record | None]:
        """Look up several ids at once, preserving the order of ``ids``."""
        return [self.find_by_id(collection, id) for id in ids]
