"""In-memory data store."""

import threading
from collections.abc import Iterable
from typing import Any

from ..exceptions import StoreError, UnknownCollectionError
from ..logging import get_logger
from .base import RECORD_TYPES, AuthorRecord, BookRecord, Collection, DataStore, Record

logger = get_logger(__name__)


class _Table:
    """One append-only collection with its own lock and id counter."""

    def __init__(self, records: Iterable[Record]):
        self.lock = threading.Lock()
        self.rows: list[Record] = list(records)
        self.next_id = max((row.id for row in self.rows), default=0) + 1


class InMemoryDataStore(DataStore):
    """Data store keeping both collections in process memory.

    Ids come from a per-collection counter starting after the largest seeded
    id, so they stay unique even when writers run on several threads. With
    no deletes this equals ``count + 1``.
    """

    def __init__(
        self,
        authors: Iterable[AuthorRecord] = (),
        books: Iterable[BookRecord] = (),
    ):
        self._tables = {
            Collection.AUTHOR: _Table(authors),
            Collection.BOOK: _Table(books),
        }

    def _table(self, collection: Collection) -> _Table:
        try:
            return self._tables[collection]
        except KeyError:
            raise UnknownCollectionError(f"Unknown collection: {collection!r}") from None

    def find_by_id(self, collection: Collection, id: int) -> Record | None:
        table = self._table(collection)
        with table.lock:
            for row in table.rows:
                if row.id == id:
                    return row
        return None

    def scan_all(self, collection: Collection) -> list[Record]:
        table = self._table(collection)
        with table.lock:
            return list(table.rows)

    def count(self, collection: Collection) -> int:
        table = self._table(collection)
        with table.lock:
            return len(table.rows)

    def find_many(self, collection: Collection, ids: list[int]) -> list[Record | None]:
        table = self._table(collection)
        with table.lock:
            index: dict[int, Record] = {}
            for row in table.rows:
                index.setdefault(row.id, row)
        return [index.get(id) for id in ids]

    def append(self, collection: Collection, **fields: Any) -> Record:
        table = self._table(collection)
        record_type = RECORD_TYPES[collection]

        if "id" in fields:
            raise StoreError("Record ids are assigned by the store")

        with table.lock:
            try:
                record = record_type(id=table.next_id, **fields)
            except TypeError as e:
                raise StoreError(f"Invalid {collection.value} fields: {e}") from e
            table.rows.append(record)
            table.next_id += 1

        logger.debug("Record appended", collection=collection.value, id=record.id)
        return record
