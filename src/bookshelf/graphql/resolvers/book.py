from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import Collection
from ..context import get_loaders_from_info, get_store_from_info

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


# Query resolvers
async def resolve_book_by_id(info: strawberry.Info, id: int | None) -> Book | None:
    """
    Resolve a book by its ID.

    A missing ID or an ID with no matching book resolves to None, not an error.
    """
    from ..types.book import Book as BookType

    if id is None:
        return None

    record = get_store_from_info(info).find_by_id(Collection.BOOK, id)
    if record is None:
        logger.info("Book not found", book_id=id)
        return None

    return BookType.from_record(record)


async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book in store order."""
    from ..types.book import Book as BookType

    records = get_store_from_info(info).scan_all(Collection.BOOK)
    return [BookType.from_record(record) for record in records]


# Field resolvers
async def resolve_book_author(book: Book, info: strawberry.Info) -> Author | None:
    """
    Resolve the author referenced by this book.

    author_id is never checked on write, so a dangling reference resolves to None.
    """
    from ..types.author import Author as AuthorType

    loaders = get_loaders_from_info(info)
    record = await loaders.author_loader.load(book.author_id)
    if record is None:
        logger.info("Dangling author reference", book_id=book.id, author_id=book.author_id)
        return None

    return AuthorType.from_record(record)


# Mutations
async def add_book(info: strawberry.Info, title: str, author_id: int) -> Book:
    """Append a new book and return it. author_id is stored as given."""
    from ..types.book import Book as BookType

    record = get_store_from_info(info).append(Collection.BOOK, title=title, author_id=author_id)

    # Drop a list cached earlier in this request; clear() raises on unknown keys
    loader = get_loaders_from_info(info).books_by_author_loader
    if loader.cache_map.get(author_id) is not None:
        loader.clear(author_id)

    logger.info("Book added", book_id=record.id, author_id=author_id)
    return BookType.from_record(record)
