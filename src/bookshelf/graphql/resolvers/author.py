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
async def resolve_author_by_id(info: strawberry.Info, id: int | None) -> Author | None:
    """
    Resolve an author by its ID.

    A missing ID or an ID with no matching author resolves to None, not an error.
    """
    from ..types.author import Author as AuthorType

    if id is None:
        return None

    record = get_store_from_info(info).find_by_id(Collection.AUTHOR, id)
    if record is None:
        logger.info("Author not found", author_id=id)
        return None

    return AuthorType.from_record(record)


async def resolve_authors(info: strawberry.Info) -> list[Author]:
    """Resolve every author in store order."""
    from ..types.author import Author as AuthorType

    records = get_store_from_info(info).scan_all(Collection.AUTHOR)
    return [AuthorType.from_record(record) for record in records]


# Field resolvers
async def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    """Resolve the books whose author_id matches this author, in store order."""
    from ..types.book import Book as BookType

    loaders = get_loaders_from_info(info)
    records = await loaders.books_by_author_loader.load(author.id)
    return [BookType.from_record(record) for record in records]


# Mutations
async def add_author(info: strawberry.Info, name: str) -> Author:
    """Append a new author and return it."""
    from ..types.author import Author as AuthorType

    record = get_store_from_info(info).append(Collection.AUTHOR, name=name)

    # Overwrites a miss a book may have cached for this id earlier in the request
    get_loaders_from_info(info).author_loader.prime(record.id, record, force=True)

    logger.info("Author added", author_id=record.id)
    return AuthorType.from_record(record)
