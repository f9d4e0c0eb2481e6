"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...store import BookRecord
    from .author import Author


@strawberry.type(description="This represents a book written by an author")
class Book:
    """Book type for GraphQL API."""

    id: int
    title: str
    author_id: int

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """Get the author of this book, or null if the author does not exist."""
        from ..resolvers.book import resolve_book_author

        return await resolve_book_author(self, info)

    @classmethod
    def from_record(cls, record: "BookRecord") -> "Book":
        """Convert a store record to the GraphQL type."""
        return cls(id=record.id, title=record.title, author_id=record.author_id)
