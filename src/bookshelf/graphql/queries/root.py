"""
Root GraphQL query definitions
"""

import strawberry

from ..types.author import Author
from ..types.book import Book


@strawberry.type(description="Root Query")
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="A Single Book")
    async def book(self, info: strawberry.Info, id: int | None = None) -> Book | None:
        """Get a book by ID."""
        from ..resolvers.book import resolve_book_by_id

        return await resolve_book_by_id(info, id)

    @strawberry.field(description="List of all books")
    async def books(self, info: strawberry.Info) -> list[Book] | None:
        """Get all books in store order."""
        from ..resolvers.book import resolve_books

        return await resolve_books(info)

    @strawberry.field(description="A Single Author")
    async def author(self, info: strawberry.Info, id: int | None = None) -> Author | None:
        """Get an author by ID."""
        from ..resolvers.author import resolve_author_by_id

        return await resolve_author_by_id(info, id)

    @strawberry.field(description="List of all authors")
    async def authors(self, info: strawberry.Info) -> list[Author] | None:
        """Get all authors in store order."""
        from ..resolvers.author import resolve_authors

        return await resolve_authors(info)
