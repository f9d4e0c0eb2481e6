"""Exceptions raised by the Bookshelf backend."""


class BookshelfError(Exception):
    """Base exception for Bookshelf errors."""

    pass


class StoreError(BookshelfError):
    """Raised when a data store operation fails."""

    pass


class UnknownCollectionError(StoreError):
    """Raised when a store is asked for a collection it does not hold."""

    pass


class SchemaValidationError(BookshelfError):
    """Raised when the GraphQL schema fails startup validation."""

    pass
