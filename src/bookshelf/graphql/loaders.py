from strawberry.dataloader import DataLoader

from ..store import AuthorRecord, BookRecord, Collection, DataStore


def make_author_loader(store: DataStore) -> DataLoader[int, AuthorRecord | None]:
    """Create a DataLoader for authors by ID."""

    async def load_authors(keys: list[int]) -> list[AuthorRecord | None]:
        return store.find_many(Collection.AUTHOR, keys)

    return DataLoader(load_fn=load_authors)


def make_books_by_author_loader(store: DataStore) -> DataLoader[int, list[BookRecord]]:
    """Create a DataLoader for the books of each author ID, one scan per batch."""

    async def load_books(keys: list[int]) -> list[list[BookRecord]]:
        books_by_author: dict[int, list[BookRecord]] = {key: [] for key in keys}
        for book in store.scan_all(Collection.BOOK):
            if book.author_id in books_by_author:
                books_by_author[book.author_id].append(book)
        return [books_by_author[key] for key in keys]

    return DataLoader(load_fn=load_books)


class Loaders:
    def __init__(self, store: DataStore):
        # Created per request; cached values never outlive the request
        self.author_loader = make_author_loader(store)
        self.books_by_author_loader = make_books_by_author_loader(store)
