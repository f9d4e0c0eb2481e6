"""
Sample catalogue used to seed a fresh in-memory store
"""

from .base import AuthorRecord, BookRecord

SAMPLE_AUTHORS = (
    AuthorRecord(id=1, name="J. K. Rowling"),
    AuthorRecord(id=2, name="J. R. R. Tolkien"),
    AuthorRecord(id=3, name="Brent Weeks"),
)

SAMPLE_BOOKS = (
    BookRecord(id=1, title="Harry Potter and the Chamber of Secrets", author_id=1),
    BookRecord(id=2, title="Harry Potter and the Prisoner of Azkaban", author_id=1),
    BookRecord(id=3, title="Harry Potter and the Goblet of Fire", author_id=1),
    BookRecord(id=4, title="The Fellowship of the Ring", author_id=2),
    BookRecord(id=5, title="The Two Towers", author_id=2),
    BookRecord(id=6, title="The Return of the King", author_id=2),
    BookRecord(id=7, title="The Way of Shadows", author_id=3),
    BookRecord(id=8, title="Beyond the Shadows", author_id=3),
)
