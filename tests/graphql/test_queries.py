"""
Schema-level tests for the read operations
"""

import pytest

from bookshelf.graphql.schema import execute
from bookshelf.store import Collection

BOOK_FIELDS = "id title authorId"


@pytest.mark.asyncio
async def test_book_by_id_matches_every_stored_book(seeded_store):
    """Every stored book is returned unchanged by book(id)."""
    for record in seeded_store.scan_all(Collection.BOOK):
        result = await execute(
            f"query ($id: Int) {{ book(id: $id) {{ {BOOK_FIELDS} }} }}",
            store=seeded_store,
            variables={"id": record.id},
        )

        assert result.errors is None
        assert result.data == {
            "book": {"id": record.id, "title": record.title, "authorId": record.author_id}
        }


@pytest.mark.asyncio
async def test_book_not_found_is_null_without_error(seeded_store):
    result = await execute("{ book(id: 999) { id title } }", store=seeded_store)

    assert result.errors is None
    assert result.data == {"book": None}


@pytest.mark.asyncio
async def test_book_without_id_is_null(seeded_store):
    result = await execute("{ book { id } author { id } }", store=seeded_store)

    assert result.errors is None
    assert result.data == {"book": None, "author": None}


@pytest.mark.asyncio
async def test_author_by_id(seeded_store):
    result = await execute('{ author(id: 2) { id name } }', store=seeded_store)

    assert result.errors is None
    assert result.data == {"author": {"id": 2, "name": "J. R. R. Tolkien"}}


@pytest.mark.asyncio
async def test_author_not_found_is_null_without_error(seeded_store):
    result = await execute("{ author(id: 0) { name books { id } } }", store=seeded_store)

    assert result.errors is None
    assert result.data == {"author": None}


@pytest.mark.asyncio
async def test_books_in_insertion_order(seeded_store):
    result = await execute("{ books { id } }", store=seeded_store)

    assert result.errors is None
    assert [book["id"] for book in result.data["books"]] == [1, 2, 3, 4, 5, 6, 7, 8]


@pytest.mark.asyncio
async def test_authors_in_insertion_order(seeded_store):
    result = await execute("{ authors { name } }", store=seeded_store)

    assert result.errors is None
    assert [a["name"] for a in result.data["authors"]] == [
        "J. K. Rowling",
        "J. R. R. Tolkien",
        "Brent Weeks",
    ]


@pytest.mark.asyncio
async def test_lists_on_empty_store(empty_store):
    result = await execute("{ books { id } authors { id } }", store=empty_store)

    assert result.errors is None
    assert result.data == {"books": [], "authors": []}


@pytest.mark.asyncio
async def test_author_books_are_the_matching_subsequence(seeded_store):
    """author.books holds exactly the books with that authorId, in store order."""
    result = await execute("{ authors { id books { id authorId } } }", store=seeded_store)

    assert result.errors is None
    all_books = seeded_store.scan_all(Collection.BOOK)
    for author in result.data["authors"]:
        expected = [book.id for book in all_books if book.author_id == author["id"]]
        assert [book["id"] for book in author["books"]] == expected
        assert all(book["authorId"] == author["id"] for book in author["books"])


@pytest.mark.asyncio
async def test_author_without_books_has_empty_list(single_author_store):
    result = await execute("{ author(id: 1) { name books { id } } }", store=single_author_store)

    assert result.errors is None
    assert result.data == {"author": {"name": "A", "books": []}}


@pytest.mark.asyncio
async def test_book_author_resolves_referenced_author(seeded_store):
    result = await execute("{ books { authorId author { id name } } }", store=seeded_store)

    assert result.errors is None
    for book in result.data["books"]:
        assert book["author"]["id"] == book["authorId"]


@pytest.mark.asyncio
async def test_dangling_author_reference_is_null(dangling_store):
    result = await execute(
        "{ book(id: 1) { title authorId author { name } } }", store=dangling_store
    )

    assert result.errors is None
    assert result.data == {"book": {"title": "Orphan", "authorId": 42, "author": None}}


@pytest.mark.asyncio
async def test_nested_traversal(seeded_store):
    result = await execute(
        "{ book(id: 7) { author { name books { title } } } }", store=seeded_store
    )

    assert result.errors is None
    assert result.data["book"]["author"] == {
        "name": "Brent Weeks",
        "books": [{"title": "The Way of Shadows"}, {"title": "Beyond the Shadows"}],
    }


@pytest.mark.asyncio
async def test_wrong_id_type_is_a_validation_error(seeded_store):
    result = await execute('{ book(id: "one") { id } }', store=seeded_store)

    assert result.data is None
    assert result.errors
    assert "Int" in result.errors[0].message


@pytest.mark.asyncio
async def test_unknown_field_is_a_validation_error(seeded_store):
    result = await execute("{ books { id isbn } }", store=seeded_store)

    assert result.data is None
    assert "isbn" in result.errors[0].message


@pytest.mark.asyncio
async def test_store_not_mutated_by_queries(seeded_store):
    await execute("{ books { id author { books { id } } } authors { id } }", store=seeded_store)

    assert seeded_store.count(Collection.BOOK) == 8
    assert seeded_store.count(Collection.AUTHOR) == 3
