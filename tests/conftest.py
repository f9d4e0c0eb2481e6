"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from bookshelf.store import AuthorRecord, BookRecord, InMemoryDataStore
from bookshelf.store.seed_data import SAMPLE_AUTHORS, SAMPLE_BOOKS


@pytest.fixture
def empty_store() -> InMemoryDataStore:
    """A store with no authors and no books."""
    return InMemoryDataStore()


@pytest.fixture
def seeded_store() -> InMemoryDataStore:
    """A store holding the sample catalogue (3 authors, 8 books)."""
    return InMemoryDataStore(authors=SAMPLE_AUTHORS, books=SAMPLE_BOOKS)


@pytest.fixture
def single_author_store() -> InMemoryDataStore:
    """A store with one author "A" and no books."""
    return InMemoryDataStore(authors=[AuthorRecord(id=1, name="A")])


@pytest.fixture
def dangling_store() -> InMemoryDataStore:
    """A store whose only book references an author that does not exist."""
    return InMemoryDataStore(
        authors=[AuthorRecord(id=1, name="A")],
        books=[BookRecord(id=1, title="Orphan", author_id=42)],
    )


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
