"""Shared test fixtures and configuration."""

import pytest

from taggable import InMemoryAggregation, TaggableDocument

# Autouse: every test gets deterministic singularization
from tests.fixtures.text import simple_text_utilities  # noqa: F401


@pytest.fixture
def bookmark_class() -> type[TaggableDocument]:
    """A document type tagged the way a bookmarking app would be."""

    class Bookmark(TaggableDocument):
        __tablename__ = "bookmarks"

    Bookmark.taggable("tags", separator=",")
    Bookmark.taggable("languages")
    return Bookmark


@pytest.fixture
def bookmarks(bookmark_class) -> list[TaggableDocument]:
    """A small collection, wired to an in-memory aggregation strategy."""
    collection = [
        bookmark_class(url="https://a.example", tags="Python, asyncio, databases"),
        bookmark_class(url="https://b.example", tags="python, postgres databases"),
        bookmark_class(url="https://c.example", tags="the best rust tutorials"),
    ]
    bookmark_class.aggregation_strategy = InMemoryAggregation(collection)
    return collection
