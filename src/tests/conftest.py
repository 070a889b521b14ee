"""
Shared test fixtures for taggable.
"""
import pytest

from taggable.domain import TaggableDocument

# Autouse: every test gets deterministic singularization
from tests.fixtures.text import simple_text_utilities  # noqa: F401


@pytest.fixture
def article_class() -> type[TaggableDocument]:
    """A fresh document type with a comma separated ``tags`` field."""

    class Article(TaggableDocument):
        pass

    Article.taggable(separator=",")
    return Article


@pytest.fixture
def post_class() -> type[TaggableDocument]:
    """A document type with two tag fields and custom options."""

    class Post(TaggableDocument):
        __tablename__ = "posts"

    Post.taggable("keywords", separator=",", default_type="seo")
    Post.taggable("topics", array_field="topic_list", slug_field="topic_slugs")
    return Post
