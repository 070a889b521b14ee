"""Integration tests for DocumentRepository with a real database."""

import pytest

from taggable.domain import DocumentRepository
from taggable.services.aggregation.postgres import PostgresAggregation

# Import test fixtures are used as pytest fixture parameters below
from tests.fixtures.database import test_db_pool, test_table  # noqa: F401

pytestmark = pytest.mark.integration


@pytest.fixture
async def test_repository(test_db_pool, test_table, article_class):
    """Create a test repository with database."""
    repo = DocumentRepository(test_db_pool, article_class, test_table)
    yield repo
    # Cleanup handled by test_table fixture


async def test_save_and_get(test_repository, article_class):
    """Test storing a document and getting it back."""
    article = article_class(title="Walrus operator", tags="Python comprehensions")

    saved = await test_repository.save(article)
    assert saved.id is not None

    loaded = await test_repository.get(saved.id)
    assert loaded.title == "Walrus operator"
    assert loaded.tags == "python,comprehension"
    assert loaded.tags_array == ["python", "comprehension"]
    assert loaded.tags_slug == ["python", "comprehension"]


async def test_update(test_repository, article_class):
    """Test that saving an existing document updates it."""
    article = await test_repository.save(article_class(tags="python"))
    article.tags_array = ["python", "asyncio"]
    await test_repository.save(article)

    loaded = await test_repository.get(article.id)
    assert loaded.tags_array == ["python", "asyncio"]
    assert loaded.tags == "python,asyncio"


async def test_get_missing(test_repository):
    assert await test_repository.get(999999) is None


async def test_tagged_with_requires_all_tags(test_repository, article_class):
    """Documents must hold every requested tag, in any order."""
    both = await test_repository.save(article_class(tags_array=["ruby", "mongodb", "web"]))
    await test_repository.save(article_class(tags_array=["ruby"]))
    reversed_order = await test_repository.save(article_class(tags_array=["mongodb", "ruby"]))

    found = await test_repository.tagged_with("tags", ["ruby", "mongodb"])
    assert [doc.id for doc in found] == [both.id, reversed_order.id]

    found = await test_repository.tagged_with("tags", "ruby", limit=1)
    assert [doc.id for doc in found] == [both.id]


async def test_delete(test_repository, article_class):
    article = await test_repository.save(article_class(tags="python"))

    assert await test_repository.delete(article.id) is True
    assert await test_repository.delete(article.id) is False


async def test_postgres_aggregation(test_db_pool, test_table, test_repository, article_class):
    """Test counting tags in the database."""
    await test_repository.save(article_class(tags="ruby mongodb", status="published"))
    await test_repository.save(article_class(tags="ruby python", status="published"))
    await test_repository.save(article_class(tags="python", status="draft"))

    article_class.aggregation_strategy = PostgresAggregation(test_db_pool, test_table)

    assert await article_class.tags_for("tags") == ["mongodb", "python", "ruby"]
    assert await article_class.tags_with_weight_for("tags") == [
        ("mongodb", 1),
        ("python", 2),
        ("ruby", 2),
    ]

    conditions = article_class.tagged_with("tags", ["ruby"])
    assert await article_class.tags_with_weight_for("tags", conditions) == [
        ("mongodb", 1),
        ("python", 1),
        ("ruby", 2),
    ]
