"""Integration tests for document table management."""

import pytest

from taggable.infrastructure.schema import ensure_document_table, table_exists

# Import test fixtures are used as pytest fixture parameters below
from tests.fixtures.database import test_db_pool, test_table  # noqa: F401

pytestmark = pytest.mark.integration


async def test_table_created_with_tag_columns(test_db_pool, test_table):
    async with test_db_pool.acquire() as conn:
        assert await table_exists(conn, test_table)

        rows = await conn.fetch(
            """
            SELECT column_name, data_type
            FROM information_schema.columns
            WHERE table_schema = current_schema() AND table_name = $1
            """,
            test_table,
        )

    columns = {row["column_name"]: row["data_type"] for row in rows}
    assert columns["tags"] == "text"
    assert columns["tags_array"] == "ARRAY"
    assert columns["tags_slug"] == "ARRAY"
    assert columns["attributes"] == "jsonb"


async def test_composite_index(test_db_pool, test_table):
    async with test_db_pool.acquire() as conn:
        indexdef = await conn.fetchval(
            "SELECT indexdef FROM pg_indexes WHERE tablename = $1 AND indexname LIKE 'idx_%'",
            test_table,
        )

    assert "gin" in indexdef
    assert "tags_array" in indexdef and "tags_slug" in indexdef


async def test_idempotent_and_adds_new_fields(test_db_pool, test_table, article_class):
    article_class.taggable("keywords", separator=",")

    async with test_db_pool.acquire() as conn:
        await ensure_document_table(conn, test_table, article_class.tag_registry)
        await ensure_document_table(conn, test_table, article_class.tag_registry)

        names = await conn.fetch(
            """
            SELECT column_name
            FROM information_schema.columns
            WHERE table_schema = current_schema() AND table_name = $1
            """,
            test_table,
        )

    assert {"keywords", "keywords_array", "keywords_slug"} <= {row["column_name"] for row in names}
