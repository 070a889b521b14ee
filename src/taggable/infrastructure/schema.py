"""Table and index management for taggable document types."""

import logging

from asyncpg import Connection

from taggable.domain.query import quote_identifier
from taggable.domain.registry import TagRegistry

logger = logging.getLogger(__name__)


async def ensure_document_table(conn: Connection, table: str, registry: TagRegistry) -> None:
    """Ensure a document table exists with columns for every tag field.

    This function is idempotent - safe to call multiple times, and it adds
    the columns of tag fields registered after the table was created.

    Args:
        conn: Database connection
        table: Table name (plain identifier)
        registry: Tag configuration of the document type stored there
    """
    quoted_table = quote_identifier(table)
    logger.info(f"Ensuring table {table} for tag fields {registry.contexts()}")

    await conn.execute(f"""
        CREATE TABLE IF NOT EXISTS {quoted_table} (
            id SERIAL PRIMARY KEY,
            attributes JSONB NOT NULL DEFAULT '{{}}'
        )
    """)

    for context in registry.contexts():
        config = registry.config_for(context)
        string_column = quote_identifier(config.name)
        array_column = quote_identifier(config.array_field)
        slug_column = quote_identifier(config.slug_field)

        await conn.execute(f"""
            ALTER TABLE {quoted_table}
                ADD COLUMN IF NOT EXISTS {string_column} TEXT NOT NULL DEFAULT '',
                ADD COLUMN IF NOT EXISTS {array_column} TEXT[] NOT NULL DEFAULT '{{}}',
                ADD COLUMN IF NOT EXISTS {slug_column} TEXT[] NOT NULL DEFAULT '{{}}'
        """)

        # Composite GIN index so containment queries on either array are indexed
        index_name = quote_identifier(f"idx_{table}_{config.array_field}_{config.slug_field}")
        await conn.execute(f"""
            CREATE INDEX IF NOT EXISTS {index_name}
            ON {quoted_table} USING gin ({array_column}, {slug_column})
        """)

    logger.info(f"Table '{table}' is ready")


async def table_exists(conn: Connection, table: str) -> bool:
    """Check if a table exists in the current schema."""
    exists = await conn.fetchval(
        """
        SELECT EXISTS (
            SELECT 1
            FROM information_schema.tables
            WHERE table_schema = current_schema()
            AND table_name = $1
        )
    """,
        table,
    )
    return exists


async def drop_document_table(conn: Connection, table: str) -> None:
    """Drop a document table if it exists."""
    await conn.execute(f"DROP TABLE IF EXISTS {quote_identifier(table)}")
    logger.info(f"Dropped table '{table}'")
