"""Document repository for database operations."""

from __future__ import annotations

import json
import logging

from taggable.infrastructure.database import DatabasePool

from .document import TaggableDocument
from .query import TagFilter, quote_identifier

logger = logging.getLogger(__name__)


class DocumentRepository:
    """Repository for storing and finding taggable documents.

    Tag fields are stored in their own columns (string, text[] array and
    text[] slugs); every other attribute goes into a JSONB column.
    """

    def __init__(
        self,
        db_pool: DatabasePool,
        document_class: type[TaggableDocument],
        table: str | None = None,
    ):
        """Initialize with database pool and the document type stored."""
        self.db_pool = db_pool
        self.document_class = document_class
        self.table = table or document_class.table_name()
        # Fail early on table names we would refuse to query
        self._quoted_table = quote_identifier(self.table)

    def _tag_columns(self) -> list[str]:
        registry = self.document_class.tag_registry
        columns = []
        for context in registry.contexts():
            columns.extend(registry.config_for(context).attributes)
        return columns

    def _split(self, document: TaggableDocument) -> tuple[list, dict]:
        """Split a document into tag column values and JSONB attributes."""
        data = document.to_dict()
        data.pop("id", None)
        tag_values = [data.pop(column) for column in self._tag_columns()]
        return tag_values, data

    async def save(self, document: TaggableDocument) -> TaggableDocument:
        """Insert a new document or update an existing one.

        Sets ``document.id`` on insert and returns the document.
        """
        columns = self._tag_columns()
        tag_values, attributes = self._split(document)
        quoted = [quote_identifier(column) for column in columns]

        async with self.db_pool.acquire() as conn:
            if document.id is None:
                placeholders = ", ".join(f"${i}" for i in range(2, len(columns) + 2))
                column_list = ", ".join(["attributes", *quoted])
                value_list = ", ".join(filter(None, ["$1::jsonb", placeholders]))
                row = await conn.fetchrow(
                    f"""
                    INSERT INTO {self._quoted_table} ({column_list})
                    VALUES ({value_list})
                    RETURNING id
                    """,
                    json.dumps(attributes),
                    *tag_values,
                )
                document.id = row["id"]
                logger.debug(f"Inserted {self.table} document {document.id}")
            else:
                assignments = ", ".join(
                    ["attributes = $2::jsonb"]
                    + [f"{column} = ${i}" for i, column in enumerate(quoted, start=3)]
                )
                await conn.execute(
                    f"UPDATE {self._quoted_table} SET {assignments} WHERE id = $1",
                    document.id,
                    json.dumps(attributes),
                    *tag_values,
                )
                logger.debug(f"Updated {self.table} document {document.id}")

        return document

    async def get(self, document_id: int) -> TaggableDocument | None:
        """Get a document by ID."""
        async with self.db_pool.acquire() as conn:
            row = await conn.fetchrow(
                f"SELECT * FROM {self._quoted_table} WHERE id = $1", document_id
            )
        return self._row_to_document(row) if row else None

    async def find(self, tag_filter: TagFilter, limit: int | None = None) -> list[TaggableDocument]:
        """Execute a tag filter, returning matching documents by ID."""
        clause, params = tag_filter.to_sql(1)
        query = f"SELECT * FROM {self._quoted_table} WHERE {clause} ORDER BY id"
        if limit is not None:
            query += f" LIMIT ${len(params) + 1}"
            params.append(limit)

        async with self.db_pool.acquire() as conn:
            rows = await conn.fetch(query, *params)

        return [self._row_to_document(row) for row in rows]

    async def tagged_with(
        self, context: str, tags, limit: int | None = None
    ) -> list[TaggableDocument]:
        """Find documents tagged with all of ``tags`` in a tag field."""
        return await self.find(self.document_class.tagged_with(context, tags), limit)

    async def delete(self, document_id: int) -> bool:
        """Delete a document, returning whether it existed."""
        async with self.db_pool.acquire() as conn:
            status = await conn.execute(
                f"DELETE FROM {self._quoted_table} WHERE id = $1", document_id
            )
        # Status looks like "DELETE 1"
        return int(status.split()[-1]) > 0

    def _row_to_document(self, row) -> TaggableDocument:
        """Convert a database row to a document."""
        attributes = row["attributes"]
        # asyncpg returns JSONB as text unless a codec is registered
        if isinstance(attributes, str):
            attributes = json.loads(attributes)
        else:
            attributes = dict(attributes)

        data = {"id": row["id"], **attributes}
        for column in self._tag_columns():
            value = row[column]
            data[column] = list(value) if isinstance(value, (list, tuple)) else value
        return self.document_class.from_dict(data)
