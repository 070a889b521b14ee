"""Tag aggregation computed by PostgreSQL."""

import logging

from taggable.domain.query import TagFilter, quote_identifier
from taggable.infrastructure.database import DatabasePool

logger = logging.getLogger(__name__)


class PostgresAggregation:
    """Count tags by unnesting a tag array column.

    Conditions may be a TagFilter or a dict of column equality checks.
    """

    def __init__(self, db_pool: DatabasePool, table: str | None = None):
        """Initialize with a pool; ``table`` defaults to the document type's table."""
        self.db_pool = db_pool
        self.table = table

    def _where(self, conditions) -> tuple[str, list]:
        if not conditions:
            return "", []
        if isinstance(conditions, TagFilter):
            clause, params = conditions.to_sql(1)
            return f"WHERE {clause}", params

        clauses = []
        params = []
        for index, (column, value) in enumerate(conditions.items(), start=1):
            clauses.append(f"{quote_identifier(column)} = ${index}")
            params.append(value)
        return "WHERE " + " AND ".join(clauses), params

    async def _fetch_counts(self, document_type, context: str, conditions) -> list:
        array_field = document_type.tag_options_for(context)["array_field"]
        table = self.table or document_type.table_name()
        where, params = self._where(conditions)

        query = f"""
            SELECT tag, COUNT(*) AS weight
            FROM {quote_identifier(table)}, unnest({quote_identifier(array_field)}) AS tag
            {where}
            GROUP BY tag
            ORDER BY tag
        """
        async with self.db_pool.acquire() as conn:
            rows = await conn.fetch(query, *params)

        logger.debug(f"Aggregated {len(rows)} distinct tags from {table}.{array_field}")
        return rows

    async def tags_for(self, document_type, context: str, conditions=None) -> list[str]:
        """Return the distinct tags used in a tag field."""
        rows = await self._fetch_counts(document_type, context, conditions)
        return [row["tag"] for row in rows]

    async def tags_with_weight_for(
        self, document_type, context: str, conditions=None
    ) -> list[tuple[str, int]]:
        """Return ``(tag, count)`` pairs sorted by tag."""
        rows = await self._fetch_counts(document_type, context, conditions)
        return [(row["tag"], row["weight"]) for row in rows]
