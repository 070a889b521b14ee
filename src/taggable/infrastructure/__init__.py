"""PostgreSQL persistence for taggable documents."""

from .database import DatabasePool, get_db_pool
from .schema import ensure_document_table, table_exists

__all__ = ["DatabasePool", "ensure_document_table", "get_db_pool", "table_exists"]
