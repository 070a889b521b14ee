"""Build "tagged with all of" filters for the persistence layer."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .normalizer import string_to_array
from .registry import TagRegistry

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def quote_identifier(name: str) -> str:
    """Quote a column or table name, rejecting anything but plain identifiers."""
    # Only allow alphanumeric and underscore
    if not isinstance(name, str) or not _IDENTIFIER_RE.match(name):
        raise ValueError(f"Invalid identifier: {name!r}")
    return f'"{name}"'


@dataclass(frozen=True)
class TagFilter:
    """Require the stored tag array ``field`` to contain every tag in ``tags``.

    Order does not matter and the stored array may hold extra tags. An
    empty ``tags`` matches every document.
    """

    field: str
    tags: tuple[str, ...]

    def matches(self, document) -> bool:
        """Check a document (or plain mapping) against the filter."""
        if isinstance(document, Mapping):
            stored = document.get(self.field)
        else:
            stored = getattr(document, self.field, None)
        return set(stored or ()).issuperset(self.tags)

    def to_sql(self, param_index: int = 1) -> tuple[str, list]:
        """Render as a PostgreSQL array containment clause.

        Returns:
            (clause, params) where the clause uses ``$param_index``
        """
        clause = f"{quote_identifier(self.field)} @> ${param_index}::text[]"
        return clause, [list(self.tags)]

    def to_dict(self) -> dict:
        """Render as a document-store style ``$all`` filter."""
        return {self.field: {"$all": list(self.tags)}}


def build_filter(registry: TagRegistry, field_name: str, tags) -> TagFilter:
    """Build the filter for documents tagged with all of ``tags``.

    Args:
        registry: The document type's tag configuration
        field_name: Registered tag field (context) to match against
        tags: A string split on the field's separator, or a sequence used as-is

    Raises:
        UnknownTagField: If ``field_name`` is not registered
    """
    config = registry.config_for(field_name)

    if isinstance(tags, str):
        wanted = string_to_array(tags, config.separator)
    elif isinstance(tags, Iterable):
        wanted = [str(tag) for tag in tags if tag is not None]
    else:
        wanted = []

    return TagFilter(field=config.array_field, tags=tuple(wanted))
