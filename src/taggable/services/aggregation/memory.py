"""In-memory aggregation over a collection of documents."""

from collections import Counter
from collections.abc import Iterable, Mapping

from taggable.domain.query import TagFilter


def _value(document, name: str):
    if isinstance(document, Mapping):
        return document.get(name)
    return getattr(document, name, None)


class InMemoryAggregation:
    """Count tags across documents already loaded in memory.

    Conditions may be a TagFilter or a dict of attribute equality checks.
    """

    def __init__(self, documents: Iterable = ()):
        """Initialize with the documents to aggregate over."""
        self.documents = list(documents)

    def add(self, *documents) -> None:
        """Add documents to the collection."""
        self.documents.extend(documents)

    def _matching(self, conditions) -> list:
        if conditions is None:
            return self.documents
        if isinstance(conditions, TagFilter):
            return [doc for doc in self.documents if conditions.matches(doc)]
        return [
            doc
            for doc in self.documents
            if all(_value(doc, key) == value for key, value in conditions.items())
        ]

    def _counts(self, document_type, context: str, conditions) -> Counter:
        array_field = document_type.tag_options_for(context)["array_field"]
        counts = Counter()
        for document in self._matching(conditions):
            counts.update(set(_value(document, array_field) or ()))
        return counts

    async def tags_for(self, document_type, context: str, conditions=None) -> list[str]:
        """Return the distinct tags used in a tag field."""
        return sorted(self._counts(document_type, context, conditions))

    async def tags_with_weight_for(
        self, document_type, context: str, conditions=None
    ) -> list[tuple[str, int]]:
        """Return ``(tag, count)`` pairs sorted by tag."""
        return sorted(self._counts(document_type, context, conditions).items())
