"""Base protocol and exceptions for tag aggregation strategies."""

from typing import Protocol

from taggable.domain.base import TaggingError


class AggregationStrategyMissing(TaggingError):  # noqa: N818
    """Raised when tag aggregation is requested but no strategy is configured."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or (
                "Tag aggregation is not configured. Assign an aggregation strategy "
                "to the document class or set TAGGABLE_AGGREGATION_STRATEGY:\n"
                "  - TAGGABLE_AGGREGATION_STRATEGY=postgres (count tags in PostgreSQL)"
            )
        )


class AggregationStrategy(Protocol):
    """Protocol for tag aggregation strategies.

    Contract:
    - ``context`` is a registered tag field of ``document_type``
    - ``conditions`` narrows the documents counted; None means all
    - Results are sorted by tag so callers get stable output
    """

    async def tags_for(self, document_type, context: str, conditions=None) -> list[str]:
        """Return the distinct tags used in a tag field."""
        ...

    async def tags_with_weight_for(
        self, document_type, context: str, conditions=None
    ) -> list[tuple[str, int]]:
        """Return ``(tag, count)`` pairs for a tag field."""
        ...
