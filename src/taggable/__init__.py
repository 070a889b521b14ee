"""Tags with context for storage-backed documents."""

from taggable.domain import (
    DocumentRepository,
    TagFilter,
    TagRegistry,
    TagSet,
    TaggableDocument,
    TaggingError,
    UnknownTagField,
    filter_tags,
)
from taggable.services.aggregation import AggregationStrategyMissing, InMemoryAggregation

__version__ = "0.1.0"

__all__ = [
    "AggregationStrategyMissing",
    "DocumentRepository",
    "InMemoryAggregation",
    "TagFilter",
    "TagRegistry",
    "TagSet",
    "TaggableDocument",
    "TaggingError",
    "UnknownTagField",
    "filter_tags",
]
