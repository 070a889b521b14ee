"""Domain models for taggable documents."""

from .base import TaggingError, UnknownTagField
from .normalizer import (
    array_to_slugs,
    array_to_string,
    dedupe,
    filter_tags,
    normalize,
    string_to_array,
    string_to_slugs,
)
from .query import TagFilter, build_filter
from .registry import TagFieldConfig, TagRegistry
from .stop_words import STOP_WORDS
from .tag_set import TagSet
from .document import TaggableDocument
from .repository import DocumentRepository

__all__ = [
    "STOP_WORDS",
    "DocumentRepository",
    "TagFieldConfig",
    "TagFilter",
    "TagRegistry",
    "TagSet",
    "TaggableDocument",
    "TaggingError",
    "UnknownTagField",
    "array_to_slugs",
    "array_to_string",
    "build_filter",
    "dedupe",
    "filter_tags",
    "normalize",
    "string_to_array",
    "string_to_slugs",
]
