"""Base class for documents with tag fields."""

from __future__ import annotations

from typing import Any, ClassVar

from .normalizer import (
    array_to_slugs,
    array_to_string,
    dedupe,
    filter_tags,
    string_to_array,
    string_to_slugs,
)
from .query import TagFilter, build_filter
from .registry import ARRAY, DEFAULT_FIELD, SLUG, STRING, TagFieldConfig, TagRegistry
from .tag_set import TagSet


class TaggableDocument:
    """A document whose tag fields stay consistent in all three forms.

    Declare tag fields on a subclass with ``taggable``:

        class Article(TaggableDocument):
            pass

        Article.taggable("keywords", separator=",")

        article = Article(title="Intro", keywords="Ruby, MongoDB and databases")
        article.keywords          # "ruby,mongodb,database"
        article.keywords_array    # ["ruby", "mongodb", "database"]

    Assigning any of a field's stored attributes (string, array or slug
    form) goes through the registry's attribute lookup table and
    recomputes the other forms. Other attributes are kept as plain
    document data.
    """

    tag_registry: ClassVar[TagRegistry] = TagRegistry("TaggableDocument")
    aggregation_strategy: ClassVar[Any] = None
    __tablename__: ClassVar[str | None] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Each document type owns its configuration
        cls.tag_registry = cls.tag_registry.copy(owner=cls.__name__)

    def __init__(self, id: int | None = None, **attributes):
        """Create a document with tag defaults, then assign ``attributes``."""
        object.__setattr__(self, "id", id)
        object.__setattr__(self, "_attributes", {})
        for context in self.tag_contexts():
            self._store_defaults(self.tag_registry.config_for(context))
        for name, value in attributes.items():
            setattr(self, name, value)

    # Configuration

    @classmethod
    def taggable(cls, field: str = DEFAULT_FIELD, **options) -> TagFieldConfig:
        """Declare a tag field with its companion array and slug fields.

        Options:
            separator: What the string form is split on (default " ")
            array_field: Attribute holding the tag array (default <field>_array)
            slug_field: Attribute holding the slug array (default <field>_slug)
            default_type: Optional default type label for the tags
            aggregation: Whether tag counts are expected for this field
        """
        return cls.tag_registry.register(field, **options)

    @classmethod
    def tag_contexts(cls) -> list[str]:
        """Registered tag fields in registration order."""
        return cls.tag_registry.contexts()

    @classmethod
    def tag_options_for(cls, context: str) -> dict:
        """Options of a registered tag field."""
        return cls.tag_registry.options_for(context)

    @classmethod
    def get_tag_separator_for(cls, context: str) -> str:
        return cls.tag_registry.get_separator(context)

    @classmethod
    def set_tag_separator_for(cls, context: str, value) -> None:
        cls.tag_registry.set_separator(context, value)

    @classmethod
    def table_name(cls) -> str:
        """Table the documents are stored in."""
        return cls.__tablename__ or cls.__name__.lower()

    # Queries

    @classmethod
    def tagged_with(cls, context: str, tags) -> TagFilter:
        """Filter for documents tagged with all of ``tags``.

        ``tags`` is a list, or a string split on the field's separator.
        """
        return build_filter(cls.tag_registry, context, tags)

    @classmethod
    def _aggregation(cls):
        if cls.aggregation_strategy is not None:
            return cls.aggregation_strategy
        from taggable.services.aggregation import get_aggregation_strategy

        return get_aggregation_strategy()

    @classmethod
    async def tags_for(cls, context: str, conditions=None) -> list[str]:
        """Distinct tags of a field across the collection.

        Raises:
            UnknownTagField: If the field is not registered
            AggregationStrategyMissing: If no aggregation strategy is configured
        """
        cls.tag_registry.config_for(context)
        return await cls._aggregation().tags_for(cls, context, conditions)

    @classmethod
    async def tags_with_weight_for(cls, context: str, conditions=None) -> list[tuple[str, int]]:
        """``(tag, count)`` pairs of a field across the collection.

        Raises:
            UnknownTagField: If the field is not registered
            AggregationStrategyMissing: If no aggregation strategy is configured
        """
        cls.tag_registry.config_for(context)
        return await cls._aggregation().tags_with_weight_for(cls, context, conditions)

    # Tag accessors

    def _store_defaults(self, config: TagFieldConfig) -> None:
        self._attributes.setdefault(config.name, "")
        self._attributes.setdefault(config.array_field, [])
        self._attributes.setdefault(config.slug_field, [])

    def get_tag_value(self, context: str, kind: str = STRING):
        """Read one stored form (string, array or slug) of a tag field."""
        config = self.tag_registry.config_for(context)
        name = {STRING: config.name, ARRAY: config.array_field, SLUG: config.slug_field}[kind]
        return self._attributes.get(name)

    def set_tag_string(self, context: str, value) -> None:
        """Clean free text into the field, then derive its array and slugs.

        The cleaned string is always comma joined; the array and slugs are
        split from it on the field's separator.
        """
        config = self.tag_registry.config_for(context)
        cleaned = filter_tags(value)
        self._attributes[config.name] = cleaned
        self._attributes[config.array_field] = string_to_array(cleaned, config.separator)
        self._attributes[config.slug_field] = string_to_slugs(cleaned, config.separator)

    def set_tag_array(self, context: str, value) -> None:
        """Store a tag array as given (minus repeats), then derive string and slugs."""
        config = self.tag_registry.config_for(context)
        if isinstance(value, str):
            value = string_to_array(value, config.separator)
        tags = dedupe(str(tag) for tag in value or () if tag is not None and str(tag).strip())
        self._attributes[config.array_field] = tags
        self._attributes[config.name] = array_to_string(tags, config.separator)
        self._attributes[config.slug_field] = array_to_slugs(tags)

    def set_tag_slugs(self, context: str, value) -> None:
        """Store slugs computed from the given tags."""
        config = self.tag_registry.config_for(context)
        self._attributes[config.slug_field] = array_to_slugs(value)

    def tag_set(self, context: str = DEFAULT_FIELD) -> TagSet:
        """The field's tags as a TagSet."""
        return TagSet(self.get_tag_value(context, ARRAY))

    # Attribute plumbing

    def __getattr__(self, name: str):
        attributes = self.__dict__.get("_attributes")
        if attributes is not None and name in attributes:
            return attributes[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value) -> None:
        if name == "id" or name.startswith("_"):
            object.__setattr__(self, name, value)
            return

        entry = self.tag_registry.field_for_attribute(name)
        if entry is None:
            self._attributes[name] = value
            return

        kind, context = entry
        if kind == STRING:
            self.set_tag_string(context, value)
        elif kind == ARRAY:
            self.set_tag_array(context, value)
        else:
            self.set_tag_slugs(context, value)

    def to_dict(self) -> dict:
        """Serialize every stored attribute, tag forms included."""
        return {"id": self.id, **self._attributes}

    @classmethod
    def from_dict(cls, data: dict) -> TaggableDocument:
        """Hydrate from storage without re-running normalization."""
        document = cls(id=data.get("id"))
        for name, value in data.items():
            if name != "id":
                document._attributes[name] = value
        return document

    def __eq__(self, other) -> bool:
        if not isinstance(other, TaggableDocument) or type(self) is not type(other):
            return False
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
