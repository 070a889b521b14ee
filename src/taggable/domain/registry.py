"""Per-document-type registry of tag field configuration."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields

from .base import UnknownTagField

logger = logging.getLogger(__name__)

DEFAULT_FIELD = "tags"
DEFAULT_SEPARATOR = " "

# Which representation an attribute name stores
STRING = "string"
ARRAY = "array"
SLUG = "slug"


@dataclass
class TagFieldConfig:
    """Options for one tag field of one document type."""

    name: str
    separator: str = DEFAULT_SEPARATOR
    array_field: str = ""
    slug_field: str = ""
    default_type: str | None = None
    aggregation: bool = False

    def __post_init__(self):
        self.separator = self.separator or DEFAULT_SEPARATOR
        self.array_field = self.array_field or f"{self.name}_array"
        self.slug_field = self.slug_field or f"{self.name}_slug"

    @property
    def attributes(self) -> tuple[str, str, str]:
        """Stored attribute names: string, array and slug."""
        return (self.name, self.array_field, self.slug_field)

    def to_dict(self) -> dict:
        """Serialize for introspection."""
        return asdict(self)


_OPTION_NAMES = frozenset(f.name for f in fields(TagFieldConfig)) - {"name"}


class TagRegistry:
    """Tag field configuration for a single document type.

    Written while the document type is being defined, read afterwards.
    Registering a field again replaces its options.
    """

    def __init__(self, owner: str | None = None):
        """Create an empty registry; ``owner`` names the document type in errors."""
        self.owner = owner
        self._configs: dict[str, TagFieldConfig] = {}
        self._attributes: dict[str, tuple[str, str]] = {}

    def register(self, field_name: str = DEFAULT_FIELD, **options) -> TagFieldConfig:
        """Store options for a tag field, filling in defaults."""
        unknown = set(options) - _OPTION_NAMES
        if unknown:
            raise TypeError(f"Unknown tag field options: {', '.join(sorted(unknown))}")

        if "separator" not in options:
            from taggable.config import settings

            options["separator"] = settings.default_separator

        field_name = str(field_name)
        previous = self._configs.get(field_name)
        if previous is not None:
            for attribute in previous.attributes:
                self._attributes.pop(attribute, None)

        config = TagFieldConfig(name=field_name, **options)
        self._configs[field_name] = config
        self._attributes[config.name] = (STRING, field_name)
        self._attributes[config.array_field] = (ARRAY, field_name)
        self._attributes[config.slug_field] = (SLUG, field_name)

        logger.debug(
            f"Registered tag field {field_name} on {self.owner or 'anonymous document'} "
            f"(array={config.array_field}, slug={config.slug_field})"
        )
        return config

    def contexts(self) -> list[str]:
        """Registered field names in registration order."""
        return list(self._configs)

    def config_for(self, field_name: str) -> TagFieldConfig:
        """Get a field's configuration."""
        try:
            return self._configs[str(field_name)]
        except KeyError:
            raise UnknownTagField(str(field_name), self.owner) from None

    def options_for(self, field_name: str) -> dict:
        """Get a field's configuration as a plain dict."""
        return self.config_for(field_name).to_dict()

    def get_separator(self, field_name: str) -> str:
        """Get the separator a field's string form is split on."""
        return self.config_for(field_name).separator

    def set_separator(self, field_name: str, value) -> None:
        """Change a field's separator; None or empty resets to a space."""
        config = self.config_for(field_name)
        config.separator = DEFAULT_SEPARATOR if value is None or value == "" else str(value)

    def field_for_attribute(self, attribute: str) -> tuple[str, str] | None:
        """Look up ``(kind, field name)`` for a stored attribute name."""
        return self._attributes.get(attribute)

    def copy(self, owner: str | None = None) -> TagRegistry:
        """Copy the registry so a subclass can extend it independently."""
        clone = TagRegistry(owner or self.owner)
        for name, config in self._configs.items():
            options = config.to_dict()
            options.pop("name")
            clone.register(name, **options)
        return clone

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._configs

    def __len__(self) -> int:
        return len(self._configs)

    def __repr__(self) -> str:
        return f"TagRegistry(owner={self.owner!r}, contexts={self.contexts()!r})"
