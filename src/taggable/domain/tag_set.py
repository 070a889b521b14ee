"""TagSet domain model."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class TagSet:
    """An ordered set of tags that knows its derived forms.

    Duplicates and blank entries never make it in; the first occurrence
    of a tag fixes its position.
    """

    __slots__ = ("_tags",)

    def __init__(self, tags: Iterable[str] | None = None):
        """Create a tag set from any iterable of strings."""
        seen: dict[str, None] = {}
        for tag in tags or ():
            if tag is None:
                continue
            tag = str(tag).strip()
            if tag:
                seen.setdefault(tag, None)
        self._tags = tuple(seen)

    @classmethod
    def from_string(cls, text: str | None, separator: str = " ") -> TagSet:
        """Split a delimited string into a tag set."""
        if not isinstance(text, str) or not text:
            return cls()
        return cls(text.split(separator or " "))

    @property
    def tags(self) -> tuple[str, ...]:
        """The tags in first-seen order."""
        return self._tags

    def to_list(self) -> list[str]:
        """Get the tags as a list for array storage."""
        return list(self._tags)

    def to_string(self, separator: str = " ") -> str:
        """Join the tags with the separator."""
        return (separator or " ").join(self._tags)

    def slugs(self, text_utils=None) -> list[str]:
        """Slug each tag, positionally aligned with ``tags``."""
        from .normalizer import array_to_slugs

        return array_to_slugs(self._tags, text_utils=text_utils)

    def issuperset(self, other: Iterable[str]) -> bool:
        """True when every tag of ``other`` is in this set."""
        return set(self._tags).issuperset(other)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __bool__(self) -> bool:
        return bool(self._tags)

    def __eq__(self, other) -> bool:
        """Tag sets are equal when they hold the same tags in the same order."""
        if isinstance(other, TagSet):
            return self._tags == other._tags
        if isinstance(other, (list, tuple)):
            return list(self._tags) == list(other)
        return False

    def __hash__(self) -> int:
        return hash(self._tags)

    def __repr__(self) -> str:
        return f"TagSet({list(self._tags)!r})"

    def __str__(self) -> str:
        return self.to_string()
