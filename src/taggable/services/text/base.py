"""Base protocol and exceptions for text utility providers."""

import re
import unicodedata
from typing import Protocol

from taggable.domain.base import TaggingError

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


class TextUtilitiesError(TaggingError):
    """Raised when a text utility provider cannot be used."""

    pass


class TextUtilities(Protocol):
    """Protocol for the linguistic helpers the normalizer depends on.

    Contract:
    - Both methods are pure and deterministic for a loaded provider
    - Empty input returns empty output, never None
    """

    @property
    def name(self) -> str:
        """Return the provider name for logging/debugging."""
        ...

    def singularize(self, word: str) -> str:
        """Map a plural word form to its singular ("cats" -> "cat")."""
        ...

    def slugify(self, text: str) -> str:
        """Turn a tag into a URL-safe slug."""
        ...


def ascii_slug(text: str) -> str:
    """Lowercase, transliterate to ASCII and hyphenate a string.

    Shared by the providers; accented letters lose their marks
    ("Café Crème" -> "cafe-creme"), anything else becomes a hyphen.
    """
    if not text:
        return ""
    folded = unicodedata.normalize("NFKD", text)
    folded = folded.encode("ascii", "ignore").decode("ascii").lower()
    return _NON_SLUG_RE.sub("-", folded).strip("-")
