"""Rule-based text utilities for testing."""

from .base import ascii_slug


class SimpleTextUtilities:
    """Deterministic provider with a handful of English suffix rules.

    Loads nothing, so it is the provider used by the test suite.
    """

    def __init__(self):
        self._call_count = 0

    @property
    def name(self) -> str:
        """Return the provider name for logging/debugging."""
        return "simple"

    @property
    def call_count(self) -> int:
        """How many times singularize has been called."""
        return self._call_count

    def singularize(self, word: str) -> str:
        """Strip common plural suffixes."""
        self._call_count += 1
        if not word:
            return ""

        lower = word.lower()
        if lower.endswith("ies") and len(word) > 4:
            return word[:-3] + "y"
        if lower.endswith("sses"):
            return word[:-2]
        if lower.endswith("s") and not lower.endswith(("ss", "us", "is")) and len(word) > 3:
            return word[:-1]
        return word

    def slugify(self, text: str) -> str:
        """Turn a tag into a URL-safe slug."""
        return ascii_slug(text)
