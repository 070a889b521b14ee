"""spaCy-backed text utilities."""

import logging

from .base import TextUtilitiesError, ascii_slug

logger = logging.getLogger(__name__)

# Fine-grained Penn Treebank tags for plural nouns
PLURAL_NOUN_TAGS = frozenset({"NNS", "NNPS"})


class SpacyTextUtilities:
    """Singularize through spaCy's lemmatizer.

    Only plural nouns are replaced by their lemma, so "running" stays
    "running" while "stories" becomes "story".
    """

    def __init__(self, model: str | None = None):
        """Initialize with a model name, defaulting to the configured one."""
        if model is None:
            from taggable.config import settings

            model = settings.spacy_model
        self.model = model
        self._nlp = None

    @property
    def name(self) -> str:
        """Return the provider name for logging/debugging."""
        return f"spacy-{self.model}"

    @property
    def nlp(self):
        """Lazy load the spaCy model once."""
        if self._nlp is None:
            import spacy

            try:
                # Only load what we need for lemmatization
                self._nlp = spacy.load(self.model, disable=["parser", "ner"])
            except OSError as e:
                raise TextUtilitiesError(
                    f"spaCy model '{self.model}' is not installed. "
                    f"Install it with: python -m spacy download {self.model}"
                ) from e
            logger.info(f"Loaded spaCy model {self.model}")
        return self._nlp

    def singularize(self, word: str) -> str:
        """Replace a trailing plural noun by its lemma.

        Only the last word of a multi-word phrase is singularized.
        """
        if not word or not word.strip():
            return ""

        doc = self.nlp(word)
        if not len(doc):
            return word

        token = doc[-1]
        if token.tag_ in PLURAL_NOUN_TAGS and token.lemma_:
            end = token.idx + len(token.text)
            return word[: token.idx] + token.lemma_ + word[end:]
        return word

    def slugify(self, text: str) -> str:
        """Turn a tag into a URL-safe slug."""
        return ascii_slug(text)
